from __future__ import annotations

import argparse
import logging
from collections.abc import Sequence
from pathlib import Path

from rich.console import Console

from skill_builder.checker import check_structure
from skill_builder.collector import SkillCollector
from skill_builder.config import DEFAULT_CONFIG, SkillBuilderConfig
from skill_builder.constants import SKILL_BUILDER_NAME, SKILL_BUILDER_VERSION
from skill_builder.errors import PromptAborted, SkillBuilderError
from skill_builder.prompter import Prompter, RichPrompter
from skill_builder.writer import write_project

logger = logging.getLogger(__name__)

HELP_TEXT = f"""
Skill Builder

Create compliant skills for the skills registry

Usage:
  {SKILL_BUILDER_NAME} <command> [options]

Commands:
  create      Create a new skill interactively
  validate    Validate an existing skill structure

Options:
  --help, -h      Show this help message
  --version, -v   Show version
  --verbose       Log debug details to stderr
"""

COMMANDS = ("create", "validate")


def _say(console: Console, message: str, style: str | None = None) -> None:
    console.print(message, style=style, markup=False, highlight=False, soft_wrap=True)


def run_create(
    console: Console,
    err_console: Console,
    *,
    prompter: Prompter | None = None,
    cwd: Path | None = None,
    config: SkillBuilderConfig = DEFAULT_CONFIG,
) -> int:
    _say(console, "\nSkill Builder - Create a new skill\n", "bold cyan")
    _say(console, "This tool will help you create a compliant skill for the skills registry\n", "dim")

    prompter = prompter or RichPrompter(console)
    try:
        skill = SkillCollector(prompter, config).collect()
    except PromptAborted:
        _say(console, "\nSkill creation cancelled", "yellow")
        return 0

    parent_dir = Path(cwd) if cwd is not None else Path.cwd()
    _say(console, f"\nCreating skill in {parent_dir / skill.name}...", "cyan")
    try:
        write_project(
            skill,
            parent_dir,
            config=config,
            on_progress=lambda path: _say(console, f"  + Creating {path}", "dim"),
        )
    except SkillBuilderError as exc:
        _say(err_console, f"\n{exc}", "red")
        return 1

    profile = skill.profile
    _say(console, f'\nSkill "{skill.name}" created successfully!\n', "bold green")
    _say(console, "Next steps:", "cyan")
    for line in (
        f"  cd {skill.name}",
        f"  {profile.install_command}",
        f"  {profile.run_command} --help",
        "",
        "  # Implement your commands in the entry file",
        "  # Test your skill",
        "  # Publish to the skills registry",
    ):
        _say(console, line, "dim")
    return 0


def run_validate(
    console: Console,
    err_console: Console,
    *,
    cwd: Path | None = None,
    config: SkillBuilderConfig = DEFAULT_CONFIG,
) -> int:
    _say(console, "\nSkill Validator\n", "bold cyan")
    directory = Path(cwd) if cwd is not None else Path.cwd()
    try:
        report = check_structure(directory, config=config)
    except SkillBuilderError as exc:
        _say(err_console, str(exc), "red")
        return 1

    _say(console, "")
    if report.passed:
        _say(console, "Skill validation passed!\n", "bold green")
        _say(console, "Your skill appears to be compliant with the registry requirements.", "dim")
        return 0

    if report.errors:
        _say(console, f"{len(report.errors)} error(s) found:\n", "bold red")
        for error in report.errors:
            _say(console, f"  - {error}", "red")
        _say(console, "")
    if report.warnings:
        _say(console, f"{len(report.warnings)} warning(s):\n", "bold yellow")
        for warning in report.warnings:
            _say(console, f"  - {warning}", "yellow")
        _say(console, "")
    return report.exit_code


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog=SKILL_BUILDER_NAME, add_help=False)
    parser.add_argument("command", nargs="?", default=None)
    parser.add_argument("-h", "--help", action="store_true", dest="show_help")
    parser.add_argument("-v", "--version", action="store_true", dest="show_version")
    parser.add_argument("--verbose", action="store_true", help="Log debug details to stderr")
    return parser


def main(argv: Sequence[str] | None = None, *, prompter: Prompter | None = None) -> int:
    args, extra = build_parser().parse_known_args(argv)
    console = Console()
    err_console = Console(stderr=True)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    if extra:
        return _reject(err_console, f"Unexpected argument: {extra[0]}")
    if args.command is not None and args.command not in COMMANDS:
        return _reject(err_console, f"Unknown command: {args.command}")

    if args.show_help or (args.command is None and not args.show_version):
        _say(console, HELP_TEXT)
        return 0
    if args.show_version:
        _say(console, f"{SKILL_BUILDER_NAME} v{SKILL_BUILDER_VERSION}")
        return 0

    logger.debug("Dispatching command %s", args.command)
    if args.command == "create":
        return run_create(console, err_console, prompter=prompter)
    return run_validate(console, err_console)


def _reject(err_console: Console, message: str) -> int:
    _say(err_console, message, "red")
    _say(err_console, f'Run "{SKILL_BUILDER_NAME} --help" for usage information')
    return 1


if __name__ == "__main__":
    raise SystemExit(main())
