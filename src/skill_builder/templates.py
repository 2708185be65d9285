"""String templates for every file in a generated skill package.

All renderers are pure: they take a :class:`SkillDescription` and return file
contents. :func:`render_project` assembles the full, runtime-specific file set.
"""

from __future__ import annotations

import json

from skill_builder.config import DEFAULT_CONFIG, SkillBuilderConfig
from skill_builder.constants import (
    DEFAULT_SAFETY_NOTES,
    EXAMPLES_DIRNAME,
    GITIGNORE_FILENAME,
    GITIGNORE_PATTERNS,
    README_FILENAME,
    SKILL_JSON_FILENAME,
)
from skill_builder.models import RenderedFile, Runtime, SafetyAnswers, SkillDescription

MODIFIES_FILES_NOTE = "- This skill may modify existing files"
CONFIRMATION_NOTE = "- All destructive operations require explicit confirmation"
READ_ONLY_NOTE = "- This skill does not modify existing files"
NETWORK_NOTE = "- No network requests are made without user consent"

_HELP_COLUMN_WIDTH = 15


def render_safety(answers: SafetyAnswers) -> str:
    notes: list[str] = []
    if answers.modifies_files:
        notes.append(MODIFIES_FILES_NOTE)
        if answers.needs_confirmation:
            notes.append(CONFIRMATION_NOTE)
    else:
        notes.append(READ_ONLY_NOTE)
    notes.append(NETWORK_NOTE)
    return "\n".join(notes)


def _dump_json(payload: dict[str, object]) -> str:
    return json.dumps(payload, indent=2, ensure_ascii=False) + "\n"


def render_skill_json(skill: SkillDescription, config: SkillBuilderConfig = DEFAULT_CONFIG) -> str:
    return _dump_json(
        {
            "name": skill.name,
            "title": skill.title,
            "description": skill.description,
            "version": config.initial_version,
            "author": skill.author,
            "license": skill.license,
            "runtime": skill.runtime.value,
            "entry": skill.entry,
            "tags": list(skill.tags),
            "commands": [command.to_dict() for command in skill.commands],
        }
    )


def render_package_json(skill: SkillDescription, config: SkillBuilderConfig = DEFAULT_CONFIG) -> str:
    entry = skill.entry
    return _dump_json(
        {
            "name": skill.name,
            "version": config.initial_version,
            "description": skill.description,
            "main": entry,
            "bin": {skill.name: f"./{entry}"},
            "scripts": {"test": 'echo "Error: no test specified" && exit 1'},
            "keywords": list(skill.tags),
            "author": skill.author,
            "license": skill.license,
            "engines": {"node": config.node_engine},
        }
    )


def render_requirements(skill: SkillDescription) -> str:
    return f"# Python dependencies for {skill.name}\n"


def render_readme(skill: SkillDescription, config: SkillBuilderConfig = DEFAULT_CONFIG) -> str:
    profile = skill.profile
    command_lines = "\n".join(f"- `{command.name}`: {command.description}" for command in skill.commands)
    safety = skill.safety or DEFAULT_SAFETY_NOTES
    return f"""# {skill.title}

{skill.description}

## Install

```bash
{config.install_command} {skill.name}
```

## Usage

```bash
{skill.name} <command> [options]
```

## Commands

{command_lines}

## Examples

```bash
# Example usage
{skill.name} {skill.first_command_name}
```

## Safety

{safety}

## Development

```bash
# Clone the repository
git clone https://github.com/{skill.author}/{skill.name}
cd {skill.name}

# Install dependencies
{profile.install_command}

# Test locally
{profile.run_command}
```

## License

{skill.license}
"""


def render_node_entry(skill: SkillDescription, config: SkillBuilderConfig = DEFAULT_CONFIG) -> str:
    help_lines = [
        "",
        skill.title,
        "",
        f"Usage: {skill.name} <command> [options]",
        "",
        "Commands:",
        *(f"  {command.name.ljust(_HELP_COLUMN_WIDTH)} {command.description}" for command in skill.commands),
        "",
        "Options:",
        "  --help, -h      Show this help message",
        "  --version, -v   Show version",
    ]
    help_literal = ",\n".join(f"    {json.dumps(line, ensure_ascii=False)}" for line in help_lines)
    version_line = json.dumps(f"{skill.name} v{config.initial_version}", ensure_ascii=False)
    hint_line = json.dumps(f'Run "{skill.name} --help" for usage information', ensure_ascii=False)

    cases = []
    for command in skill.commands:
        cases.append(
            f"  case '{command.name}':\n"
            f"    console.log('Executing {command.name}...');\n"
            f"    // TODO: Implement {command.name} command\n"
            "    break;"
        )
    case_block = "\n".join(cases)

    return f"""#!/usr/bin/env node

const args = process.argv.slice(2);

function showHelp() {{
  console.log([
{help_literal}
  ].join('\\n'));
}}

function showVersion() {{
  console.log({version_line});
}}

// Parse command
const command = args[0];

if (!command || command === '--help' || command === '-h') {{
  showHelp();
  process.exit(0);
}}

if (command === '--version' || command === '-v') {{
  showVersion();
  process.exit(0);
}}

// Handle commands
switch (command) {{
{case_block}

  default:
    console.error(`Unknown command: ${{command}}`);
    console.error({hint_line});
    process.exit(1);
}}
"""


def python_identifier(command_name: str) -> str:
    return command_name.replace("-", "_")


def _argparse_help(value: str) -> str:
    # argparse %-formats help strings.
    return value.replace("%", "%%")


def _docstring_text(value: str) -> str:
    return value.replace("\\", "\\\\").replace('"""', '\\"\\"\\"')


def render_python_entry(skill: SkillDescription, config: SkillBuilderConfig = DEFAULT_CONFIG) -> str:
    parser_blocks = []
    dispatch_blocks = []
    for command in skill.commands:
        ident = python_identifier(command.name)
        executing = f"Executing {command.name}..."
        parser_blocks.append(
            f"    # {command.name} command\n"
            f"    {ident}_parser = subparsers.add_parser({command.name!r}, help={_argparse_help(command.description)!r})\n"
            f"    # TODO: Add arguments for {command.name}\n"
        )
        dispatch_blocks.append(
            f"    if args.command == {command.name!r}:\n"
            f"        print({executing!r})\n"
            f"        # TODO: Implement {command.name} command\n"
            "        return\n"
        )
    parser_section = "\n".join(parser_blocks)
    dispatch_section = "\n".join(dispatch_blocks)
    version_string = f"{skill.name} {config.initial_version}"

    return f'''#!/usr/bin/env python3
"""
{_docstring_text(skill.title)}
{_docstring_text(skill.description)}
"""

import argparse
import sys


def main():
    parser = argparse.ArgumentParser(
        description={skill.description!r},
        prog={skill.name!r},
    )

    parser.add_argument('--version', action='version', version={version_string!r})

    subparsers = parser.add_subparsers(dest='command', help='Available commands')

{parser_section}
    args = parser.parse_args()

    if not args.command:
        parser.print_help()
        sys.exit(0)

{dispatch_section}
    parser.error(f'unknown command: {{args.command}} (run "{skill.name} --help" for usage information)')


if __name__ == '__main__':
    main()
'''


def render_gitignore() -> str:
    return "\n".join(GITIGNORE_PATTERNS) + "\n"


def render_examples_readme(skill: SkillDescription) -> str:
    return f"""# Example for {skill.title}

This directory contains example usage of {skill.name}.

## Basic Example

```bash
{skill.name} {skill.first_command_name}
```
"""


def render_project(skill: SkillDescription, config: SkillBuilderConfig = DEFAULT_CONFIG) -> list[RenderedFile]:
    """Render every file of a skill package in write order.

    Node skills get ``package.json`` and ``index.js``; Python skills get
    ``main.py`` and ``requirements.txt``. Only the entry file is executable.
    """
    files = [
        RenderedFile(SKILL_JSON_FILENAME, render_skill_json(skill, config)),
        RenderedFile(README_FILENAME, render_readme(skill, config)),
    ]
    profile = skill.profile
    if skill.runtime is Runtime.NODE:
        files.append(RenderedFile(profile.manifest, render_package_json(skill, config)))
        files.append(RenderedFile(profile.entry, render_node_entry(skill, config), executable=True))
    else:
        files.append(RenderedFile(profile.entry, render_python_entry(skill, config), executable=True))
        files.append(RenderedFile(profile.manifest, render_requirements(skill)))
    files.append(RenderedFile(GITIGNORE_FILENAME, render_gitignore()))
    files.append(RenderedFile(f"{EXAMPLES_DIRNAME}/{README_FILENAME}", render_examples_readme(skill)))
    return files
