"""Scaffold a skill without a terminal, then validate it.

Run from any scratch directory:
    python examples/scaffold_programmatic.py
"""

from __future__ import annotations

from pathlib import Path

from skill_builder import ScriptedPrompter, SkillCollector, check_structure, write_project


def main() -> None:
    prompter = ScriptedPrompter(
        answers=[
            "weather-report",
            "Weather Report",
            "Prints a short weather summary",
            "octocat",
            "python",
            "weather, cli",
            "MIT",
            "today",
            "Show today's forecast",
            False,
            False,
            True,
        ]
    )
    skill = SkillCollector(prompter).collect()
    skill_dir = write_project(skill, Path.cwd(), on_progress=lambda path: print(f"wrote {path}"))

    report = check_structure(skill_dir)
    print(f"errors={report.errors} warnings={report.warnings}")


if __name__ == "__main__":
    main()
