from __future__ import annotations

import ast
import json

from skill_builder.models import CommandDescriptor, Runtime, SafetyAnswers, SkillDescription
from skill_builder.templates import (
    render_examples_readme,
    render_node_entry,
    render_package_json,
    render_project,
    render_python_entry,
    render_readme,
    render_requirements,
    render_safety,
    render_skill_json,
)


def _skill(runtime: Runtime = Runtime.NODE, **overrides: object) -> SkillDescription:
    values: dict[str, object] = {
        "name": "file-tidy",
        "title": "File Tidy",
        "description": "Tidies up files",
        "author": "octocat",
        "runtime": runtime,
        "tags": ["files", "cleanup"],
        "license": "MIT",
        "commands": [
            CommandDescriptor(name="scan", description="Scan a folder"),
            CommandDescriptor(name="clean-up", description="Remove stray files"),
        ],
        "safety": render_safety(SafetyAnswers()),
    }
    values.update(overrides)
    return SkillDescription(**values)  # type: ignore[arg-type]


def test_render_safety_decision_table() -> None:
    assert render_safety(SafetyAnswers(modifies_files=False, needs_confirmation=True)) == (
        "- This skill does not modify existing files\n- No network requests are made without user consent"
    )
    assert render_safety(SafetyAnswers(modifies_files=True, needs_confirmation=True)) == (
        "- This skill may modify existing files\n"
        "- All destructive operations require explicit confirmation\n"
        "- No network requests are made without user consent"
    )
    assert render_safety(SafetyAnswers(modifies_files=True, needs_confirmation=False)) == (
        "- This skill may modify existing files\n- No network requests are made without user consent"
    )


def test_render_skill_json_shape() -> None:
    payload = json.loads(render_skill_json(_skill(Runtime.PYTHON)))
    assert payload == {
        "name": "file-tidy",
        "title": "File Tidy",
        "description": "Tidies up files",
        "version": "0.1.0",
        "author": "octocat",
        "license": "MIT",
        "runtime": "python",
        "entry": "main.py",
        "tags": ["files", "cleanup"],
        "commands": [
            {"name": "scan", "description": "Scan a folder"},
            {"name": "clean-up", "description": "Remove stray files"},
        ],
    }


def test_render_package_json_for_node() -> None:
    payload = json.loads(render_package_json(_skill()))
    assert payload["main"] == "index.js"
    assert payload["bin"] == {"file-tidy": "./index.js"}
    assert payload["keywords"] == ["files", "cleanup"]
    assert payload["engines"] == {"node": ">=14.0.0"}


def test_render_requirements_is_single_comment_line() -> None:
    assert render_requirements(_skill(Runtime.PYTHON)) == "# Python dependencies for file-tidy\n"


def test_render_readme_sections_and_command_bullets() -> None:
    readme = render_readme(_skill())
    for section in ("Install", "Usage", "Commands", "Examples", "Safety", "Development", "License"):
        assert f"\n## {section}\n" in readme
    assert "- `scan`: Scan a folder" in readme
    assert "- `clean-up`: Remove stray files" in readme
    assert "npx skills install file-tidy" in readme
    assert "file-tidy scan" in readme
    assert "- This skill does not modify existing files" in readme


def test_render_readme_uses_runtime_commands() -> None:
    assert "npm install" in render_readme(_skill(Runtime.NODE))
    readme = render_readme(_skill(Runtime.PYTHON))
    assert "pip install -r requirements.txt" in readme
    assert "python main.py" in readme


def test_render_readme_default_safety_block() -> None:
    readme = render_readme(_skill(safety=""))
    assert "- This skill does not modify files without confirmation" in readme


def test_render_node_entry_branches() -> None:
    entry = render_node_entry(_skill())
    assert entry.startswith("#!/usr/bin/env node\n")
    assert "  case 'scan':" in entry
    assert "  case 'clean-up':" in entry
    assert "default:" in entry
    assert "process.exit(1);" in entry
    assert 'Run \\"file-tidy --help\\" for usage information' in entry
    assert '"file-tidy v0.1.0"' in entry


def test_render_node_entry_escapes_title_quotes() -> None:
    entry = render_node_entry(_skill(title='The "best" `tool`'))
    assert '"The \\"best\\" `tool`"' in entry


def test_render_python_entry_is_valid_python() -> None:
    entry = render_python_entry(_skill(Runtime.PYTHON, description="It's \"quoted\""))
    assert entry.startswith("#!/usr/bin/env python3\n")
    tree = ast.parse(entry)
    assert any(isinstance(node, ast.FunctionDef) and node.name == "main" for node in tree.body)
    assert "clean_up_parser = subparsers.add_parser('clean-up'" in entry
    assert "if args.command == 'scan':" in entry
    assert "parser.error(" in entry


def test_render_examples_readme_uses_first_command() -> None:
    content = render_examples_readme(_skill())
    assert content.startswith("# Example for File Tidy\n")
    assert "file-tidy scan" in content


def test_render_examples_readme_falls_back_to_help() -> None:
    assert "file-tidy help" in render_examples_readme(_skill(commands=[]))


def test_render_project_node_file_set() -> None:
    files = render_project(_skill(Runtime.NODE))
    assert [f.path for f in files] == [
        "skill.json",
        "README.md",
        "package.json",
        "index.js",
        ".gitignore",
        "examples/README.md",
    ]
    assert [f.path for f in files if f.executable] == ["index.js"]


def test_render_project_python_file_set() -> None:
    files = render_project(_skill(Runtime.PYTHON))
    paths = [f.path for f in files]
    assert "package.json" not in paths
    assert "requirements.txt" in paths
    assert [f.path for f in files if f.executable] == ["main.py"]
    metadata = json.loads(files[0].content)
    assert metadata["entry"] == "main.py"
