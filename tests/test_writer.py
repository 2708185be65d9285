from __future__ import annotations

import json
import stat
import subprocess
import sys
from pathlib import Path

import pytest

from skill_builder.errors import ProjectExistsError, ProjectWriteError
from skill_builder.models import CommandDescriptor, Runtime, SkillDescription
from skill_builder.writer import write_project


def _skill(runtime: Runtime) -> SkillDescription:
    return SkillDescription(
        name="file-tidy",
        title="File Tidy",
        description="Tidies up files",
        author="octocat",
        runtime=runtime,
        tags=["files", "cleanup"],
        license="MIT",
        commands=[CommandDescriptor(name="scan", description="Scan a folder")],
        safety="- This skill does not modify existing files",
    )


def test_write_node_project(tmp_path: Path) -> None:
    progress: list[str] = []
    skill_dir = write_project(_skill(Runtime.NODE), tmp_path, on_progress=progress.append)

    assert skill_dir == tmp_path / "file-tidy"
    assert progress == ["skill.json", "README.md", "package.json", "index.js", ".gitignore", "examples/README.md"]
    metadata = json.loads((skill_dir / "skill.json").read_text(encoding="utf-8"))
    entry = skill_dir / metadata["entry"]
    assert metadata["entry"] == "index.js"
    assert entry.is_file()
    assert stat.S_IMODE(entry.stat().st_mode) == 0o755
    assert (skill_dir / "package.json").is_file()
    assert not (skill_dir / "requirements.txt").exists()
    assert (skill_dir / "examples" / "README.md").is_file()


def test_write_python_project(tmp_path: Path) -> None:
    skill_dir = write_project(_skill(Runtime.PYTHON), tmp_path)

    assert not (skill_dir / "package.json").exists()
    assert (skill_dir / "requirements.txt").read_text(encoding="utf-8") == "# Python dependencies for file-tidy\n"
    assert stat.S_IMODE((skill_dir / "main.py").stat().st_mode) == 0o755
    assert not (skill_dir / "index.js").exists()


def test_write_project_refuses_existing_directory(tmp_path: Path) -> None:
    existing = tmp_path / "file-tidy"
    existing.mkdir()
    (existing / "keep.txt").write_text("mine", encoding="utf-8")

    with pytest.raises(ProjectExistsError, match='Directory "file-tidy" already exists'):
        write_project(_skill(Runtime.NODE), tmp_path)

    assert [p.name for p in existing.iterdir()] == ["keep.txt"]
    assert (existing / "keep.txt").read_text(encoding="utf-8") == "mine"


def test_write_project_wraps_filesystem_errors(tmp_path: Path) -> None:
    missing_parent = tmp_path / "does" / "not" / "exist"
    with pytest.raises(ProjectWriteError, match="Error creating skill"):
        write_project(_skill(Runtime.NODE), missing_parent)


def test_python_entry_help_runs_with_percent_in_description(tmp_path: Path) -> None:
    skill = _skill(Runtime.PYTHON)
    skill.commands = [CommandDescriptor(name="scan", description="Scan 100% of files")]
    entry = write_project(skill, tmp_path) / "main.py"

    for args in (["--help"], []):
        result = subprocess.run(
            [sys.executable, str(entry), *args],
            capture_output=True,
            text=True,
            timeout=30,
        )
        assert result.returncode == 0, result.stderr
        assert "Scan 100% of files" in result.stdout


def test_python_entry_dispatches_and_rejects_unknown_command(tmp_path: Path) -> None:
    entry = write_project(_skill(Runtime.PYTHON), tmp_path) / "main.py"

    result = subprocess.run([sys.executable, str(entry), "scan"], capture_output=True, text=True, timeout=30)
    assert result.returncode == 0
    assert "Executing scan..." in result.stdout

    result = subprocess.run([sys.executable, str(entry), "bogus"], capture_output=True, text=True, timeout=30)
    assert result.returncode != 0
