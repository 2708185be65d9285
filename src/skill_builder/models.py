from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum

from skill_builder.constants import (
    NODE_ENTRY_FILENAME,
    PACKAGE_JSON_FILENAME,
    PYTHON_ENTRY_FILENAME,
    REQUIREMENTS_FILENAME,
)


class Runtime(StrEnum):
    NODE = "node"
    PYTHON = "python"

    @property
    def profile(self) -> RuntimeProfile:
        return RUNTIME_PROFILES[self]


@dataclass(frozen=True, slots=True)
class RuntimeProfile:
    """Per-runtime file layout and developer commands."""

    runtime: Runtime
    label: str
    entry: str
    manifest: str
    install_command: str
    run_command: str


RUNTIME_PROFILES: dict[Runtime, RuntimeProfile] = {
    Runtime.NODE: RuntimeProfile(
        runtime=Runtime.NODE,
        label="Node.js",
        entry=NODE_ENTRY_FILENAME,
        manifest=PACKAGE_JSON_FILENAME,
        install_command="npm install",
        run_command=f"node {NODE_ENTRY_FILENAME}",
    ),
    Runtime.PYTHON: RuntimeProfile(
        runtime=Runtime.PYTHON,
        label="Python",
        entry=PYTHON_ENTRY_FILENAME,
        manifest=REQUIREMENTS_FILENAME,
        install_command=f"pip install -r {REQUIREMENTS_FILENAME}",
        run_command=f"python {PYTHON_ENTRY_FILENAME}",
    ),
}


@dataclass(slots=True)
class CommandDescriptor:
    name: str
    description: str

    def to_dict(self) -> dict[str, str]:
        return {"name": self.name, "description": self.description}


@dataclass(slots=True)
class SafetyAnswers:
    modifies_files: bool = False
    needs_confirmation: bool = True


@dataclass(slots=True)
class SkillDescription:
    """Answers collected during ``create``; only its rendered files persist."""

    name: str
    title: str
    description: str
    author: str
    runtime: Runtime
    tags: list[str]
    license: str
    commands: list[CommandDescriptor] = field(default_factory=list)
    safety: str = ""

    @property
    def profile(self) -> RuntimeProfile:
        return self.runtime.profile

    @property
    def entry(self) -> str:
        return self.profile.entry

    @property
    def first_command_name(self) -> str:
        if self.commands:
            return self.commands[0].name
        return "help"


@dataclass(slots=True)
class RenderedFile:
    path: str
    content: str
    executable: bool = False


@dataclass(slots=True)
class CheckReport:
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    @property
    def passed(self) -> bool:
        return not self.errors and not self.warnings

    @property
    def exit_code(self) -> int:
        return 1 if self.errors else 0
