from __future__ import annotations

from pathlib import Path


class SkillBuilderError(Exception):
    """Base error for skill scaffolding and validation."""


class ConfigError(SkillBuilderError):
    """Raised when builder settings are inconsistent."""


class PromptAborted(SkillBuilderError):
    """Raised when the operator aborts the interactive flow."""


class ProjectExistsError(SkillBuilderError):
    """Raised when the target skill directory is already present."""

    def __init__(self, path: Path) -> None:
        super().__init__(f'Directory "{path.name}" already exists')
        self.path = path


class ProjectWriteError(SkillBuilderError):
    """Raised when a filesystem operation fails while writing a skill."""


class MetadataNotFoundError(SkillBuilderError):
    """Raised when skill.json is missing from the checked directory."""


class SkillParseError(SkillBuilderError):
    """Raised when skill.json is not a valid JSON object."""
