from skill_builder.checker import check_structure, load_metadata
from skill_builder.collector import SkillCollector
from skill_builder.config import DEFAULT_CONFIG, SkillBuilderConfig
from skill_builder.errors import (
    ConfigError,
    MetadataNotFoundError,
    ProjectExistsError,
    ProjectWriteError,
    PromptAborted,
    SkillBuilderError,
    SkillParseError,
)
from skill_builder.models import (
    CheckReport,
    CommandDescriptor,
    RenderedFile,
    Runtime,
    RuntimeProfile,
    SafetyAnswers,
    SkillDescription,
)
from skill_builder.prompter import Prompter, RichPrompter, ScriptedPrompter
from skill_builder.templates import render_project
from skill_builder.validators import validate_command_name, validate_skill_name, validate_version
from skill_builder.writer import write_project

__all__ = [
    "CheckReport",
    "CommandDescriptor",
    "ConfigError",
    "DEFAULT_CONFIG",
    "MetadataNotFoundError",
    "ProjectExistsError",
    "ProjectWriteError",
    "PromptAborted",
    "Prompter",
    "RenderedFile",
    "RichPrompter",
    "Runtime",
    "RuntimeProfile",
    "SafetyAnswers",
    "ScriptedPrompter",
    "SkillBuilderConfig",
    "SkillBuilderError",
    "SkillCollector",
    "SkillDescription",
    "SkillParseError",
    "check_structure",
    "load_metadata",
    "render_project",
    "validate_command_name",
    "validate_skill_name",
    "validate_version",
    "write_project",
]
