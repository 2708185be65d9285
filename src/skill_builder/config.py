from __future__ import annotations

import re
from dataclasses import dataclass

from skill_builder.constants import LICENSE_CHOICES, VERSION_PATTERN
from skill_builder.errors import ConfigError


@dataclass(frozen=True, slots=True)
class SkillBuilderConfig:
    """Fixed policy values shared by the collector, renderer and checker."""

    initial_version: str = "0.1.0"
    max_description_length: int = 120
    min_tags: int = 2
    max_tags: int = 5
    licenses: tuple[str, ...] = LICENSE_CHOICES
    node_engine: str = ">=14.0.0"
    install_command: str = "npx skills install"

    def __post_init__(self) -> None:
        if not re.fullmatch(VERSION_PATTERN, self.initial_version):
            raise ConfigError(f"initial_version {self.initial_version!r} is not semver")
        if self.min_tags < 1 or self.max_tags < self.min_tags:
            raise ConfigError(f"Invalid tag range: {self.min_tags}-{self.max_tags}")
        if self.max_description_length < 1:
            raise ConfigError("max_description_length must be positive")
        if not self.licenses:
            raise ConfigError("At least one license choice is required")


DEFAULT_CONFIG = SkillBuilderConfig()
