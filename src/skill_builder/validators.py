"""Field validators.

Every validator returns ``None`` when the value passes and a user-facing
message otherwise. None of them raise.
"""

from __future__ import annotations

import re
from collections.abc import Callable

from skill_builder.constants import COMMAND_NAME_PATTERN, SKILL_NAME_PATTERN, VERSION_PATTERN

Validator = Callable[[str], str | None]

_SKILL_NAME_RE = re.compile(SKILL_NAME_PATTERN)
_COMMAND_NAME_RE = re.compile(COMMAND_NAME_PATTERN)
_VERSION_RE = re.compile(VERSION_PATTERN)


def validate_skill_name(name: str) -> str | None:
    if not isinstance(name, str) or not _SKILL_NAME_RE.fullmatch(name):
        return "Skill name must be lowercase, kebab-case (e.g., my-skill)"
    return None


def validate_version(version: str) -> str | None:
    if not isinstance(version, str) or not _VERSION_RE.fullmatch(version):
        return "Version must follow semver (e.g., 0.1.0)"
    return None


def validate_command_name(name: str) -> str | None:
    # Letters only, unlike skill names which also allow digits.
    if not name:
        return "Command name is required"
    if not _COMMAND_NAME_RE.fullmatch(name):
        return "Must be lowercase kebab-case"
    return None


def validate_required(label: str) -> Validator:
    def check(value: str) -> str | None:
        if not value:
            return f"{label} is required"
        return None

    return check


def validate_description(max_length: int) -> Validator:
    def check(value: str) -> str | None:
        if not value:
            return "Description is required"
        if len(value) > max_length:
            return f"Description must be under {max_length} characters"
        return None

    return check


def split_tags(raw: str) -> list[str]:
    return [tag.strip() for tag in raw.split(",") if tag.strip()]


def validate_tags(min_tags: int, max_tags: int) -> Validator:
    def check(value: str) -> str | None:
        tags = split_tags(value)
        if len(tags) < min_tags:
            return f"At least {min_tags} tags required"
        if len(tags) > max_tags:
            return f"Maximum {max_tags} tags allowed"
        return None

    return check
