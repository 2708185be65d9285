from __future__ import annotations

import json
import logging
import stat
from pathlib import Path
from typing import Any

from skill_builder.config import DEFAULT_CONFIG, SkillBuilderConfig
from skill_builder.constants import (
    DEFAULT_ENTRY_FILENAME,
    README_FILENAME,
    REQUIRED_METADATA_FIELDS,
    REQUIRED_README_SECTIONS,
    SKILL_JSON_FILENAME,
)
from skill_builder.errors import MetadataNotFoundError, SkillParseError
from skill_builder.models import CheckReport
from skill_builder.validators import validate_skill_name, validate_version

logger = logging.getLogger(__name__)

_EXECUTE_BITS = stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH


def load_metadata(directory: Path) -> dict[str, Any]:
    """Read and parse ``skill.json``; both failure modes are fatal."""
    metadata_path = Path(directory) / SKILL_JSON_FILENAME
    if not metadata_path.is_file():
        raise MetadataNotFoundError(f"{SKILL_JSON_FILENAME} not found in current directory")

    try:
        metadata = json.loads(metadata_path.read_text(encoding="utf-8"))
    except UnicodeDecodeError as exc:
        raise SkillParseError(f"{SKILL_JSON_FILENAME} is not valid UTF-8: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise SkillParseError(f"Invalid JSON in {SKILL_JSON_FILENAME}: {exc}") from exc

    if not isinstance(metadata, dict):
        raise SkillParseError(f"{SKILL_JSON_FILENAME} must contain a JSON object")
    return metadata


def check_metadata(
    metadata: dict[str, Any],
    report: CheckReport,
    *,
    config: SkillBuilderConfig = DEFAULT_CONFIG,
) -> None:
    for field_name in REQUIRED_METADATA_FIELDS:
        if not metadata.get(field_name):
            report.errors.append(f"Missing required field: {field_name}")

    name = metadata.get("name")
    if name and validate_skill_name(name) is not None:
        report.errors.append("Invalid skill name format (must be lowercase kebab-case)")

    version = metadata.get("version")
    if version and validate_version(version) is not None:
        report.errors.append(f"Invalid version format: {version} (must follow semver, e.g. 0.1.0)")

    description = metadata.get("description")
    if isinstance(description, str) and len(description) > config.max_description_length:
        report.warnings.append(f"Description exceeds {config.max_description_length} characters")

    if not metadata.get("commands"):
        report.errors.append("At least one command is required")


def check_readme(directory: Path, report: CheckReport) -> None:
    readme_path = directory / README_FILENAME
    if not readme_path.is_file():
        report.errors.append(f"{README_FILENAME} is missing")
        return

    try:
        readme = readme_path.read_text(encoding="utf-8")
    except UnicodeDecodeError:
        report.errors.append(f"{README_FILENAME} is not valid UTF-8")
        return
    for section in REQUIRED_README_SECTIONS:
        if f"## {section}" not in readme:
            report.warnings.append(f"README missing recommended section: {section}")


def check_entry(directory: Path, entry: str | None, report: CheckReport) -> None:
    entry_path = directory / (entry or DEFAULT_ENTRY_FILENAME)
    if not entry_path.is_file():
        report.errors.append(f"Entry file not found: {entry or DEFAULT_ENTRY_FILENAME}")
        return

    if not entry_path.stat().st_mode & _EXECUTE_BITS:
        report.warnings.append("Entry file is not executable (chmod +x required)")


def check_structure(directory: Path, *, config: SkillBuilderConfig = DEFAULT_CONFIG) -> CheckReport:
    """Check a skill directory and collect every error and warning.

    Raises:
        MetadataNotFoundError: If ``skill.json`` does not exist.
        SkillParseError: If ``skill.json`` is malformed.
    """
    directory = Path(directory)
    metadata = load_metadata(directory)
    report = CheckReport()

    logger.debug("Checking %s", SKILL_JSON_FILENAME)
    check_metadata(metadata, report, config=config)

    logger.debug("Checking %s", README_FILENAME)
    check_readme(directory, report)

    logger.debug("Checking entry file")
    entry = metadata.get("entry")
    check_entry(directory, entry if isinstance(entry, str) else None, report)

    return report
