from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path

from skill_builder.config import DEFAULT_CONFIG, SkillBuilderConfig
from skill_builder.constants import ENTRY_FILE_MODE, EXAMPLES_DIRNAME
from skill_builder.errors import ProjectExistsError, ProjectWriteError
from skill_builder.models import SkillDescription
from skill_builder.templates import render_project

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[str], None]


def write_project(
    skill: SkillDescription,
    parent_dir: Path,
    *,
    config: SkillBuilderConfig = DEFAULT_CONFIG,
    on_progress: ProgressCallback | None = None,
) -> Path:
    """Create ``<parent_dir>/<skill.name>`` and write every rendered file into it.

    Args:
        skill: Completed skill description.
        parent_dir: Directory the skill directory is created in.
        config: Builder settings passed through to the renderer.
        on_progress: Called with each relative path just before it is written.

    Returns:
        Path of the created skill directory.

    Raises:
        ProjectExistsError: If the skill directory already exists. Nothing is written.
        ProjectWriteError: If a filesystem operation fails. Files written
            before the failure are left in place.
    """
    skill_dir = Path(parent_dir) / skill.name
    if skill_dir.exists():
        raise ProjectExistsError(skill_dir)

    files = render_project(skill, config)
    try:
        skill_dir.mkdir()
        (skill_dir / EXAMPLES_DIRNAME).mkdir()
        for rendered in files:
            if on_progress is not None:
                on_progress(rendered.path)
            target = skill_dir / rendered.path
            target.write_text(rendered.content, encoding="utf-8")
            if rendered.executable:
                target.chmod(ENTRY_FILE_MODE)
            logger.debug("Wrote %s", target)
    except OSError as exc:
        raise ProjectWriteError(f"Error creating skill: {exc}") from exc

    return skill_dir
