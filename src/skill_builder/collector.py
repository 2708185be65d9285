from __future__ import annotations

import logging
from collections.abc import Sequence
from enum import StrEnum

from skill_builder.config import DEFAULT_CONFIG, SkillBuilderConfig
from skill_builder.models import RUNTIME_PROFILES, CommandDescriptor, Runtime, SafetyAnswers, SkillDescription
from skill_builder.prompter import Choice, Prompter
from skill_builder.templates import render_safety
from skill_builder.validators import (
    Validator,
    split_tags,
    validate_command_name,
    validate_description,
    validate_required,
    validate_skill_name,
    validate_tags,
)

logger = logging.getLogger(__name__)


class CommandLoopState(StrEnum):
    COLLECTING = "collecting"
    AWAIT_CONTINUE = "await_continue"
    DONE = "done"


class SkillCollector:
    """Builds a :class:`SkillDescription` from an ordered series of prompts.

    A field that fails validation is asked again until it passes. Aborting
    raises :class:`~skill_builder.errors.PromptAborted` and nothing is kept.
    """

    def __init__(self, prompter: Prompter, config: SkillBuilderConfig = DEFAULT_CONFIG) -> None:
        self.prompter = prompter
        self.config = config

    def collect(self) -> SkillDescription:
        config = self.config
        name = self.ask_text("Skill name (lowercase, kebab-case):", validate_skill_name)
        title = self.ask_text("Human-friendly title:", validate_required("Title"))
        description = self.ask_text(
            f"One-line description (max {config.max_description_length} chars):",
            validate_description(config.max_description_length),
        )
        author = self.ask_text("Author name or GitHub username:", validate_required("Author"))
        runtime = Runtime(
            self.ask_select(
                "Select runtime:",
                [(profile.label, profile.runtime.value) for profile in RUNTIME_PROFILES.values()],
            )
        )
        tags = split_tags(
            self.ask_text(
                f"Tags ({config.min_tags}-{config.max_tags}, comma-separated):",
                validate_tags(config.min_tags, config.max_tags),
            )
        )
        license_id = self.ask_select("License:", [(value, value) for value in config.licenses])

        self.prompter.say("Configure commands (at least 1 required):", style="cyan")
        commands = self.collect_commands()

        self.prompter.say("Safety configuration:", style="cyan")
        safety = render_safety(self.collect_safety())

        logger.debug("Collected skill %s with %d command(s)", name, len(commands))
        return SkillDescription(
            name=name,
            title=title,
            description=description,
            author=author,
            runtime=runtime,
            tags=tags,
            license=license_id,
            commands=commands,
            safety=safety,
        )

    def ask_text(self, message: str, validator: Validator) -> str:
        while True:
            value = self.prompter.text(message).strip()
            error = validator(value)
            if error is None:
                return value
            self.prompter.say(error, style="red")

    def ask_select(self, message: str, choices: Sequence[Choice]) -> str:
        allowed = {value for _, value in choices}
        while True:
            value = self.prompter.select(message, choices)
            if value in allowed:
                return value
            self.prompter.say(f"Choose one of: {', '.join(sorted(allowed))}", style="red")

    def collect_commands(self) -> list[CommandDescriptor]:
        commands: list[CommandDescriptor] = []
        state = CommandLoopState.COLLECTING
        while state is not CommandLoopState.DONE:
            if state is CommandLoopState.COLLECTING:
                name = self.ask_text("Command name (lowercase):", validate_command_name)
                description = self.ask_text("Command description:", validate_required("Description"))
                if name and description:
                    commands.append(CommandDescriptor(name=name, description=description))
                if not commands:
                    self.prompter.say("At least one command is required", style="yellow")
                    continue
                state = CommandLoopState.AWAIT_CONTINUE
            else:
                add_another = self.prompter.confirm("Add another command?", default=False)
                state = CommandLoopState.COLLECTING if add_another else CommandLoopState.DONE
        return commands

    def collect_safety(self) -> SafetyAnswers:
        modifies_files = self.prompter.confirm("Will this skill modify existing files?", default=False)
        needs_confirmation = self.prompter.confirm(
            "Should dangerous operations require confirmation?",
            default=True,
        )
        return SafetyAnswers(modifies_files=modifies_files, needs_confirmation=needs_confirmation)
