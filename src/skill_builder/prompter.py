"""Question/answer media used by the interactive collector."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Protocol

from rich.console import Console
from rich.prompt import Confirm, Prompt

from skill_builder.errors import PromptAborted

Choice = tuple[str, str]


class Prompter(Protocol):
    def text(self, message: str) -> str:
        ...

    def select(self, message: str, choices: Sequence[Choice]) -> str:
        ...

    def confirm(self, message: str, *, default: bool) -> bool:
        ...

    def say(self, message: str, *, style: str | None = None) -> None:
        ...


class RichPrompter:
    """Terminal prompter backed by ``rich.prompt``.

    ``KeyboardInterrupt`` and ``EOFError`` are reported as :class:`PromptAborted`.
    """

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def text(self, message: str) -> str:
        try:
            return Prompt.ask(message.rstrip(":"), console=self.console)
        except (KeyboardInterrupt, EOFError) as exc:
            raise PromptAborted("Prompt aborted") from exc

    def select(self, message: str, choices: Sequence[Choice]) -> str:
        self.console.print(message)
        for index, (title, _) in enumerate(choices, start=1):
            self.console.print(f"  {index}) {title}")
        try:
            picked = Prompt.ask(
                "Choice",
                console=self.console,
                choices=[str(index) for index in range(1, len(choices) + 1)],
                default="1",
            )
        except (KeyboardInterrupt, EOFError) as exc:
            raise PromptAborted("Prompt aborted") from exc
        return choices[int(picked) - 1][1]

    def confirm(self, message: str, *, default: bool) -> bool:
        try:
            return Confirm.ask(message, console=self.console, default=default)
        except (KeyboardInterrupt, EOFError) as exc:
            raise PromptAborted("Prompt aborted") from exc

    def say(self, message: str, *, style: str | None = None) -> None:
        self.console.print(message, style=style)


@dataclass(slots=True)
class ScriptedPrompter:
    """Replays a fixed list of answers; running out of answers aborts the flow."""

    answers: list[str | bool] = field(default_factory=list)
    asked: list[str] = field(default_factory=list)
    said: list[str] = field(default_factory=list)

    def _next(self, message: str) -> str | bool:
        self.asked.append(message)
        if not self.answers:
            raise PromptAborted(f"No scripted answer left for: {message}")
        return self.answers.pop(0)

    def text(self, message: str) -> str:
        return str(self._next(message))

    def select(self, message: str, choices: Sequence[Choice]) -> str:
        return str(self._next(message))

    def confirm(self, message: str, *, default: bool) -> bool:
        answer = self._next(message)
        if isinstance(answer, bool):
            return answer
        if not answer:
            return default
        return answer.strip().lower() in {"y", "yes"}

    def say(self, message: str, *, style: str | None = None) -> None:
        del style
        self.said.append(message)
