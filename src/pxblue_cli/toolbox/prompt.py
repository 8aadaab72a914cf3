"""Interactive prompting for unresolved project parameters."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Protocol

from rich.console import Console
from rich.prompt import Confirm, Prompt

from pxblue_cli.models.questions import InputKind


@dataclass(frozen=True)
class PromptRequest:
    """One entry of a batched prompt round."""

    name: str
    message: str
    kind: InputKind = InputKind.text
    choices: tuple[str, ...] = field(default_factory=tuple)


class Prompter(Protocol):
    """Asks a batch of questions in a single round.

    Returns a mapping of request name to answer, or None when the
    session was aborted and produced no answers at all.
    """

    def ask(self, batch: list[PromptRequest]) -> dict[str, str] | None: ...


class RichPrompter:
    """Prompter backed by rich.prompt.

    Confirmation questions answer ``"Yes"`` or ``"No"``. Choice
    questions accept either the label or its 1-based number.
    """

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def ask(self, batch: list[PromptRequest]) -> dict[str, str] | None:
        answers: dict[str, str] = {}
        try:
            for request in batch:
                answers[request.name] = self._ask_one(request)
        except (KeyboardInterrupt, EOFError):
            self.console.print()
            return None
        return answers

    def _ask_one(self, request: PromptRequest) -> str:
        if request.kind == InputKind.confirm:
            confirmed = Confirm.ask(request.message, console=self.console, default=True)
            return "Yes" if confirmed else "No"

        if request.kind == InputKind.choice and request.choices:
            self.console.print(f"[bold]{request.message}[/bold]")
            for i, choice in enumerate(request.choices, 1):
                self.console.print(f"  {i}. {choice}")
            numbers = [str(i) for i in range(1, len(request.choices) + 1)]
            answer = Prompt.ask(
                "Choose",
                console=self.console,
                choices=list(request.choices) + numbers,
                show_choices=False,
                default=request.choices[0],
            )
            if answer in numbers:
                return request.choices[int(answer) - 1]
            return answer

        return Prompt.ask(request.message, console=self.console, default="", show_default=False)
