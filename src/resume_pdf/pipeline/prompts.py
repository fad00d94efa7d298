"""Interactive prompts used to fill in options that were not passed as flags."""

from __future__ import annotations

from typing import Protocol, Sequence

from rich.console import Console
from rich.prompt import Confirm, Prompt


class Prompter(Protocol):
    def select(self, message: str, choices: Sequence[str]) -> str: ...

    def text(self, message: str, default: str) -> str: ...

    def confirm(self, message: str) -> bool: ...


class RichPrompter:
    """Terminal prompts backed by rich.prompt."""

    def __init__(self, console: Console | None = None):
        self.console = console or Console()

    def select(self, message: str, choices: Sequence[str]) -> str:
        """Show a numbered list and accept either the number or the value."""
        self.console.print(f"\n[bold]{message}[/bold]")
        for i, choice in enumerate(choices, 1):
            self.console.print(f"  [cyan]{i:>2}[/cyan]. {choice}")
        numbers = [str(i) for i in range(1, len(choices) + 1)]
        answer = Prompt.ask(
            "Selection",
            choices=numbers + list(choices),
            show_choices=False,
            console=self.console,
        )
        if answer in numbers:
            return choices[int(answer) - 1]
        return answer

    def text(self, message: str, default: str) -> str:
        return Prompt.ask(f"\n[bold]{message}[/bold]", default=default, console=self.console)

    def confirm(self, message: str) -> bool:
        return Confirm.ask(f"\n[bold]{message}[/bold]", default=False, console=self.console)
