"""Yes/no confirmation before a batch touches anything."""

from __future__ import annotations

from typing import Protocol

import typer

from batch7z.errors import UserAbortedError


class ConfirmationProvider(Protocol):
    def ask_yes_no(self, prompt: str) -> bool: ...


class ConsoleConfirmation:
    """Ask on the terminal until the operator answers y or n.

    Without a default, click re-prompts with ``Error: invalid input`` for
    anything that is not a yes/no answer, with no retry limit.
    """

    def ask_yes_no(self, prompt: str) -> bool:
        return typer.confirm(prompt, default=None)


def confirm_items(provider: ConfirmationProvider, count: int, *, action: str) -> None:
    """Raise ``UserAbortedError`` unless the operator approves ``action`` for ``count`` items."""

    if not provider.ask_yes_no(f"Proceed to {action} {count} item(s)?"):
        raise UserAbortedError(f"{action} cancelled")


__all__ = ["ConfirmationProvider", "ConsoleConfirmation", "confirm_items"]
