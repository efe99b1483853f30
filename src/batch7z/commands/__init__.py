"""Command registrations for the batch7z CLI."""

from __future__ import annotations

import typer

from . import archive
from . import verify

COMMAND_MODULES = (
    archive,
    verify,
)


def register_all(app: typer.Typer) -> None:
    for module in COMMAND_MODULES:
        module.register(app)
