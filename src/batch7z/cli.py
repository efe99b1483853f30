"""batch7z: archive or verify one 7-Zip archive per folder."""

from __future__ import annotations

from importlib import metadata
from typing import Optional

import typer

from batch7z.commands import common, register_all
from batch7z.settings import get_settings

app = typer.Typer(
    add_completion=False,
    no_args_is_help=True,
    help="Batch 7-Zip helper: one archive per subfolder, or integrity tests for existing archives.",
)


def _version_callback(value: bool) -> None:
    if not value:
        return
    try:
        version = metadata.version("batch7z")
    except metadata.PackageNotFoundError:
        version = "unknown"
    typer.echo(f"batch7z {version}")
    raise typer.Exit()


@app.callback()
def main(
    log_level: Optional[str] = typer.Option(None, "--log-level", help="Logging level (defaults to BATCH7Z_LOG_LEVEL)."),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the installed version and exit.",
    ),
) -> None:
    common.setup_logging(log_level or get_settings().log_level)


register_all(app)


if __name__ == "__main__":
    app()
