"""Shared helpers for the batch7z CLI commands."""

from __future__ import annotations

import logging
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator

import typer

from batch7z.batch import BatchOrchestrator, BatchRequest, BatchResult
from batch7z.confirm import ConfirmationProvider, ConsoleConfirmation
from batch7z.engine import EngineLocation, ToolRunner, locate_engine, run_tool
from batch7z.errors import Batch7zError, EngineNotFoundError, ItemError
from batch7z.settings import get_settings

ENGINE_HINT = "Install 7-Zip, or point BATCH7Z_ENGINE_PATH / --engine at 7z.exe."


def setup_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format="%(asctime)s %(levelname)-5s %(name)s %(message)s",
    )


def resolve_engine(override: Path | None = None) -> EngineLocation:
    """Locate 7-Zip once for this run, failing fast when it is missing."""

    settings = get_settings()
    try:
        return locate_engine(settings.engine_candidates, override=override or settings.engine_path)
    except EngineNotFoundError as exc:
        typer.echo(f"❌ {exc}\n{ENGINE_HINT}", err=True)
        raise typer.Exit(code=1) from exc


@contextmanager
def fatal_errors() -> Iterator[None]:
    """Turn batch7z errors into a message on stderr and exit code 1."""

    try:
        yield
    except ItemError as exc:
        # Already reported by the orchestrator when the item failed.
        typer.echo("🛑 batch stopped at the first failure", err=True)
        raise typer.Exit(code=1) from exc
    except Batch7zError as exc:
        typer.echo(f"❌ {exc}", err=True)
        raise typer.Exit(code=1) from exc


def run_batch(
    request: BatchRequest,
    *,
    engine: Path | None = None,
    dry_run: bool = False,
    confirmation: ConfirmationProvider | None = None,
    runner: ToolRunner | None = None,
) -> BatchResult:
    """Resolve the engine, run the batch, and map the outcome onto an exit code."""

    location = resolve_engine(engine)
    orchestrator = BatchOrchestrator(
        location,
        confirmation=confirmation or ConsoleConfirmation(),
        runner=runner or run_tool,
    )
    with fatal_errors():
        result = orchestrator.run(request, dry_run=dry_run)

    if result.aborted:
        typer.echo(f"🛑 {request.action} cancelled")
        raise typer.Exit(code=0)

    if result.failed:
        typer.echo(f"⚠️  {len(result.failed)} item(s) failed:", err=True)
        for outcome in result.failed:
            typer.echo(f"  - {outcome.item}", err=True)
        raise typer.Exit(code=1)

    return result
