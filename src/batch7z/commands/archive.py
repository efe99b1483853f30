"""Archive every immediate subfolder of a root directory."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from batch7z.batch import ADVANCED, LEGACY, ArchiveOptions, BatchPolicy, BatchRequest
from batch7z.commands import common
from batch7z.timestamps import TimestampPrecision


def run_archive(root: Path, *, engine: Path | None = None, dry_run: bool = False) -> None:
    """Archive each subfolder of ROOT into a date-stamped .7z next to it (asks first, stops on the first failure)."""

    request = BatchRequest(
        root=root,
        options=ArchiveOptions(timestamp=TimestampPrecision.DATE),
        policy=LEGACY,
    )
    result = common.run_batch(request, engine=engine, dry_run=dry_run)
    if not dry_run and result.total:
        typer.echo("✅ archive complete")


def run_archive_advanced(
    root: Path,
    *,
    destination: Path | None = None,
    name: str | None = None,
    suffix: str | None = None,
    timestamp: bool = True,
    confirm: bool = ADVANCED.require_confirmation,
    continue_on_error: bool = ADVANCED.continue_on_error,
    engine: Path | None = None,
    dry_run: bool = False,
) -> None:
    """Archive each subfolder of ROOT with custom names; failures are reported and the batch continues."""

    request = BatchRequest(
        root=root,
        options=ArchiveOptions(
            destination_dir=destination,
            base_name=name,
            timestamp=TimestampPrecision.SECONDS if timestamp else None,
            suffix=suffix,
        ),
        policy=BatchPolicy(require_confirmation=confirm, continue_on_error=continue_on_error),
    )
    result = common.run_batch(request, engine=engine, dry_run=dry_run)
    if not dry_run and result.total:
        typer.echo("✅ archive complete")


def register(app: typer.Typer) -> None:
    @app.command("archive", help=run_archive.__doc__)
    def archive(
        root: Path = typer.Argument(..., help="Folder whose subfolders are archived."),
        engine: Optional[Path] = typer.Option(None, "--engine", help="Path to 7z.exe (overrides BATCH7Z_ENGINE_PATH)."),
        dry_run: bool = typer.Option(False, "--dry-run", help="List planned archives without running 7-Zip."),
    ) -> None:
        run_archive(root, engine=engine, dry_run=dry_run)

    @app.command("archive-advanced", help=run_archive_advanced.__doc__)
    def archive_advanced(
        root: Path = typer.Argument(..., help="Folder whose subfolders are archived."),
        destination: Optional[Path] = typer.Option(None, "--dest", "-d", help="Write archives here instead of ROOT."),
        name: Optional[str] = typer.Option(None, "--name", "-n", help="Archive base name (only for a single subfolder)."),
        suffix: Optional[str] = typer.Option(None, "--suffix", "-s", help="Token placed before the .7z extension."),
        timestamp: bool = typer.Option(True, "--timestamp/--no-timestamp", help="Prefix names with [YYYY-MM-DD HH_MM_SS]."),
        confirm: bool = typer.Option(
            ADVANCED.require_confirmation,
            "--confirm/--no-confirm",
            help="Ask before archiving.",
        ),
        continue_on_error: bool = typer.Option(
            ADVANCED.continue_on_error,
            "--continue-on-error/--stop-on-error",
            help="Keep going after a failed folder.",
        ),
        engine: Optional[Path] = typer.Option(None, "--engine", help="Path to 7z.exe (overrides BATCH7Z_ENGINE_PATH)."),
        dry_run: bool = typer.Option(False, "--dry-run", help="List planned archives without running 7-Zip."),
    ) -> None:
        run_archive_advanced(
            root,
            destination=destination,
            name=name,
            suffix=suffix,
            timestamp=timestamp,
            confirm=confirm,
            continue_on_error=continue_on_error,
            engine=engine,
            dry_run=dry_run,
        )
