"""Test the integrity of existing .7z archives."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from batch7z.batch import ADVANCED, LEGACY, BatchPolicy, BatchRequest, VerifyOptions
from batch7z.commands import common


def run_verify(root: Path, *, deep: bool = False, engine: Path | None = None, dry_run: bool = False) -> None:
    """Test every .7z directly inside ROOT (asks first, stops on the first damaged archive)."""

    request = BatchRequest(root=root, options=VerifyOptions(recursive=False, deep=deep), policy=LEGACY)
    result = common.run_batch(request, engine=engine, dry_run=dry_run)
    if not dry_run and result.total:
        typer.echo("✅ all archives passed")


def run_verify_tree(
    root: Path,
    *,
    deep: bool = False,
    confirm: bool = ADVANCED.require_confirmation,
    continue_on_error: bool = ADVANCED.continue_on_error,
    engine: Path | None = None,
    dry_run: bool = False,
) -> None:
    """Test every .7z anywhere under ROOT; damaged archives are reported and the batch continues."""

    request = BatchRequest(
        root=root,
        options=VerifyOptions(recursive=True, deep=deep),
        policy=BatchPolicy(require_confirmation=confirm, continue_on_error=continue_on_error),
    )
    result = common.run_batch(request, engine=engine, dry_run=dry_run)
    if not dry_run and result.total:
        typer.echo("✅ all archives passed")


def register(app: typer.Typer) -> None:
    deep_help = "Use the recursive entry test (`t <archive> * -r`)."
    engine_help = "Path to 7z.exe (overrides BATCH7Z_ENGINE_PATH)."

    @app.command("verify", help=run_verify.__doc__)
    def verify(
        root: Path = typer.Argument(..., help="Folder holding the archives."),
        deep: bool = typer.Option(False, "--deep", help=deep_help),
        engine: Optional[Path] = typer.Option(None, "--engine", help=engine_help),
        dry_run: bool = typer.Option(False, "--dry-run", help="List archives without running 7-Zip."),
    ) -> None:
        run_verify(root, deep=deep, engine=engine, dry_run=dry_run)

    @app.command("verify-tree", help=run_verify_tree.__doc__)
    def verify_tree(
        root: Path = typer.Argument(..., help="Folder searched recursively for archives."),
        deep: bool = typer.Option(False, "--deep", help=deep_help),
        confirm: bool = typer.Option(
            ADVANCED.require_confirmation,
            "--confirm/--no-confirm",
            help="Ask before testing.",
        ),
        continue_on_error: bool = typer.Option(
            ADVANCED.continue_on_error,
            "--continue-on-error/--stop-on-error",
            help="Keep going after a damaged archive.",
        ),
        engine: Optional[Path] = typer.Option(None, "--engine", help=engine_help),
        dry_run: bool = typer.Option(False, "--dry-run", help="List archives without running 7-Zip."),
    ) -> None:
        run_verify_tree(
            root,
            deep=deep,
            confirm=confirm,
            continue_on_error=continue_on_error,
            engine=engine,
            dry_run=dry_run,
        )
