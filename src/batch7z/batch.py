"""Batch orchestration: enumerate items under a root, confirm, run 7-Zip per item."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Callable

import typer

from batch7z.confirm import ConfirmationProvider, ConsoleConfirmation, confirm_items
from batch7z.engine import EngineLocation, ToolRunner, run_tool
from batch7z.errors import InvalidInputError, ItemError, UserAbortedError
from batch7z.naming import ARCHIVE_EXTENSION, build_archive_name
from batch7z.operations import archive_directory, verify_archive
from batch7z.timestamps import TimestampPrecision, timestamp_tag

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BatchPolicy:
    """How a batch treats confirmation and per-item failures."""

    require_confirmation: bool
    continue_on_error: bool


# Simple entry points: always ask, stop at the first failing item.
LEGACY = BatchPolicy(require_confirmation=True, continue_on_error=False)
# Advanced entry points: ask only when requested, record failures and keep going.
ADVANCED = BatchPolicy(require_confirmation=False, continue_on_error=True)


@dataclass(frozen=True)
class ArchiveOptions:
    """Template applied to every folder of an archiving batch."""

    destination_dir: Path | None = None
    base_name: str | None = None
    timestamp: TimestampPrecision | None = None
    suffix: str | None = None


@dataclass(frozen=True)
class VerifyOptions:
    recursive: bool = False
    deep: bool = False


@dataclass(frozen=True)
class ArchiveJob:
    source: Path
    destination_dir: Path
    base_name: str
    timestamp: str | None = None
    suffix: str | None = None

    @property
    def filename(self) -> str:
        return build_archive_name(self.base_name, timestamp=self.timestamp, suffix=self.suffix)

    @property
    def destination(self) -> Path:
        return self.destination_dir / self.filename


@dataclass(frozen=True)
class VerifyJob:
    archive: Path


@dataclass(frozen=True)
class BatchRequest:
    root: Path
    options: ArchiveOptions | VerifyOptions
    policy: BatchPolicy = LEGACY

    @property
    def root_dir(self) -> Path:
        return Path(self.root).expanduser()

    @property
    def action(self) -> str:
        return "archive" if isinstance(self.options, ArchiveOptions) else "verify"


@dataclass(frozen=True)
class ItemOutcome:
    item: Path
    ok: bool
    detail: str = ""


@dataclass
class BatchResult:
    """Per-item outcomes in enumeration order."""

    total: int = 0
    outcomes: list[ItemOutcome] = field(default_factory=list)
    aborted: bool = False

    @property
    def processed(self) -> int:
        return len(self.outcomes)

    @property
    def succeeded(self) -> list[ItemOutcome]:
        return [outcome for outcome in self.outcomes if outcome.ok]

    @property
    def failed(self) -> list[ItemOutcome]:
        return [outcome for outcome in self.outcomes if not outcome.ok]


def validate_root(root: Path) -> Path:
    path = Path(root).expanduser()
    if not path.exists():
        raise InvalidInputError(f"root directory not found: {path}")
    if not path.is_dir():
        raise InvalidInputError(f"root path is not a directory: {path}")
    return path


def list_directories(root: Path) -> list[Path]:
    """Immediate child folders of ``root``; nested folders are never candidates."""

    return sorted((path for path in root.iterdir() if path.is_dir()), key=lambda p: p.name.lower())


def list_archives(root: Path, *, recursive: bool = False) -> list[Path]:
    """``.7z`` files under ``root``, optionally searching the whole tree."""

    paths = root.rglob("*") if recursive else root.iterdir()
    matches = (path for path in paths if path.is_file() and path.suffix.lower() == ARCHIVE_EXTENSION)
    return sorted(matches, key=lambda p: str(p.relative_to(root)).lower())


class BatchOrchestrator:
    """Drive one archiving or verification batch against a resolved engine."""

    def __init__(
        self,
        engine: EngineLocation,
        *,
        confirmation: ConfirmationProvider | None = None,
        runner: ToolRunner = run_tool,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        self.engine = engine
        self.confirmation = confirmation or ConsoleConfirmation()
        self.runner = runner
        self.clock = clock

    def enumerate(self, request: BatchRequest) -> list[Path]:
        root = validate_root(request.root)
        options = request.options
        if isinstance(options, VerifyOptions):
            return list_archives(root, recursive=options.recursive)

        items = list_directories(root)
        if options.base_name is not None and not options.base_name.strip():
            raise InvalidInputError("archive base name must not be blank")
        if options.base_name and len(items) > 1:
            raise InvalidInputError(
                f"a fixed archive name ({options.base_name!r}) would be reused for {len(items)} folders"
            )
        destination = options.destination_dir
        if destination is not None and not Path(destination).expanduser().is_dir():
            raise InvalidInputError(f"destination directory not found: {destination}")
        return items

    def archive_job(self, request: BatchRequest, source: Path) -> ArchiveJob:
        options = request.options
        if not isinstance(options, ArchiveOptions):
            raise TypeError(f"archive jobs need ArchiveOptions, got {type(options).__name__}")
        destination_dir = Path(options.destination_dir).expanduser() if options.destination_dir else request.root_dir
        tag = timestamp_tag(options.timestamp, self.clock()) if options.timestamp else None
        return ArchiveJob(
            source=source,
            destination_dir=destination_dir,
            base_name=options.base_name or source.name,
            timestamp=tag,
            suffix=options.suffix or None,
        )

    def run(self, request: BatchRequest, *, dry_run: bool = False) -> BatchResult:
        """Run the batch and return its outcomes.

        Declining the confirmation prompt returns an aborted result before any
        engine call. Without ``continue_on_error`` the first ``ItemError`` is
        recorded and re-raised; the summary line is printed either way.
        """

        items = self.enumerate(request)
        result = BatchResult(total=len(items))
        self._report_items(request, items)
        if not items:
            self._summarise(request, result)
            return result

        if dry_run:
            self._report_plan(request, items)
            return result

        if request.policy.require_confirmation:
            try:
                confirm_items(self.confirmation, len(items), action=request.action)
            except UserAbortedError:
                logger.info("%s batch declined at confirmation prompt", request.action)
                result.aborted = True
                return result

        try:
            for item in items:
                self._dispatch(request, item, result)
        finally:
            self._summarise(request, result)
        return result

    def _dispatch(self, request: BatchRequest, item: Path, result: BatchResult) -> None:
        options = request.options
        try:
            if isinstance(options, ArchiveOptions):
                job = self.archive_job(request, item)
                typer.echo(f"📦 {item.name} -> {job.filename}")
                outcome = archive_directory(self.engine, job.source, job.destination, runner=self.runner)
            else:
                job = VerifyJob(archive=item)
                typer.echo(f"🔍 {self._label(request, item)}")
                outcome = verify_archive(self.engine, job.archive, deep=options.deep, runner=self.runner)
        except ItemError as exc:
            result.outcomes.append(ItemOutcome(item=item, ok=False, detail=exc.output or str(exc)))
            typer.echo(f"❌ {exc}", err=True)
            if exc.output.strip():
                typer.echo(exc.output.rstrip(), err=True)
            if not request.policy.continue_on_error:
                raise
            return

        result.outcomes.append(ItemOutcome(item=item, ok=True, detail=outcome.output))

    def _report_items(self, request: BatchRequest, items: list[Path]) -> None:
        noun = "folder(s) to archive" if request.action == "archive" else "archive(s) to verify"
        typer.echo(f"Found {len(items)} {noun} in {request.root}")
        for item in items:
            typer.echo(f"  - {self._label(request, item)}")

    def _report_plan(self, request: BatchRequest, items: list[Path]) -> None:
        for item in items:
            if request.action == "archive":
                typer.echo(f"🧪 would create: {self.archive_job(request, item).destination}")
            else:
                typer.echo(f"🧪 would test: {item}")
        typer.echo(f"🧪 dry run complete ({len(items)} item(s), nothing executed)")

    def _summarise(self, request: BatchRequest, result: BatchResult) -> None:
        typer.echo(
            f"🏁 {request.action}: processed {result.processed} of {result.total} item(s) "
            f"({len(result.succeeded)} ok, {len(result.failed)} failed)"
        )

    @staticmethod
    def _label(request: BatchRequest, item: Path) -> str:
        try:
            return str(item.relative_to(request.root_dir))
        except ValueError:
            return item.name


__all__ = [
    "ADVANCED",
    "LEGACY",
    "ArchiveJob",
    "ArchiveOptions",
    "BatchOrchestrator",
    "BatchPolicy",
    "BatchRequest",
    "BatchResult",
    "ItemOutcome",
    "VerifyJob",
    "VerifyOptions",
    "list_archives",
    "list_directories",
    "validate_root",
]
