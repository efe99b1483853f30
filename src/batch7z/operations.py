"""Single-item 7-Zip operations: create one archive, test one archive."""

from __future__ import annotations

import logging
from pathlib import Path

from batch7z.engine import EngineLocation, ToolResult, ToolRunner, run_tool
from batch7z.errors import ArchiveCreationError, ArchiveIntegrityError

logger = logging.getLogger(__name__)

# Ultra compression, native 7z container, and keep modification, creation,
# access times plus file attributes for every entry.
CREATE_SWITCHES: tuple[str, ...] = (
    "-mx=9",
    "-t7z",
    "-mtm=on",
    "-mtc=on",
    "-mta=on",
    "-mtr=on",
)


def create_command(engine: EngineLocation, source: Path, destination: Path) -> list[str]:
    return engine.command("a", *CREATE_SWITCHES, destination, source)


def integrity_command(engine: EngineLocation, archive: Path, *, deep: bool = False) -> list[str]:
    if deep:
        return engine.command("t", archive, "*", "-r")
    return engine.command("t", archive)


def archive_directory(
    engine: EngineLocation,
    source: Path,
    destination: Path,
    *,
    runner: ToolRunner = run_tool,
) -> ToolResult:
    """Compress ``source`` into ``destination`` and block until 7-Zip exits.

    Overwrite behaviour for an existing ``destination`` is whatever 7-Zip
    does for the ``a`` command. Raises ``ArchiveCreationError`` on a non-zero
    exit code.
    """

    result = runner(create_command(engine, source, destination))
    if not result.ok:
        logger.warning("7-Zip exited with %s while archiving %s", result.exit_code, source)
        raise ArchiveCreationError(source, destination, exit_code=result.exit_code, output=result.output)
    return result


def verify_archive(
    engine: EngineLocation,
    archive: Path,
    *,
    deep: bool = False,
    runner: ToolRunner = run_tool,
) -> ToolResult:
    """Run 7-Zip's integrity test against ``archive``.

    ``deep`` selects the recursive form that tests every entry inside the
    archive. Raises ``ArchiveIntegrityError`` on a non-zero exit code.
    """

    result = runner(integrity_command(engine, archive, deep=deep))
    if not result.ok:
        logger.warning("7-Zip exited with %s while testing %s", result.exit_code, archive)
        raise ArchiveIntegrityError(archive, exit_code=result.exit_code, output=result.output)
    return result


__all__ = [
    "CREATE_SWITCHES",
    "archive_directory",
    "create_command",
    "integrity_command",
    "verify_archive",
]
