"""Error hierarchy for batch archiving runs."""

from __future__ import annotations

from pathlib import Path
from typing import Sequence


class Batch7zError(Exception):
    """Base class for batch7z exceptions."""


class InvalidInputError(Batch7zError):
    """Raised when the root path or batch options are unusable."""


class EngineNotFoundError(Batch7zError):
    """Raised when no 7-Zip executable exists at any probed location."""

    def __init__(self, probed: Sequence[Path]) -> None:
        self.probed = [Path(p) for p in probed]
        listing = ", ".join(str(p) for p in self.probed) or "<no candidates>"
        super().__init__(f"7-Zip executable not found (looked in: {listing})")


class UserAbortedError(Batch7zError):
    """Raised when the operator declines the confirmation prompt.

    This is a normal exit path, not a failure: nothing has been written or
    launched when it is raised.
    """


class ItemError(Batch7zError):
    """Raised when the engine fails for a single batch item."""

    def __init__(self, message: str, *, exit_code: int, output: str = "") -> None:
        super().__init__(message)
        self.exit_code = exit_code
        self.output = output


class ArchiveCreationError(ItemError):
    """Raised when the engine cannot create an archive for a folder."""

    def __init__(self, source: Path, destination: Path, *, exit_code: int, output: str = "") -> None:
        super().__init__(
            f"failed to archive {source} -> {destination} (7-Zip exit code {exit_code})",
            exit_code=exit_code,
            output=output,
        )
        self.source = source
        self.destination = destination


class ArchiveIntegrityError(ItemError):
    """Raised when the engine reports a damaged or unreadable archive."""

    def __init__(self, archive: Path, *, exit_code: int, output: str = "") -> None:
        super().__init__(
            f"integrity test failed for {archive} (7-Zip exit code {exit_code})",
            exit_code=exit_code,
            output=output,
        )
        self.archive = archive


__all__ = [
    "Batch7zError",
    "InvalidInputError",
    "EngineNotFoundError",
    "UserAbortedError",
    "ItemError",
    "ArchiveCreationError",
    "ArchiveIntegrityError",
]
