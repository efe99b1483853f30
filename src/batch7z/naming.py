"""Archive filename construction."""

from __future__ import annotations

ARCHIVE_EXTENSION = ".7z"


def build_archive_name(base: str, *, timestamp: str | None = None, suffix: str | None = None) -> str:
    """Build ``[<timestamp>] <base>.<suffix>.7z``, dropping whichever parts are empty.

    The timestamp tag is always the leading token and the suffix always sits
    right before the extension. Callers must supply a non-empty base name.
    """

    assert base, "archive base name must not be empty"

    name = base
    if suffix:
        name = f"{name}.{suffix}"
    if timestamp:
        name = f"{timestamp} {name}"
    return f"{name}{ARCHIVE_EXTENSION}"


__all__ = ["ARCHIVE_EXTENSION", "build_archive_name"]
