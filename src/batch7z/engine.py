"""Locate and invoke the external 7-Zip engine."""

from __future__ import annotations

import logging
import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Iterable, Sequence

from batch7z.errors import EngineNotFoundError

logger = logging.getLogger(__name__)

# 64-bit install location first, then the 32-bit one.
DEFAULT_ENGINE_CANDIDATES: tuple[Path, ...] = (
    Path(r"C:\Program Files\7-Zip\7z.exe"),
    Path(r"C:\Program Files (x86)\7-Zip\7z.exe"),
)


@dataclass(frozen=True, slots=True)
class EngineLocation:
    """Resolved 7-Zip executable, valid for the rest of a run."""

    executable: Path

    def command(self, *args: str | Path) -> list[str]:
        return [str(self.executable), *(str(arg) for arg in args)]


@dataclass(frozen=True, slots=True)
class ToolResult:
    exit_code: int
    output: str = ""

    @property
    def ok(self) -> bool:
        return self.exit_code == 0


ToolRunner = Callable[[Sequence[str]], ToolResult]


def locate_engine(
    candidates: Iterable[Path] = DEFAULT_ENGINE_CANDIDATES,
    *,
    override: Path | None = None,
) -> EngineLocation:
    """Return the first existing executable, probing ``override`` before ``candidates``."""

    probed: list[Path] = []
    ordered = [override, *candidates] if override is not None else list(candidates)
    for candidate in ordered:
        path = Path(candidate).expanduser()
        probed.append(path)
        if path.is_file():
            logger.debug("using 7-Zip engine at %s", path)
            return EngineLocation(executable=path)
    raise EngineNotFoundError(probed)


def run_tool(args: Sequence[str]) -> ToolResult:
    """Run a command to completion and capture its combined output.

    Arguments are passed as a list, never through a shell. Undecodable output
    bytes are replaced, and an executable that cannot be started is reported
    as exit code 126 instead of raising.
    """

    cmd_list = [str(arg) for arg in args]
    logger.debug("↪️  %s", " ".join(cmd_list))
    try:
        completed = subprocess.run(
            cmd_list,
            stdout=subprocess.PIPE,
            stderr=subprocess.STDOUT,
            text=True,
            errors="replace",
            check=False,
        )
    except OSError as exc:
        logger.warning("could not start %s: %s", cmd_list[0], exc)
        # Conventional "cannot execute" exit code.
        return ToolResult(exit_code=126, output=str(exc))
    return ToolResult(exit_code=completed.returncode, output=completed.stdout or "")


__all__ = [
    "DEFAULT_ENGINE_CANDIDATES",
    "EngineLocation",
    "ToolResult",
    "ToolRunner",
    "locate_engine",
    "run_tool",
]
