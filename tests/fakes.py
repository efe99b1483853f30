from __future__ import annotations

from datetime import datetime
from pathlib import Path
from typing import Sequence

from batch7z.engine import ToolResult

FIXED_NOW = datetime(2024, 1, 15, 14, 30, 5)


class FakeSevenZip:
    """Stands in for 7z.exe: records every command and fakes its effects."""

    def __init__(self, fail_on: Sequence[str] = ()) -> None:
        self.calls: list[list[str]] = []
        self.fail_on = set(fail_on)

    def __call__(self, args: Sequence[str]) -> ToolResult:
        cmd = [str(arg) for arg in args]
        self.calls.append(cmd)
        if cmd[1] == "a":
            destination, source = Path(cmd[-2]), Path(cmd[-1])
            if source.name in self.fail_on:
                return ToolResult(exit_code=2, output="ERROR: cannot open file")
            destination.write_bytes(b"7z\xbc\xaf\x27\x1c")
            return ToolResult(exit_code=0, output="Everything is Ok")

        archive = Path(cmd[2])
        if archive.name in self.fail_on:
            return ToolResult(exit_code=2, output="ERROR: Data Error")
        return ToolResult(exit_code=0, output="Everything is Ok")


class ScriptedConfirmation:
    def __init__(self, *answers: bool) -> None:
        self.answers = list(answers)
        self.prompts: list[str] = []

    def ask_yes_no(self, prompt: str) -> bool:
        self.prompts.append(prompt)
        return self.answers.pop(0)
