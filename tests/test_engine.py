from __future__ import annotations

import sys
from pathlib import Path

import pytest

from batch7z.engine import EngineLocation, locate_engine, run_tool
from batch7z.errors import EngineNotFoundError


def _install(path: Path) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(b"MZ")
    return path


@pytest.fixture
def candidates(tmp_path: Path) -> tuple[Path, Path]:
    return (
        tmp_path / "Program Files" / "7-Zip" / "7z.exe",
        tmp_path / "Program Files (x86)" / "7-Zip" / "7z.exe",
    )


def test_prefers_64_bit_install(candidates) -> None:
    for path in candidates:
        _install(path)

    assert locate_engine(candidates) == EngineLocation(executable=candidates[0])


def test_falls_back_to_32_bit_install(candidates) -> None:
    _install(candidates[1])

    assert locate_engine(candidates).executable == candidates[1]


def test_missing_engine_lists_every_probed_path(candidates) -> None:
    with pytest.raises(EngineNotFoundError) as excinfo:
        locate_engine(candidates)

    assert excinfo.value.probed == list(candidates)
    for path in candidates:
        assert str(path) in str(excinfo.value)


def test_override_is_probed_first(tmp_path: Path, candidates) -> None:
    _install(candidates[0])
    custom = _install(tmp_path / "bin" / "7zz")

    assert locate_engine(candidates, override=custom).executable == custom


def test_missing_override_still_falls_back(tmp_path: Path, candidates) -> None:
    _install(candidates[1])

    location = locate_engine(candidates, override=tmp_path / "nope" / "7z")

    assert location.executable == candidates[1]


def test_directory_is_not_an_engine(candidates) -> None:
    candidates[0].mkdir(parents=True)

    with pytest.raises(EngineNotFoundError):
        locate_engine(candidates)


def test_command_stringifies_arguments(tmp_path: Path) -> None:
    location = EngineLocation(executable=tmp_path / "7z.exe")

    assert location.command("t", tmp_path / "a b.7z") == [str(tmp_path / "7z.exe"), "t", str(tmp_path / "a b.7z")]


def test_run_tool_captures_exit_code_and_output() -> None:
    result = run_tool(
        [sys.executable, "-c", "import sys; print('out'); print('err', file=sys.stderr); sys.exit(3)"]
    )

    assert result.exit_code == 3
    assert result.ok is False
    assert "out" in result.output
    assert "err" in result.output


def test_run_tool_does_not_use_a_shell(tmp_path: Path) -> None:
    marker = tmp_path / "marker"
    result = run_tool([sys.executable, "-c", "import sys; print(sys.argv[1])", f"x; touch {marker}"])

    assert result.ok
    assert result.output.strip() == f"x; touch {marker}"
    assert not marker.exists()


def test_run_tool_replaces_undecodable_output() -> None:
    script = "import sys; sys.stdout.buffer.write(b'Compressing  M\\x81ller\\\\a.txt\\n'); sys.exit(2)"

    result = run_tool([sys.executable, "-c", script])

    assert result.exit_code == 2
    assert "Compressing  M" in result.output
    assert "ller" in result.output


def test_run_tool_reports_unstartable_executable(tmp_path: Path) -> None:
    result = run_tool([str(tmp_path / "missing" / "7z.exe"), "t", "x.7z"])

    assert result.exit_code == 126
    assert result.ok is False
    assert result.output
