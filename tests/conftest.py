from __future__ import annotations

from pathlib import Path

import pytest

from batch7z.engine import EngineLocation

from fakes import FakeSevenZip


@pytest.fixture
def engine(tmp_path: Path) -> EngineLocation:
    return EngineLocation(executable=tmp_path / "7z.exe")


@pytest.fixture
def fake_7z() -> FakeSevenZip:
    return FakeSevenZip()


@pytest.fixture
def root(tmp_path: Path) -> Path:
    base = tmp_path / "root"
    for name in ("alpha", "bravo", "charlie"):
        (base / name).mkdir(parents=True)
        (base / name / "notes.txt").write_text(name, encoding="utf-8")
    return base
