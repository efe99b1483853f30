from __future__ import annotations

import pytest

from batch7z.naming import build_archive_name

TAG = "[2024-01-15 14_30_05]"


@pytest.mark.parametrize(
    ("timestamp", "suffix", "expected"),
    [
        (TAG, "backup", "[2024-01-15 14_30_05] Docs.backup.7z"),
        (TAG, None, "[2024-01-15 14_30_05] Docs.7z"),
        (None, "backup", "Docs.backup.7z"),
        (None, None, "Docs.7z"),
    ],
)
def test_name_variants(timestamp, suffix, expected) -> None:
    assert build_archive_name("Docs", timestamp=timestamp, suffix=suffix) == expected


def test_empty_parts_count_as_absent() -> None:
    assert build_archive_name("Docs", timestamp="", suffix="") == "Docs.7z"


def test_empty_base_is_rejected() -> None:
    with pytest.raises(AssertionError):
        build_archive_name("")
