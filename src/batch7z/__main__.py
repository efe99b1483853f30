"""Module entrypoint so `python -m batch7z` works."""

from __future__ import annotations

from batch7z.cli import app


def main() -> None:
    app()


if __name__ == "__main__":
    main()
