"""batch7z settings (Pydantic v2)."""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path
from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from batch7z.engine import DEFAULT_ENGINE_CANDIDATES


def _env_file() -> str:
    override = os.getenv("BATCH7Z_ENV_FILE")
    if override and override.strip():
        return str(Path(override).expanduser().resolve())
    return str((Path.cwd() / ".env").resolve())


class Settings(BaseSettings):
    """Settings loaded from BATCH7Z_* env vars (and ./.env)."""

    model_config = SettingsConfigDict(
        env_file=_env_file(),
        env_file_encoding="utf-8",
        env_prefix="BATCH7Z_",
        case_sensitive=False,
        extra="ignore",
        env_ignore_empty=True,
    )

    # ---- Engine ------------------------------------------------------------
    engine_path: Path | None = None
    engine_candidates: list[Path] = Field(default_factory=lambda: list(DEFAULT_ENGINE_CANDIDATES))

    # ---- Logging -----------------------------------------------------------
    log_level: str = "WARNING"

    # ---- Validators --------------------------------------------------------

    @field_validator("log_level", mode="before")
    @classmethod
    def _v_log_level(cls, v: Any) -> str:
        return ("" if v is None else str(v).strip()).upper() or "WARNING"

    @field_validator("engine_path", mode="before")
    @classmethod
    def _v_engine_path(cls, v: Any) -> Path | None:
        if v in (None, ""):
            return None
        return Path(str(v).strip()).expanduser()


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings(_env_file=_env_file())


__all__ = ["Settings", "get_settings"]
