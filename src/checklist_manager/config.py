# src/checklist_manager/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app.
- Every value has a usable default; an empty environment runs the app.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

ENV_PREFIX = "CHECKLIST"

DEFAULT_FILE = "checklist.txt"
DEFAULT_LOG_LEVEL = "WARNING"


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


load_dotenv(override=False)


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw.strip()).expanduser()


def _env_optional_path(name: str) -> Path | None:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return None
    return Path(raw.strip()).expanduser()


def _env_log_level(name: str, default: str) -> str:
    raw = _env(name, default).strip().upper()
    # Only accept names the logging module knows about.
    if not isinstance(logging.getLevelName(raw), int):
        return default
    return raw


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- Storage ----
    checklist_file: Path

    # ---- Logging ----
    log_level: str
    log_dir: Path | None

    @property
    def console_log_level(self) -> int:
        return getattr(logging, self.log_level, logging.WARNING)

    @staticmethod
    def from_env() -> "Settings":
        return Settings(
            checklist_file=_env_path(_k("FILE"), Path(DEFAULT_FILE)),
            log_level=_env_log_level(_k("LOG_LEVEL"), DEFAULT_LOG_LEVEL),
            log_dir=_env_optional_path(_k("LOG_DIR")),
        )


SETTINGS = Settings.from_env()


def get_settings() -> Settings:
    return SETTINGS
