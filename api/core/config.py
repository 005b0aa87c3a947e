"""
Environment-backed settings.

Values are read on every call so tests can override them with monkeypatch.
"""

from __future__ import annotations

import os
from pathlib import Path

_DEFAULT_STATIC_DIR = Path(__file__).resolve().parent / "public"


def env_str(name: str, default: str = "") -> str:
    return os.environ.get(name, "").strip() or default


def env_int(name: str, default: int) -> int:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def log_level() -> str:
    return env_str("LOG_LEVEL", "INFO").upper()


def cors_origins() -> list[str]:
    raw = env_str("CORS_ORIGINS", "*")
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


def static_dir() -> Path:
    raw = env_str("STATIC_DIR")
    return Path(raw) if raw else _DEFAULT_STATIC_DIR
