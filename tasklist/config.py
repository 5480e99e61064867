from __future__ import annotations

import logging
import os
from dataclasses import dataclass

try:
    from dotenv import load_dotenv
    load_dotenv()
except Exception:
    pass


_TRUTHY = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class Settings:
    log_level: str
    strict_deadline_time: bool


def _env_bool(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    return raw.strip().lower() in _TRUTHY


def load_strict_deadline_time() -> bool:
    """Read only the deadline strictness flag; never fails."""
    return _env_bool("TASKLIST_STRICT_DEADLINE_TIME")


def load_settings() -> Settings:
    log_level = os.getenv("TASKLIST_LOG_LEVEL", "INFO").strip().upper() or "INFO"
    strict = load_strict_deadline_time()

    if not isinstance(logging.getLevelName(log_level), int):
        raise RuntimeError(f"TASKLIST_LOG_LEVEL invalid in .env: {log_level}")

    return Settings(
        log_level=log_level,
        strict_deadline_time=strict,
    )
