from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from .activity_log import DEFAULT_LOG_FILE


@dataclass(frozen=True)
class Settings:
    """
    Console settings loaded from environment variables.

    Env vars:
    - TODO_LOG_FILE: activity log path. Default 'app_log.txt'
    - TODO_LOG_LEVEL: level for diagnostics on stderr. Default 'WARNING'
    - TODO_ACTIVITY_LOG: 'false' to skip writing the activity log (default: true)
    """

    log_file: str
    log_level: str
    activity_log: bool


def _get_env(name: str, default: str) -> str:
    value = os.getenv(name, default)
    if value is None or value == "":
        return default
    return value


def _parse_bool(value: str, default: bool = False) -> bool:
    v = value.strip().lower()
    if v in {"1", "true", "yes", "on"}:
        return True
    if v in {"0", "false", "no", "off"}:
        return False
    return default


def _parse_level(value: str, default: str) -> str:
    level = value.strip().upper()
    if isinstance(logging.getLevelName(level), int):
        return level
    return default


def get_settings() -> Settings:
    """Return console settings loaded from environment variables."""
    return Settings(
        log_file=_get_env("TODO_LOG_FILE", DEFAULT_LOG_FILE).strip(),
        log_level=_parse_level(_get_env("TODO_LOG_LEVEL", "WARNING"), "WARNING"),
        activity_log=_parse_bool(_get_env("TODO_ACTIVITY_LOG", "true"), True),
    )
