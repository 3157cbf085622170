"""
Centralized settings for the Cachet waitlist service.

This file reads environment variables (optionally from a .env file)
and provides sane defaults so the app can boot locally.
"""

import logging
import os
from pathlib import Path

from dotenv import load_dotenv

# Load environment variables from the .env file NEXT TO THIS FILE
ENV_PATH = Path(__file__).resolve().parent / ".env"
load_dotenv(ENV_PATH)


def _get_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _get_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return float(raw)
    except ValueError:
        return default


def _get_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


def _get_str(name: str, default: str = "") -> str:
    raw = os.getenv(name)
    return default if raw is None else raw


def _get_log_level(name: str, default: str = "INFO") -> str:
    level = _get_str(name, default).strip().upper()
    # getLevelName returns "Level X" for unknown names
    if isinstance(logging.getLevelName(level), int):
        return level
    return default


# ---------------------------
# Database
# ---------------------------
DATABASE_URL: str = _get_str("DATABASE_URL", "")
DB_POOL_MIN: int = _get_int("DB_POOL_MIN", 1)
DB_POOL_MAX: int = _get_int("DB_POOL_MAX", 10)
# seconds a request waits for a free pooled connection
DB_POOL_TIMEOUT: float = _get_float("DB_POOL_TIMEOUT", 30.0)
WAITLIST_INIT_DB: bool = _get_bool("WAITLIST_INIT_DB", False)

# ---------------------------
# Web
# ---------------------------
LOG_LEVEL: str = _get_log_level("LOG_LEVEL", "INFO")
CORS_ORIGIN_REGEX: str = _get_str("CORS_ORIGIN_REGEX", "")
