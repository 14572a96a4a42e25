from __future__ import annotations
import logging
import os
from typing import Optional


_DEFAULT_PROMPT = "pon> "


def get_prompt() -> str:
    return os.environ.get("PON_PROMPT", _DEFAULT_PROMPT)


def get_log_level() -> int:
    """
    Determine log level from LOGLEVEL environment variable.
    Defaults to WARNING if not set.
    """
    loglevel_env = os.getenv("LOGLEVEL", "").upper()
    if loglevel_env:
        level = getattr(logging, loglevel_env, None)
        if isinstance(level, int):
            return level
    return logging.WARNING


def get_recursion_limit() -> Optional[int]:
    raw = os.environ.get("PON_RECURSION_LIMIT", "").strip()
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError:
        return None
