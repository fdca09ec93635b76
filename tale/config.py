from __future__ import annotations
import logging
import os
from typing import Optional


DEFAULT_LOG_LEVEL = "WARNING"
DEFAULT_REPL_HOST = "127.0.0.1"
DEFAULT_REPL_PORT = 8765


def _env(var: str) -> Optional[str]:
    raw = os.environ.get(var)
    if raw is None or not raw.strip():
        return None
    return raw.strip()


def get_log_level() -> int:
    name = (_env("TALE_LOG_LEVEL") or DEFAULT_LOG_LEVEL).upper()
    level = logging.getLevelName(name)
    # getLevelName returns "Level X" for unknown names
    return level if isinstance(level, int) else logging.WARNING


def get_recursion_limit() -> Optional[int]:
    """Host recursion limit for evaluation, or None to keep Python's default."""
    raw = _env("TALE_RECURSION_LIMIT")
    if raw is None:
        return None
    try:
        limit = int(raw)
    except ValueError:
        return None
    return limit if limit > 0 else None


def get_repl_address() -> tuple[str, int]:
    host = _env("TALE_REPL_HOST") or DEFAULT_REPL_HOST
    raw_port = _env("TALE_REPL_PORT")
    try:
        port = int(raw_port) if raw_port is not None else DEFAULT_REPL_PORT
    except ValueError:
        port = DEFAULT_REPL_PORT
    return host, port
