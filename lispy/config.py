from __future__ import annotations
import logging
import os
from pathlib import Path

# Defaults
_DEFAULT_PROMPT = "lispy> "
_DEFAULT_HISTORY_FILE = Path.home() / ".lispy_history"
_DEFAULT_LOG_LEVEL = "WARNING"


def get_prompt() -> str:
    return os.environ.get("LISPY_PROMPT") or _DEFAULT_PROMPT


def get_history_file() -> Path:
    raw = os.environ.get("LISPY_HISTORY_FILE")
    return Path(raw).expanduser() if raw else _DEFAULT_HISTORY_FILE


def get_log_level() -> int:
    raw = (os.environ.get("LISPY_LOG_LEVEL") or _DEFAULT_LOG_LEVEL).upper()
    level = logging.getLevelName(raw)
    # getLevelName returns a string for unknown names
    return level if isinstance(level, int) else logging.WARNING


def color_enabled() -> bool:
    return os.environ.get("LISPY_COLOR", "1") != "0"
