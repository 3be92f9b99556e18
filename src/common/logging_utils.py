"""Centralized logging helpers.

Provides one place to configure the root logger, build structured ``extra``
payloads, gate expensive DEBUG traces and keep secrets out of log lines.
"""
from __future__ import annotations

import logging
import os
import time
import urllib.parse
from typing import Any, Dict, Optional

from constants import Constants

_CONFIGURED_ATTR = "_nugetvis_configured"


def configure_logging(level: Optional[str] = None) -> None:
    """Configure the root logger once.

    The level comes from ``level`` when given, else from the
    ``NUGETVIS_LOG_LEVEL`` environment variable, else INFO. Calling this again
    only updates the level.
    """
    level_name = (level or os.environ.get(Constants.ENV_LOG_LEVEL) or "INFO").upper()
    level_value = getattr(logging, level_name, logging.INFO)
    if not isinstance(level_value, int):
        level_value = logging.INFO

    root = logging.getLogger()
    if not getattr(root, _CONFIGURED_ATTR, False):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(Constants.LOG_FORMAT))
        root.addHandler(handler)
        setattr(root, _CONFIGURED_ATTR, True)
    root.setLevel(level_value)


def extra_context(**fields: Any) -> Dict[str, Any]:
    """Return a dict suitable for ``logger.x(..., extra=...)`` without None values."""
    return {k: v for k, v in fields.items() if v is not None}


def is_debug_enabled(logger: logging.Logger) -> bool:
    """True when DEBUG records from ``logger`` would be emitted."""
    return logger.isEnabledFor(logging.DEBUG)


def safe_url(url: str) -> str:
    """Return ``url`` with secret query parameter values replaced.

    Parameter names are matched case-insensitively against
    ``Constants.SECRET_QUERY_PARAMS``. Anything that does not parse is
    returned unchanged.
    """
    try:
        parts = urllib.parse.urlsplit(url)
    except ValueError:
        return url
    if not parts.query:
        return url
    pairs = urllib.parse.parse_qsl(parts.query, keep_blank_values=True)
    redacted = [
        (name, Constants.REDACTED if name.lower() in Constants.SECRET_QUERY_PARAMS else value)
        for name, value in pairs
    ]
    query = urllib.parse.urlencode(redacted, safe="*")
    return urllib.parse.urlunsplit((parts.scheme, parts.netloc, parts.path, query, parts.fragment))


class Timer:
    """Context manager measuring wall time in milliseconds."""

    def __init__(self) -> None:
        self._start = 0.0
        self._end: Optional[float] = None

    def __enter__(self) -> "Timer":
        self._start = time.perf_counter()
        self._end = None
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self._end = time.perf_counter()

    def duration_ms(self) -> int:
        end = self._end if self._end is not None else time.perf_counter()
        return int((end - self._start) * 1000)
