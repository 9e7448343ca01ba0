from __future__ import annotations

import logging
import os

DEFAULT_LOG_LEVEL = logging.WARNING
DEFAULT_RECURSION_LIMIT = 10000


def get_log_level() -> int:
    """Log level named by TZ_LOG_LEVEL, e.g. DEBUG. Unknown names give WARNING."""
    raw = os.environ.get("TZ_LOG_LEVEL")
    if not raw:
        return DEFAULT_LOG_LEVEL
    level = getattr(logging, raw.strip().upper(), None)
    if isinstance(level, int):
        return level
    return DEFAULT_LOG_LEVEL


def get_recursion_limit() -> int:
    """Python recursion limit applied by the host before evaluating a program.

    The evaluator is a recursive tree walker, so deeply nested expressions and
    recursive script functions need more headroom than the interpreter default.
    """
    raw = os.environ.get("TZ_RECURSION_LIMIT")
    if not raw:
        return DEFAULT_RECURSION_LIMIT
    try:
        limit = int(raw)
    except ValueError:
        return DEFAULT_RECURSION_LIMIT
    return limit if limit > 0 else DEFAULT_RECURSION_LIMIT
