"""
FIX Analyzer Configuration
==========================
Environment-driven settings and structured logging for the FIX analyzer core.

Environment
-----------
  FIX_ANALYZER_LOG_LEVEL   minimum level emitted (DEBUG, INFO, WARNING, ...)
  FIX_ANALYZER_LOG_FORMAT  "json" (default) or "console"
"""

from __future__ import annotations

import logging
import os
from typing import Optional

import structlog

# ============================================
# Configuration
# ============================================
LOG_LEVEL = os.environ.get("FIX_ANALYZER_LOG_LEVEL", "INFO").upper()
LOG_FORMAT = os.environ.get("FIX_ANALYZER_LOG_FORMAT", "json").lower()

LOG_FORMATS = {"json", "console"}


def _level_number(name: str) -> int:
    level = logging.getLevelName(name.upper())
    return level if isinstance(level, int) else logging.INFO


# ============================================
# Logging
# ============================================
def configure_logging(level: Optional[str] = None, fmt: Optional[str] = None) -> None:
    """(Re)apply the structlog pipeline. Arguments override the environment."""
    level = (level or LOG_LEVEL).upper()
    fmt = (fmt or LOG_FORMAT).lower()
    if fmt not in LOG_FORMATS:
        fmt = "json"

    renderer = (
        structlog.dev.ConsoleRenderer(colors=False)
        if fmt == "console"
        else structlog.processors.JSONRenderer()
    )
    structlog.configure(
        processors=[
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.stdlib.add_log_level,
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(_level_number(level)),
    )


def get_logger(component: str):
    return structlog.get_logger(component=component)
