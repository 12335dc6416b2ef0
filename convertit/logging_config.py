"""Logging setup for the widget."""
from __future__ import annotations

import logging
import sys
from datetime import datetime
from typing import Optional


LOGGER_NAME = "convertit"


class StructuredFormatter(logging.Formatter):
    """[timestamp] LEVEL [module] message"""

    def format(self, record: logging.LogRecord) -> str:
        parts = [
            f"[{datetime.fromtimestamp(record.created).isoformat()}]",
            f"{record.levelname:8s}",
        ]
        if record.name != "root":
            parts.append(f"[{record.name.split('.')[-1]:12s}]")
        parts.append(record.getMessage())
        if record.exc_info:
            parts.append(self.formatException(record.exc_info))
        return " ".join(parts)


def setup_logging(level: Optional[str] = None) -> logging.Logger:
    """Attach a single stderr handler to the package logger. Safe to call on every rerun."""
    if level is None:
        from convertit.config import get_settings

        level = get_settings().log_level

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(getattr(logging, level.upper(), logging.WARNING))
    if not any(isinstance(h.formatter, StructuredFormatter) for h in logger.handlers):
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(StructuredFormatter())
        logger.addHandler(handler)
    return logger
