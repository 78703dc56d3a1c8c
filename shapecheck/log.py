"""
Logging setup for applications embedding shapecheck.

The library itself only creates module loggers; call setup_logging()
from an entry point to attach a handler. ``log_format="json"`` emits one
JSON object per line via json_log_formatter.
"""

from __future__ import annotations

import logging
from typing import Optional

import json_log_formatter

from .config import Settings, get_settings

TEXT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def build_formatter(log_format: str) -> logging.Formatter:
    """Return the formatter for a ``Settings.log_format`` value."""
    if log_format == "json":
        return json_log_formatter.JSONFormatter()
    return logging.Formatter(TEXT_FORMAT)


def setup_logging(settings: Optional[Settings] = None) -> logging.Handler:
    """Install a single stream handler on the root logger.

    Args:
        settings: Settings to use (defaults to get_settings())

    Returns:
        The installed handler
    """
    settings = settings or get_settings()

    handler = logging.StreamHandler()
    handler.setFormatter(build_formatter(settings.log_format))

    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, settings.log_level.upper(), logging.INFO))
    root_logger.handlers = [handler]
    return handler
