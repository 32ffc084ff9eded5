"""
Logging configuration for the GitHub MCP server.

Usage:
    from config.logging_config import get_logger
    logger = get_logger("dispatcher")
    logger.info("Tool dispatched")

Everything goes to stderr: stdout belongs to the stdio transport.
"""

from __future__ import annotations

import logging
import sys

LOGGER_NAMESPACE = "github_server"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

_initialized = False


def _resolve_level(level: str | int | None) -> int:
    if isinstance(level, int):
        return level
    if not level:
        return logging.INFO
    return getattr(logging, str(level).upper(), logging.INFO)


def setup_logging(level: str | int | None = None) -> logging.Logger:
    """Attach a single stderr handler to the server's root logger.

    Safe to call more than once; later calls only adjust the level.
    """
    global _initialized

    root = logging.getLogger(LOGGER_NAMESPACE)
    root.setLevel(_resolve_level(level))

    if not _initialized:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(handler)
        root.propagate = False
        _initialized = True

    return root


def get_logger(name: str) -> logging.Logger:
    """Get a logger nested under the server namespace."""
    return logging.getLogger(f"{LOGGER_NAMESPACE}.{name}")
