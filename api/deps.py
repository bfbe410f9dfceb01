"""
API Dependencies

Dependency injection for the API. Route handlers receive their logger from
here instead of reaching for module-level state, so the core modules they
call stay logger-free.
"""

from __future__ import annotations

import logging


REQUEST_LOGGER_NAME = "forge.requests"


def get_logger() -> logging.Logger:
    """Logger handle for request handlers."""
    return logging.getLogger(REQUEST_LOGGER_NAME)
