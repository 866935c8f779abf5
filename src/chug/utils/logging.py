"""Logging utilities for chug."""

from __future__ import annotations

import logging
from typing import Optional

from ..config import DEFAULT_LOG_LEVEL


def configure_logging(level: Optional[str] = None) -> None:
    """Configure the root logger for the application."""
    log_level = (level or DEFAULT_LOG_LEVEL).upper()
    logging.basicConfig(level=getattr(logging, log_level, logging.WARNING))
