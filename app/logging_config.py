"""Logging setup shared by the API process and the command-line scripts."""

import logging
from typing import Optional

from app.config import settings


def configure_logging(level: Optional[str] = None) -> None:
    """Apply the configured level and format to the root logger."""
    logging.basicConfig(
        level=getattr(logging, (level or settings.log_level).upper(), logging.INFO),
        format=settings.log_format,
    )
