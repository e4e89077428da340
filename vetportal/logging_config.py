"""Logging configuration for the portal process."""

from __future__ import annotations

import logging
import sys

from vetportal.config import get_settings

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str | None = None) -> None:
    """Configure the root logger using ``LOG_LEVEL`` unless ``level`` is given."""

    resolved = (level or get_settings().log_level).upper()
    logging.basicConfig(
        format=LOG_FORMAT,
        stream=sys.stdout,
        level=getattr(logging, resolved, logging.INFO),
    )
    # httpx logs every request at INFO; keep it quiet unless debugging.
    logging.getLogger("httpx").setLevel(
        logging.DEBUG if resolved == "DEBUG" else logging.WARNING
    )


__all__ = ["configure_logging", "LOG_FORMAT"]
