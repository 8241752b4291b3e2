from __future__ import annotations

import logging
import os
from typing import Optional

from pythonjsonlogger import jsonlogger

LOG_FORMAT_ENV = "CATALOG_BROWSER_LOG_FORMAT"
LOG_LEVEL_ENV = "CATALOG_BROWSER_LOG_LEVEL"

# Dash answers every list/detail callback with a POST; keep those out of INFO
QUIET_LOGGERS = ("werkzeug",)


def _resolve_level(level: Optional[int]) -> int:
    if level is not None:
        return level
    name = os.getenv(LOG_LEVEL_ENV, "INFO").upper()
    resolved = logging.getLevelName(name)
    return resolved if isinstance(resolved, int) else logging.INFO


def configure_logging(
        level: Optional[int] = None,
        force_format: Optional[str] = None,
) -> None:
    """
    Install one stream handler on the root logger.

    Format: force_format ("json" or "plain"), else CATALOG_BROWSER_LOG_FORMAT,
    else JSON. Fields passed via ``extra=`` (record_id, page, codes...) become
    top-level JSON keys.

    Level: the ``level`` argument, else CATALOG_BROWSER_LOG_LEVEL, else INFO.
    Unknown level names fall back to INFO.
    """
    format_mode = (force_format or os.getenv(LOG_FORMAT_ENV, "json")).lower()
    resolved_level = _resolve_level(level)

    if format_mode == "plain":
        formatter = logging.Formatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s")
    else:
        formatter = jsonlogger.JsonFormatter(
            "%(asctime)s %(levelname)s %(name)s %(message)s",
            rename_fields={"levelname": "level", "name": "logger"},
        )

    handler = logging.StreamHandler()
    handler.setFormatter(formatter)

    root = logging.getLogger()
    root.setLevel(resolved_level)
    root.handlers.clear()
    root.addHandler(handler)

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(max(resolved_level, logging.WARNING))
