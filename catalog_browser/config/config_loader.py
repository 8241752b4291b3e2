from __future__ import annotations

import json
import logging
from pathlib import Path

from catalog_browser.config.model import DEFAULT_PAGE_SIZE, THEMES, GlobalConfig
from catalog_browser.core.exceptions import ConfigError

logger = logging.getLogger(__name__)


def load_global_config(root: Path) -> GlobalConfig:
    """
    Load ``global.json`` from a config directory.
    """
    root = Path(root)
    logger.info(
        "Loading global config",
        extra={"config_root": str(root)},
    )

    global_path = root / "global.json"
    if not global_path.is_file():
        raise ConfigError(f"File not found at {global_path}")

    try:
        with global_path.open(encoding="utf-8") as f:
            raw_global = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigError(f"Invalid JSON in {global_path}: {e}") from e

    if not isinstance(raw_global, dict):
        raise ConfigError(f"{global_path} must contain a JSON object")

    page_size = raw_global.get("page_size", DEFAULT_PAGE_SIZE)
    if isinstance(page_size, bool) or not isinstance(page_size, int) or page_size < 1:
        raise ConfigError(f"page_size must be a positive integer, got {page_size!r}")

    default_theme = str(raw_global.get("default_theme", "day")).lower()
    if default_theme not in THEMES:
        logger.warning(f"Unknown default_theme {default_theme!r}, falling back to 'day'")
        default_theme = "day"

    # Resolve data_file relative to the config root
    data_file_path = Path(raw_global.get("data_file", "books.json"))
    if not data_file_path.is_absolute():
        data_file_path = (root / data_file_path).resolve()

    return GlobalConfig(
        ui_title=raw_global.get("ui_title", "Book Catalog"),
        subtitle=raw_global.get("subtitle", "Browse, filter and preview books"),
        page_size=page_size,
        default_theme=default_theme,
        data_file=data_file_path,
    )
