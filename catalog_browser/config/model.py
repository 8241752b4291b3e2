from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

DEFAULT_PAGE_SIZE = 36
THEMES = ("day", "night")


@dataclass
class GlobalConfig:
    """
    Parsed ``global.json``.

    ``data_file`` is already resolved against the config root.
    """
    ui_title: str
    subtitle: str
    page_size: int
    default_theme: str
    data_file: Path
