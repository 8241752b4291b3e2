from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Sequence, Tuple

from .catalog import Record
from .exceptions import ConfigError

logger = logging.getLogger(__name__)


@dataclass
class ResultView:
    """
    Active result set plus pagination cursor.

    - matched: subsequence of the universe, in universe order
    - page: number of pages rendered since the last reset (always >= 1)
    """
    matched: Tuple[Record, ...]
    page: int = 1


class CatalogStore:
    """
    Owns the current ResultView.

    The view is replaced wholesale by ``reset`` and only ever mutated in place
    by ``advance_page``. Callers must check ``remaining_count`` before advancing.
    """

    def __init__(self, universe: Sequence[Record], page_size: int) -> None:
        if isinstance(page_size, bool) or not isinstance(page_size, int) or page_size < 1:
            raise ConfigError(f"page_size must be a positive integer, got {page_size!r}")
        self.page_size = page_size
        self.view = ResultView(matched=tuple(universe), page=1)

    def reset(self, matched: Sequence[Record]) -> ResultView:
        self.view = ResultView(matched=tuple(matched), page=1)
        logger.debug("Result view reset", extra={"n_matched": len(self.view.matched)})
        return self.view

    def advance_page(self) -> int:
        self.view.page += 1
        return self.view.page

    def remaining_count(self) -> int:
        return max(0, len(self.view.matched) - self.view.page * self.page_size)

    def rendered_count(self) -> int:
        """Number of matched records on screen in a settled state."""
        return min(self.view.page * self.page_size, len(self.view.matched))
