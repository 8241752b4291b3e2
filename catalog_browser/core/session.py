from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Optional

from . import filter_engine, pager, selection
from .catalog import Catalog, Record
from .catalog_store import CatalogStore, ResultView
from .display import DisplaySurface, DisplayUnit, ListSurface, Renderer
from .filter_query import FilterQuery

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ListStatus:
    """What the list controls need after a transition."""
    remaining: int
    disabled: bool
    show_no_results: bool
    n_matched: int


class Session:
    """
    Explicitly owned list state machine for one browser view.

    Holds the catalog universe, the CatalogStore (result view + page cursor) and
    the display surface units are rendered onto. All mutation goes through the
    transitions below, which share one lock so a multi-threaded host sees them
    strictly in call order.

    States: Idle(view)
    - submit_filter(query): Idle(view) -> Idle({filter(query), page 1}); clear + first page
    - load_more(): Idle(view) -> Idle({..., page + 1}); next page appended.
      No-op when nothing remains, whatever the UI button says.
    """

    def __init__(
        self,
        catalog: Catalog,
        page_size: int,
        surface: Optional[DisplaySurface] = None,
    ) -> None:
        self.catalog = catalog
        self.store = CatalogStore(catalog.records, page_size)
        self.surface: DisplaySurface = surface if surface is not None else ListSurface()
        self.renderer = Renderer(catalog)
        self.query = FilterQuery()
        self._lock = threading.RLock()

    # ------------------------------------------------------------------ #
    # Construction
    # ------------------------------------------------------------------ #
    @classmethod
    def start(
        cls,
        catalog: Catalog,
        page_size: int,
        surface: Optional[DisplaySurface] = None,
    ) -> Session:
        """New session showing the whole universe, first page rendered."""
        session = cls(catalog, page_size, surface)
        session._render(*pager.first_slice(page_size))
        return session

    @classmethod
    def restore(
        cls,
        catalog: Catalog,
        page_size: int,
        snapshot: Optional[Dict[str, Any]],
        surface: Optional[DisplaySurface] = None,
    ) -> Session:
        """
        Rebuild a settled session from ``snapshot()`` output without rendering.

        The surface is assumed to already show what the snapshot describes,
        which is the case for a browser that kept its list between requests.
        """
        session = cls(catalog, page_size, surface)
        snapshot = snapshot or {}
        query = FilterQuery.from_dict(snapshot.get("query"))
        try:
            page = max(1, int(snapshot.get("page", 1)))
        except (TypeError, ValueError):
            logger.warning("Ignoring invalid page in snapshot: %r", snapshot.get("page"))
            page = 1

        session.query = query
        session.store.reset(filter_engine.apply(query, catalog.records))
        session.store.view.page = page
        return session

    def snapshot(self) -> Dict[str, Any]:
        with self._lock:
            return {"query": self.query.to_dict(), "page": self.store.view.page}

    # ------------------------------------------------------------------ #
    # Transitions
    # ------------------------------------------------------------------ #
    def submit_filter(self, query: FilterQuery) -> ListStatus:
        with self._lock:
            matched = filter_engine.apply(query, self.catalog.records)
            self.query = query
            self.store.reset(matched)
            self.surface.clear_all()
            self._render(*pager.first_slice(self.store.page_size))

            logger.info(
                "Filter submitted",
                extra={
                    "title": query.title,
                    "author": query.author,
                    "genre": query.genre,
                    "n_matched": len(matched),
                },
            )
            return self.status()

    def load_more(self) -> ListStatus:
        with self._lock:
            if self.store.remaining_count() < 1:
                logger.debug("load_more ignored, nothing remaining")
                return self.status()

            start, end = pager.next_slice(self.store.view, self.store.page_size)
            self._render(start, end)
            self.store.advance_page()
            return self.status()

    def select(self, path: Iterable[Any]) -> Optional[Record]:
        with self._lock:
            return selection.resolve(path, self.catalog)

    def status(self) -> ListStatus:
        with self._lock:
            remaining = self.store.remaining_count()
            n_matched = len(self.store.view.matched)
            return ListStatus(
                remaining=remaining,
                disabled=remaining == 0,
                show_no_results=n_matched == 0,
                n_matched=n_matched,
            )

    @property
    def view(self) -> ResultView:
        return self.store.view

    # ------------------------------------------------------------------ #
    # Internals
    # ------------------------------------------------------------------ #
    def _render(self, start: int, end: int) -> List[DisplayUnit]:
        records = pager.slice_records(self.store.view, start, end)
        units = self.renderer.render_slice(records)
        self.surface.append(units)
        return units
