from __future__ import annotations

from typing import Any, List, Sequence

from dash import Patch, no_update

from catalog_browser.core.display import DisplaySurface, DisplayUnit
from catalog_browser.ui.helpers import build_preview_button


class DashSurface(DisplaySurface):
    """
    Display surface backed by the LIST_ITEMS children of the browser.

    A callback gets a fresh DashSurface, runs one Session transition against
    it, then returns ``to_children()``: a full children list after a reset, or a
    ``Patch`` that only appends when the transition was a page advance.
    """

    def __init__(self) -> None:
        self._replaced = False
        self._components: List[Any] = []

    def append(self, units: Sequence[DisplayUnit]) -> None:
        self._components.extend(build_preview_button(u) for u in units)

    def clear_all(self) -> None:
        self._replaced = True
        self._components = []

    @property
    def replaced(self) -> bool:
        return self._replaced

    @property
    def components(self) -> List[Any]:
        return list(self._components)

    def to_children(self) -> Any:
        if self._replaced:
            return list(self._components)
        if not self._components:
            return no_update
        patch = Patch()
        patch.extend(self._components)
        return patch
