"""
Core domain layer: catalog universe, filter engine, result store, pager,
renderer, selection resolver and the session state machine
"""

from .catalog import Catalog, Record
from .catalog_store import CatalogStore, ResultView
from .display import DisplaySurface, DisplayUnit, ListSurface, Renderer
from .filter_query import ANY, FilterQuery
from .session import ListStatus, Session

__all__ = [
    "ANY",
    "Catalog",
    "CatalogStore",
    "DisplaySurface",
    "DisplayUnit",
    "FilterQuery",
    "ListStatus",
    "ListSurface",
    "Record",
    "Renderer",
    "ResultView",
    "Session",
]
