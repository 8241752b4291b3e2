from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Iterable, List, Sequence

from .catalog import Catalog, Record

# Attribute carried by every rendered unit; the only link back to its record
CORRELATION_ATTR = "data-preview"


@dataclass(frozen=True)
class DisplayUnit:
    """
    Rendered representation of exactly one record.

    ``record_id`` is a back-reference, not ownership: units never hold the
    Record itself, the Selection Resolver looks it up again in the catalog.
    """
    record_id: str
    title: str
    author_name: str
    image: str


class DisplaySurface(ABC):
    """
    Accumulating surface that rendered units are appended to.

    Only two mutations exist. ``append`` is used for every render,
    ``clear_all`` only when a filter submission resets the result view.
    """

    @abstractmethod
    def append(self, units: Sequence[DisplayUnit]) -> None:
        ...

    @abstractmethod
    def clear_all(self) -> None:
        ...


class ListSurface(DisplaySurface):
    """In-memory surface, used by tests and any non-Dash front end."""

    def __init__(self) -> None:
        self.units: List[DisplayUnit] = []

    def append(self, units: Sequence[DisplayUnit]) -> None:
        self.units.extend(units)

    def clear_all(self) -> None:
        self.units.clear()

    @property
    def record_ids(self) -> List[str]:
        return [u.record_id for u in self.units]


class Renderer:
    """Projects records into display units, resolving author names via the catalog."""

    def __init__(self, catalog: Catalog) -> None:
        self.catalog = catalog

    def render_unit(self, record: Record) -> DisplayUnit:
        return DisplayUnit(
            record_id=record.id,
            title=record.title,
            author_name=self.catalog.author_name(record.author_id),
            image=record.image,
        )

    def render_slice(self, records: Iterable[Record]) -> List[DisplayUnit]:
        return [self.render_unit(r) for r in records]
