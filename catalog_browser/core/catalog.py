from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from types import MappingProxyType
from typing import Dict, FrozenSet, Iterable, Mapping, Optional, Tuple


@dataclass(frozen=True)
class Record:
    """
    A single book in the catalog universe.

    Records are created once by the loader and never mutated afterwards;
    everything downstream (filter engine, renderer, detail view) only reads them.
    """
    id: str
    title: str
    author_id: str
    image: str
    description: str
    published: datetime
    genre_ids: FrozenSet[str] = field(default_factory=frozenset)


class Catalog:
    """
    Immutable universe of records plus the author and genre lookup tables.

    Design Notes:
    - ``records`` keeps the load order; the filter engine relies on it
    - ``get`` looks up the full universe, not any filtered subset, so a detail
      view can always be opened for a rendered record
    - lookups tables are exposed read-only
    """

    def __init__(
        self,
        records: Iterable[Record],
        authors: Mapping[str, str],
        genres: Mapping[str, str],
    ) -> None:
        self._records: Tuple[Record, ...] = tuple(records)
        self._by_id: Dict[str, Record] = {}
        for record in self._records:
            # First occurrence wins; duplicates are reported by validate_catalog
            self._by_id.setdefault(record.id, record)
        self._authors = MappingProxyType(dict(authors))
        self._genres = MappingProxyType(dict(genres))

    @property
    def records(self) -> Tuple[Record, ...]:
        return self._records

    @property
    def authors(self) -> Mapping[str, str]:
        return self._authors

    @property
    def genres(self) -> Mapping[str, str]:
        return self._genres

    def __len__(self) -> int:
        return len(self._records)

    def get(self, record_id: str) -> Optional[Record]:
        return self._by_id.get(record_id)

    def author_name(self, author_id: str) -> str:
        """Display name for an author id, falling back to the raw id."""
        return self._authors.get(author_id, author_id)
