from __future__ import annotations

from typing import Iterable, Tuple

from .catalog import Record
from .filter_query import ANY, FilterQuery


def title_matches(query: FilterQuery, record: Record) -> bool:
    if query.title.strip() == "":
        return True
    return query.title.lower() in record.title.lower()


def author_matches(query: FilterQuery, record: Record) -> bool:
    return query.author == ANY or record.author_id == query.author


def genre_matches(query: FilterQuery, record: Record) -> bool:
    return query.genre == ANY or query.genre in record.genre_ids


def apply(query: FilterQuery, universe: Iterable[Record]) -> Tuple[Record, ...]:
    """
    Return the records of ``universe`` matching every predicate of ``query``.

    The result is a subsequence of ``universe``: original relative order is kept
    and nothing is sorted, deduplicated or added.
    """
    return tuple(
        record
        for record in universe
        if title_matches(query, record)
        and author_matches(query, record)
        and genre_matches(query, record)
    )
