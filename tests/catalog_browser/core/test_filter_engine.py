from __future__ import annotations

from datetime import datetime, timezone

from catalog_browser.core.catalog import Catalog, Record
from catalog_browser.core.filter_engine import apply
from catalog_browser.core.filter_query import ANY, FilterQuery


def _record(record_id: str, title: str, author: str, genres: list[str]) -> Record:
    return Record(
        id=record_id,
        title=title,
        author_id=author,
        image=f"https://img.example/{record_id}.jpg",
        description=f"About {title}",
        published=datetime(2000, 1, 1, tzinfo=timezone.utc),
        genre_ids=frozenset(genres),
    )


def _make_catalog() -> Catalog:
    """
    A..E with:
    - B and D tagged g1
    - authors a1 (A, C, E) and a2 (B, D)
    """
    records = [
        _record("A", "The Hobbit", "a1", ["g2"]),
        _record("B", "Dune", "a2", ["g1"]),
        _record("C", "Hobbit Tales", "a1", ["g2", "g3"]),
        _record("D", "Dune Messiah", "a2", ["g1", "g2"]),
        _record("E", "Silmarillion", "a1", []),
    ]
    return Catalog(records, authors={"a1": "Tolkien", "a2": "Herbert"}, genres={"g1": "SF", "g2": "Fantasy", "g3": "Short"})


def _ids(records) -> list[str]:
    return [r.id for r in records]


def test_unconstrained_query_returns_universe():
    catalog = _make_catalog()
    query = FilterQuery(title="", author=ANY, genre=ANY)

    assert apply(query, catalog.records) == catalog.records


def test_whitespace_title_matches_everything():
    catalog = _make_catalog()

    assert apply(FilterQuery(title="   "), catalog.records) == catalog.records


def test_title_is_case_insensitive_substring():
    catalog = _make_catalog()

    assert _ids(apply(FilterQuery(title="hOBBit"), catalog.records)) == ["A", "C"]


def test_author_exact_match():
    catalog = _make_catalog()

    assert _ids(apply(FilterQuery(author="a2"), catalog.records)) == ["B", "D"]
    # no partial matching on ids
    assert apply(FilterQuery(author="a"), catalog.records) == ()


def test_genre_membership_preserves_order():
    catalog = _make_catalog()

    assert _ids(apply(FilterQuery(genre="g1"), catalog.records)) == ["B", "D"]
    assert _ids(apply(FilterQuery(genre="g2"), catalog.records)) == ["A", "C", "D"]


def test_predicates_are_combined_with_and():
    catalog = _make_catalog()
    query = FilterQuery(title="dune", author="a2", genre="g2")

    assert _ids(apply(query, catalog.records)) == ["D"]


def test_query_matching_nothing_is_empty():
    catalog = _make_catalog()

    assert apply(FilterQuery(title="zzz"), catalog.records) == ()


def test_result_is_ordered_subsequence_of_universe():
    catalog = _make_catalog()
    universe = list(catalog.records)

    queries = [
        FilterQuery(title="e"),
        FilterQuery(genre="g2"),
        FilterQuery(author="a1", title="o"),
        FilterQuery(genre="missing"),
    ]
    for query in queries:
        result = apply(query, universe)
        positions = [universe.index(r) for r in result]
        assert positions == sorted(set(positions))


def test_apply_is_deterministic():
    catalog = _make_catalog()
    query = FilterQuery(genre="g1")

    assert apply(query, catalog.records) == apply(query, catalog.records)
