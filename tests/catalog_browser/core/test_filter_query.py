from __future__ import annotations

from catalog_browser.core.filter_query import ANY, FilterQuery


def test_filter_query_to_from_dict_roundtrip():
    q = FilterQuery(title="dune", author="a2", genre="g1")

    assert FilterQuery.from_dict(q.to_dict()) == q


def test_from_dict_defaults_missing_fields_to_sentinels():
    q = FilterQuery.from_dict({"title": None})

    assert q == FilterQuery(title="", author=ANY, genre=ANY)
    assert q.is_unconstrained
    assert FilterQuery.from_dict(None).is_unconstrained


def test_blank_title_still_unconstrained():
    assert FilterQuery(title="  ").is_unconstrained
    assert not FilterQuery(genre="g1").is_unconstrained
