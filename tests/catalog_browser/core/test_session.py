from __future__ import annotations

import threading
from datetime import datetime, timezone

from catalog_browser.core.catalog import Catalog, Record
from catalog_browser.core.display import ListSurface
from catalog_browser.core.filter_query import FilterQuery
from catalog_browser.core.session import Session


def _make_catalog(n: int = 5) -> Catalog:
    """
    Universe [A, B, C, ...]; only B and D carry genre g1.
    """
    records = []
    for i in range(n):
        record_id = chr(ord("A") + i)
        genres = {"g1"} if record_id in ("B", "D") else {"g2"}
        records.append(
            Record(
                id=record_id,
                title=f"Title {record_id}",
                author_id="a1" if i % 2 == 0 else "a2",
                image=f"https://img.example/{record_id}.jpg",
                description="",
                published=datetime(2010, 1, 1, tzinfo=timezone.utc),
                genre_ids=frozenset(genres),
            )
        )
    return Catalog(records, authors={"a1": "Author One"}, genres={"g1": "One", "g2": "Two"})


def test_initial_render_and_load_more_scenario():
    surface = ListSurface()
    session = Session.start(_make_catalog(), page_size=2, surface=surface)

    status = session.status()
    assert surface.record_ids == ["A", "B"]
    assert status.remaining == 3
    assert status.disabled is False

    status = session.load_more()
    assert surface.record_ids == ["A", "B", "C", "D"]
    assert status.remaining == 1

    status = session.load_more()
    assert surface.record_ids == ["A", "B", "C", "D", "E"]
    assert status.remaining == 0
    assert status.disabled is True


def test_load_more_is_noop_when_exhausted():
    surface = ListSurface()
    session = Session.start(_make_catalog(3), page_size=2, surface=surface)
    session.load_more()
    page_before = session.view.page

    status = session.load_more()

    assert session.view.page == page_before
    assert surface.record_ids == ["A", "B", "C"]
    assert status.disabled is True


def test_pagination_covers_every_match_exactly_once():
    catalog = _make_catalog(11)
    surface = ListSurface()
    session = Session.start(catalog, page_size=3, surface=surface)

    while not session.status().disabled:
        session.load_more()

    assert surface.record_ids == [r.id for r in catalog.records]
    assert session.status().remaining == 0


def test_remaining_count_invariant_after_each_step():
    catalog = _make_catalog(7)
    surface = ListSurface()
    session = Session.start(catalog, page_size=3, surface=surface)

    for _ in range(5):
        status = session.status()
        view = session.view
        assert status.remaining == max(0, len(view.matched) - view.page * 3)
        assert status.disabled == (status.remaining == 0)
        assert len(surface.units) == min(view.page * 3, len(view.matched))
        session.load_more()


def test_submit_filter_resets_view_and_surface():
    surface = ListSurface()
    session = Session.start(_make_catalog(), page_size=2, surface=surface)
    session.load_more()

    status = session.submit_filter(FilterQuery(title="", author="any", genre="g1"))

    assert [r.id for r in session.view.matched] == ["B", "D"]
    assert session.view.page == 1
    assert surface.record_ids == ["B", "D"]
    assert status.show_no_results is False
    assert status.disabled is True


def test_submit_same_filter_twice_is_idempotent():
    surface = ListSurface()
    session = Session.start(_make_catalog(), page_size=1, surface=surface)
    query = FilterQuery(genre="g1")

    session.submit_filter(query)
    first = session.view.matched
    session.load_more()
    session.submit_filter(query)

    assert session.view.matched == first
    assert session.view.page == 1
    assert surface.record_ids == ["B"]


def test_filter_matching_nothing_shows_message():
    surface = ListSurface()
    session = Session.start(_make_catalog(), page_size=2, surface=surface)

    status = session.submit_filter(FilterQuery(title="no such book"))

    assert session.view.matched == ()
    assert surface.units == []
    assert status.show_no_results is True
    assert status.disabled is True
    assert status.remaining == 0


def test_units_use_author_display_name():
    surface = ListSurface()
    Session.start(_make_catalog(), page_size=2, surface=surface)

    # a1 has a display name, a2 falls back to its raw id
    assert [u.author_name for u in surface.units] == ["Author One", "a2"]


def test_select_resolves_nth_rendered_unit():
    surface = ListSurface()
    session = Session.start(_make_catalog(), page_size=2, surface=surface)
    session.load_more()

    for unit in surface.units:
        record = session.select([{"data-preview": unit.record_id}])
        assert record is not None
        assert record.id == unit.record_id

    assert session.select([{"className": "list"}]) is None


def test_select_uses_universe_not_matched_subset():
    session = Session.start(_make_catalog(), page_size=2)
    session.submit_filter(FilterQuery(genre="g1"))

    record = session.select([{"data-preview": "A"}])

    assert record is not None and record.id == "A"


def test_snapshot_restore_continues_paging():
    catalog = _make_catalog()
    live_surface = ListSurface()
    live = Session.start(catalog, page_size=2, surface=live_surface)
    live.submit_filter(FilterQuery(author="a1"))

    restored_surface = ListSurface()
    restored = Session.restore(catalog, 2, live.snapshot(), restored_surface)
    restored.load_more()
    live.load_more()

    assert restored.view.matched == live.view.matched
    assert restored.view.page == live.view.page == 2
    assert restored_surface.record_ids == ["E"]
    assert live_surface.record_ids == ["A", "C", "E"]


def test_restore_clamps_bad_page():
    catalog = _make_catalog()

    assert Session.restore(catalog, 2, {"page": 0}).view.page == 1
    assert Session.restore(catalog, 2, {"page": "x"}).view.page == 1
    assert Session.restore(catalog, 2, None).view.matched == catalog.records


def test_concurrent_load_more_renders_each_record_once():
    catalog = _make_catalog(20)
    surface = ListSurface()
    session = Session.start(catalog, page_size=1, surface=surface)

    threads = [threading.Thread(target=session.load_more) for _ in range(30)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert surface.record_ids == [r.id for r in catalog.records]
