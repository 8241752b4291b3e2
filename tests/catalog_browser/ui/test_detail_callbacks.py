from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path

import pytest
from dash.exceptions import PreventUpdate

from catalog_browser.config.model import GlobalConfig
from catalog_browser.core.catalog import Catalog, Record
from catalog_browser.core.filter_query import FilterQuery
from catalog_browser.core.session import Session
from catalog_browser.ui.callbacks.callbacks_detail import (
    DETAIL_CLOSED,
    detail_outputs,
    resolve_clicked_record,
    run_detail_transition,
)
from catalog_browser.ui.config import AppConfig
from catalog_browser.ui.ids import IDs, preview_id
from catalog_browser.ui.surface import DashSurface


def _make_ctx() -> AppConfig:
    records = [
        Record(
            id="b1",
            title="Kindred",
            author_id="a1",
            image="https://img.example/b1.jpg",
            description="Time travel.",
            published=datetime(1979, 6, 1, tzinfo=timezone.utc),
        ),
        Record(
            id="b2",
            title="Dawn",
            author_id="a1",
            image="https://img.example/b2.jpg",
            description="First contact.",
            published=datetime(1987, 5, 1, tzinfo=timezone.utc),
        ),
    ]
    return AppConfig(
        config_root=Path("."),
        global_config=GlobalConfig("T", "", 10, "day", Path("books.json")),
        catalog=Catalog(records, authors={"a1": "Octavia E. Butler"}, genres={}),
    )


def _rendered_children(ctx: AppConfig) -> list:
    surface = DashSurface()
    Session.start(ctx.catalog, ctx.page_size, surface)
    return surface.components


def test_click_on_unit_opens_its_record():
    ctx = _make_ctx()
    children = _rendered_children(ctx)

    record = resolve_clicked_record(ctx, children, preview_id("b2"))

    assert record is not None
    assert record.id == "b2"


def test_click_outside_units_resolves_nothing():
    ctx = _make_ctx()
    children = _rendered_children(ctx)

    assert resolve_clicked_record(ctx, children, "list-close") is None
    assert resolve_clicked_record(ctx, None, preview_id("b1")) is None


def test_detail_outputs_use_author_name_and_year():
    ctx = _make_ctx()
    record = ctx.catalog.get("b1")

    is_open, blur, image, title, subtitle, description = detail_outputs(ctx, record)

    assert is_open is True
    assert blur == image == "https://img.example/b1.jpg"
    assert title == "Kindred"
    assert subtitle == "Octavia E. Butler (1979)"
    assert description == "Time travel."


def _triggered(target_id, value) -> list:
    return [{"prop_id": f"{target_id}.n_clicks", "value": value}]


def test_close_button_closes_detail():
    ctx = _make_ctx()

    outputs = run_detail_transition(ctx, IDs.Control.LIST_CLOSE, _triggered(IDs.Control.LIST_CLOSE, 1), [])

    assert outputs == DETAIL_CLOSED
    assert outputs[0] is False


def test_newly_rendered_units_do_not_open_detail():
    ctx = _make_ctx()
    children = _rendered_children(ctx)

    # Units added by "Show more" or a new search report n_clicks=0
    with pytest.raises(PreventUpdate):
        run_detail_transition(ctx, preview_id("b1"), _triggered(preview_id("b1"), 0), children)


def test_real_click_opens_detail():
    ctx = _make_ctx()
    children = _rendered_children(ctx)

    outputs = run_detail_transition(ctx, preview_id("b2"), _triggered(preview_id("b2"), 1), children)

    assert outputs[0] is True
    assert outputs[3] == "Dawn"


def test_click_missing_every_unit_does_not_open():
    ctx = _make_ctx()

    with pytest.raises(PreventUpdate):
        run_detail_transition(ctx, preview_id("gone"), _triggered(preview_id("gone"), 1), _rendered_children(ctx))


def test_click_resolves_record_filtered_out_of_view():
    ctx = _make_ctx()
    children = _rendered_children(ctx)
    snapshot = {"query": FilterQuery(title="dawn").to_dict(), "page": 1}

    record = resolve_clicked_record(ctx, children, preview_id("b1"), snapshot)

    assert record is not None and record.id == "b1"
