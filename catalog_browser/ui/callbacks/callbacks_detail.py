from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Iterable, Optional, Tuple

import dash
from dash import ALL, Input, Output, State, no_update
from dash.exceptions import PreventUpdate

from catalog_browser.core import selection
from catalog_browser.core.catalog import Record
from catalog_browser.ui.helpers import detail_subtitle
from catalog_browser.ui.ids import IDs

if TYPE_CHECKING:
    from catalog_browser.ui.config import AppConfig

logger = logging.getLogger(__name__)

DETAIL_CLOSED = (False, no_update, no_update, no_update, no_update, no_update)


def resolve_clicked_record(
    ctx: AppConfig,
    list_items: Any,
    target_id: Any,
    snapshot: Optional[dict] = None,
) -> Optional[Record]:
    """Walk from the clicked component out through the list tree to its record."""
    path = selection.component_ancestry(list_items, target_id)
    return ctx.restore_session(snapshot).select(path)


def detail_outputs(ctx: AppConfig, record: Record) -> Tuple[Any, ...]:
    return (
        True,
        record.image,
        record.image,
        record.title,
        detail_subtitle(ctx.catalog, record),
        record.description,
    )


def run_detail_transition(
    ctx: AppConfig,
    trigger: Any,
    triggered: Iterable[dict],
    list_items: Any,
    snapshot: Optional[dict] = None,
) -> Tuple[Any, ...]:
    """
    Map a click on the list or the close button onto the detail overlay outputs.

    Raises PreventUpdate when nothing was actually clicked (units just added
    by "Show more" or a new search fire with n_clicks=0) or the click missed
    every rendered unit.
    """
    if trigger == IDs.Control.LIST_CLOSE:
        return DETAIL_CLOSED

    if not any(t.get("value") for t in triggered):
        raise PreventUpdate

    record = resolve_clicked_record(ctx, list_items, trigger, snapshot)
    if record is None:
        raise PreventUpdate

    logger.info("Opening book details", extra={"record_id": record.id})
    return detail_outputs(ctx, record)


def register_detail_callbacks(app: dash.Dash, ctx: AppConfig) -> None:
    @app.callback(
        Output(IDs.Control.LIST_ACTIVE, "is_open"),
        Output(IDs.Control.LIST_BLUR, "src"),
        Output(IDs.Control.LIST_IMAGE, "src"),
        Output(IDs.Control.LIST_TITLE, "children"),
        Output(IDs.Control.LIST_SUBTITLE, "children"),
        Output(IDs.Control.LIST_DESCRIPTION, "children"),
        Input({"type": IDs.Pattern.PREVIEW, "index": ALL}, "n_clicks"),
        Input(IDs.Control.LIST_CLOSE, "n_clicks"),
        State(IDs.Control.LIST_ITEMS, "children"),
        State(IDs.Store.LIST_STATE, "data"),
        prevent_initial_call=True,
    )
    def open_book_details(_preview_clicks, _close_clicks, list_items, snapshot):
        return run_detail_transition(
            ctx,
            dash.ctx.triggered_id,
            dash.ctx.triggered,
            list_items,
            snapshot,
        )
