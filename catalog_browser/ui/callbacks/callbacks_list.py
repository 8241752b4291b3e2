from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Optional, Tuple

import dash
from dash import Input, Output, State, no_update

from catalog_browser.core.filter_query import FilterQuery
from catalog_browser.ui.helpers import show_more_label
from catalog_browser.ui.ids import IDs
from catalog_browser.ui.layout.build_list_panel import message_style
from catalog_browser.ui.surface import DashSurface

if TYPE_CHECKING:
    from catalog_browser.ui.config import AppConfig

logger = logging.getLogger(__name__)


def run_list_transition(
    ctx: AppConfig,
    trigger: Optional[str],
    snapshot: Optional[dict],
    query: Optional[FilterQuery] = None,
) -> Tuple[Any, Any, Any, Any, Any]:
    """
    Apply one list transition and map the result onto the list outputs:
    (items children, list-state snapshot, button label, button disabled, message style).

    - SEARCH_SUBMIT: reset to the filtered view, children replaced
    - LIST_BUTTON: next page, children patched (append only)
    """
    surface = DashSurface()
    session = ctx.restore_session(snapshot, surface)

    if trigger == IDs.Control.SEARCH_SUBMIT:
        status = session.submit_filter(query or FilterQuery())
    elif trigger == IDs.Control.LIST_BUTTON:
        status = session.load_more()
    else:
        return no_update, no_update, no_update, no_update, no_update

    return (
        surface.to_children(),
        session.snapshot(),
        show_more_label(status.remaining),
        status.disabled,
        message_style(status.show_no_results),
    )


def register_list_callbacks(app: dash.Dash, ctx: AppConfig) -> None:
    # ---------------------------------------------------------
    # Search submit + "Show more": one callback so both transitions
    # are applied to the list state in dispatch order
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Control.LIST_ITEMS, "children"),
        Output(IDs.Store.LIST_STATE, "data"),
        Output(IDs.Control.LIST_BUTTON, "children"),
        Output(IDs.Control.LIST_BUTTON, "disabled"),
        Output(IDs.Control.LIST_MESSAGE, "style"),
        Input(IDs.Control.SEARCH_SUBMIT, "n_clicks"),
        Input(IDs.Control.LIST_BUTTON, "n_clicks"),
        State(IDs.Control.SEARCH_TITLE, "value"),
        State(IDs.Control.SEARCH_AUTHORS, "value"),
        State(IDs.Control.SEARCH_GENRES, "value"),
        State(IDs.Store.LIST_STATE, "data"),
        prevent_initial_call=True,
    )
    def update_list(_submit_clicks, _more_clicks, title, author, genre, snapshot):
        trigger = dash.ctx.triggered_id
        query = FilterQuery.from_dict({"title": title, "author": author, "genre": genre})

        try:
            return run_list_transition(ctx, trigger, snapshot, query)
        except Exception:
            logger.exception(
                "Error in update_list",
                extra={"trigger": str(trigger), "list_state": snapshot},
            )
            return no_update, no_update, no_update, no_update, no_update
