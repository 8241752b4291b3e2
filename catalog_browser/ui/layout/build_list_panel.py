from __future__ import annotations

from typing import Any, List

import dash_bootstrap_components as dbc
from dash import html

from catalog_browser.core.session import ListStatus
from catalog_browser.ui.helpers import show_more_label
from catalog_browser.ui.ids import IDs

MESSAGE_HIDDEN = {"display": "none"}


def message_style(show: bool) -> dict:
    return {} if show else MESSAGE_HIDDEN


def build_list_panel(initial_items: List[Any], status: ListStatus) -> html.Div:
    return html.Div(
        [
            html.Div(
                initial_items,
                id=IDs.Control.LIST_ITEMS,
                className="list__items",
            ),
            html.Div(
                [
                    html.H3("No results found", className="list__title"),
                    html.P("Your filters might be too narrow."),
                ],
                id=IDs.Control.LIST_MESSAGE,
                className="list__message",
                style=message_style(status.show_no_results),
            ),
            dbc.Button(
                show_more_label(status.remaining),
                id=IDs.Control.LIST_BUTTON,
                disabled=status.disabled,
                color="primary",
                className="list__button mt-3",
            ),
        ],
        className="list",
    )
