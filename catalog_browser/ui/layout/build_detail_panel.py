from __future__ import annotations

import dash_bootstrap_components as dbc
from dash import html

from catalog_browser.ui.ids import IDs


def build_detail_panel(style: dict) -> dbc.Modal:
    return dbc.Modal(
        id=IDs.Control.LIST_ACTIVE,
        is_open=False,
        size="lg",
        children=[
            html.Div(
                [
                    html.Img(id=IDs.Control.LIST_BLUR, className="overlay__blur"),
                    html.Img(id=IDs.Control.LIST_IMAGE, className="overlay__image"),
                ],
                className="overlay__preview",
            ),
            dbc.ModalBody(
                [
                    html.H3(id=IDs.Control.LIST_TITLE, className="overlay__title"),
                    html.Div(id=IDs.Control.LIST_SUBTITLE, className="overlay__data"),
                    html.P(id=IDs.Control.LIST_DESCRIPTION, className="overlay__data overlay__data_secondary"),
                ]
            ),
            dbc.ModalFooter(
                dbc.Button("Close", id=IDs.Control.LIST_CLOSE, color="primary", outline=True),
            ),
        ],
        className="overlay",
        style=style,
    )
