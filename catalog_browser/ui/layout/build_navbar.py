from __future__ import annotations

import dash_bootstrap_components as dbc
from dash import html

from catalog_browser.config.model import GlobalConfig
from catalog_browser.ui.ids import IDs


def build_navbar(global_config: GlobalConfig) -> dbc.Navbar:
    return dbc.Navbar(
        dbc.Container(
            fluid=True,
            children=[
                # Left: title + subtitle
                html.Div(
                    [
                        html.H2(global_config.ui_title, className="mb-0 header__title"),
                        html.Small(global_config.subtitle, className="text-muted"),
                    ],
                    className="d-flex flex-column justify-content-center",
                ),

                # Right: overlay toggles
                html.Div(
                    [
                        dbc.Button(
                            "Search",
                            id=IDs.Control.HEADER_SEARCH,
                            color="secondary",
                            outline=True,
                            className="me-2 header__button",
                        ),
                        dbc.Button(
                            "Settings",
                            id=IDs.Control.HEADER_SETTINGS,
                            color="secondary",
                            outline=True,
                            className="header__button",
                        ),
                    ],
                    className="ms-auto d-flex align-items-center",
                ),
            ],
        ),
        dark=False,
        className="shadow-sm header",
    )
