from __future__ import annotations

import dash_bootstrap_components as dbc
from dash import dcc, html

from catalog_browser.core.catalog import Catalog
from catalog_browser.core.filter_query import ANY
from catalog_browser.ui.helpers import select_options
from catalog_browser.ui.ids import IDs


def build_search_panel(catalog: Catalog, style: dict) -> dbc.Modal:
    return dbc.Modal(
        id=IDs.Control.SEARCH_OVERLAY,
        is_open=False,
        children=[
            dbc.ModalBody(
                [
                    html.Label("Title", className="form-label"),
                    dbc.Input(
                        id=IDs.Control.SEARCH_TITLE,
                        type="text",
                        placeholder="Any",
                        value="",
                        className="mb-3 overlay__input",
                    ),
                    html.Label("Genre", className="form-label"),
                    dcc.Dropdown(
                        id=IDs.Control.SEARCH_GENRES,
                        options=select_options(catalog.genres, "All Genres"),
                        value=ANY,
                        clearable=False,
                        className="mb-3",
                    ),
                    html.Label("Author", className="form-label"),
                    dcc.Dropdown(
                        id=IDs.Control.SEARCH_AUTHORS,
                        options=select_options(catalog.authors, "All Authors"),
                        value=ANY,
                        clearable=False,
                        className="mb-3",
                    ),
                ]
            ),
            dbc.ModalFooter(
                [
                    dbc.Button("Cancel", id=IDs.Control.SEARCH_CANCEL, color="secondary", outline=True),
                    dbc.Button("Search", id=IDs.Control.SEARCH_SUBMIT, color="primary"),
                ]
            ),
        ],
        className="overlay",
        style=style,
    )
