from __future__ import annotations

import dash_bootstrap_components as dbc
from dash import dcc, html

from catalog_browser.ui.ids import IDs


def build_settings_panel(default_theme: str, style: dict) -> dbc.Modal:
    return dbc.Modal(
        id=IDs.Control.SETTINGS_OVERLAY,
        is_open=False,
        children=[
            dbc.ModalBody(
                [
                    html.Label("Theme", className="form-label"),
                    dcc.Dropdown(
                        id=IDs.Control.SETTINGS_THEME,
                        options=[
                            {"label": "Day", "value": "day"},
                            {"label": "Night", "value": "night"},
                        ],
                        value=default_theme,
                        clearable=False,
                    ),
                ]
            ),
            dbc.ModalFooter(
                [
                    dbc.Button("Cancel", id=IDs.Control.SETTINGS_CANCEL, color="secondary", outline=True),
                    dbc.Button("Save", id=IDs.Control.SETTINGS_SAVE, color="primary"),
                ]
            ),
        ],
        className="overlay",
        style=style,
    )
