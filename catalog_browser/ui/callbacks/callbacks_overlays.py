from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import dash
from dash import Input, Output, State
from dash.exceptions import PreventUpdate

from catalog_browser.ui.helpers import theme_style
from catalog_browser.ui.ids import IDs

if TYPE_CHECKING:
    from catalog_browser.ui.config import AppConfig

logger = logging.getLogger(__name__)

THEMED_IDS = (
    IDs.Control.ROOT,
    IDs.Control.SEARCH_OVERLAY,
    IDs.Control.SETTINGS_OVERLAY,
    IDs.Control.LIST_ACTIVE,
)


def register_overlay_callbacks(app: dash.Dash, ctx: AppConfig) -> None:
    # ---------------------------------------------------------
    # Search overlay: header opens, cancel/submit close
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Control.SEARCH_OVERLAY, "is_open"),
        Input(IDs.Control.HEADER_SEARCH, "n_clicks"),
        Input(IDs.Control.SEARCH_CANCEL, "n_clicks"),
        Input(IDs.Control.SEARCH_SUBMIT, "n_clicks"),
        prevent_initial_call=True,
    )
    def toggle_search_overlay(_open, _cancel, _submit):
        return dash.ctx.triggered_id == IDs.Control.HEADER_SEARCH

    # ---------------------------------------------------------
    # Settings overlay: header opens, cancel/save close
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Control.SETTINGS_OVERLAY, "is_open"),
        Input(IDs.Control.HEADER_SETTINGS, "n_clicks"),
        Input(IDs.Control.SETTINGS_CANCEL, "n_clicks"),
        Input(IDs.Control.SETTINGS_SAVE, "n_clicks"),
        prevent_initial_call=True,
    )
    def toggle_settings_overlay(_open, _cancel, _save):
        return dash.ctx.triggered_id == IDs.Control.HEADER_SETTINGS

    # ---------------------------------------------------------
    # Theme: colour variables on the root container and every overlay
    # ---------------------------------------------------------
    @app.callback(
        *[Output(component_id, "style") for component_id in THEMED_IDS],
        Input(IDs.Control.SETTINGS_SAVE, "n_clicks"),
        State(IDs.Control.SETTINGS_THEME, "value"),
        prevent_initial_call=True,
    )
    def apply_theme(n_clicks, theme):
        if not n_clicks:
            raise PreventUpdate
        logger.info("Theme changed", extra={"theme": theme})
        style = theme_style(theme)
        return [style] * len(THEMED_IDS)
