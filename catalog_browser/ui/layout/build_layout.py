from __future__ import annotations

from typing import TYPE_CHECKING

import dash_bootstrap_components as dbc
from dash import dcc

from catalog_browser.ui.helpers import theme_style
from catalog_browser.ui.ids import IDs
from catalog_browser.ui.layout.build_detail_panel import build_detail_panel
from catalog_browser.ui.layout.build_list_panel import build_list_panel
from catalog_browser.ui.layout.build_navbar import build_navbar
from catalog_browser.ui.layout.build_search_panel import build_search_panel
from catalog_browser.ui.layout.build_settings_panel import build_settings_panel
from catalog_browser.ui.surface import DashSurface

if TYPE_CHECKING:
    from catalog_browser.ui.config import AppConfig


def build_layout(ctx: "AppConfig"):
    # Initial view: whole universe, first page rendered
    surface = DashSurface()
    session = ctx.new_session(surface)
    status = session.status()

    global_config = ctx.global_config
    # Modals render outside the root container, so each carries the theme too
    style = theme_style(global_config.default_theme)

    return dbc.Container(
        id=IDs.Control.ROOT,
        fluid=True,
        className="catalog-root",
        style=style,
        children=[
            build_navbar(global_config),

            # Per-browser list state: {"query": ..., "page": n}
            dcc.Store(id=IDs.Store.LIST_STATE, storage_type="memory", data=session.snapshot()),

            build_list_panel(surface.components, status),
            build_search_panel(ctx.catalog, style),
            build_settings_panel(global_config.default_theme, style),
            build_detail_panel(style),
        ],
    )
