from __future__ import annotations

import logging
from pathlib import Path

import dash_bootstrap_components as dbc
from dash import Dash

from .config import AppConfig
from catalog_browser.config.catalog_loader import load_catalog
from catalog_browser.config.config_loader import load_global_config
from catalog_browser.validation.catalog_validation import warn_on_invalid_catalog
from catalog_browser.ui.layout.build_layout import build_layout
from catalog_browser.ui.callbacks.callbacks_list import register_list_callbacks
from catalog_browser.ui.callbacks.callbacks_detail import register_detail_callbacks
from catalog_browser.ui.callbacks.callbacks_overlays import register_overlay_callbacks

logger = logging.getLogger(__name__)


def create_dash_app(config_root: Path | str = Path("config")) -> Dash:
    config_root = Path(config_root)

    # 1) Load Config
    global_config = load_global_config(config_root)

    # 2) Load the catalog universe once; it is never mutated afterwards
    catalog = load_catalog(global_config.data_file)
    warn_on_invalid_catalog(catalog, logger)

    # 3) App Context
    ctx = AppConfig(
        config_root=config_root,
        global_config=global_config,
        catalog=catalog,
    )
    ctx.validate()

    # Stylesheet reads the theme colour variables
    assets_path = Path(__file__).parent / "assets"

    app = Dash(
        __name__,
        external_stylesheets=[dbc.themes.FLATLY],
        assets_folder=str(assets_path),
    )
    app.title = global_config.ui_title

    app.layout = build_layout(ctx)

    # Register callbacks
    register_list_callbacks(app, ctx)
    register_detail_callbacks(app, ctx)
    register_overlay_callbacks(app, ctx)

    logger.info(
        "Dash app created",
        extra={"config_root": str(config_root), "n_books": len(catalog), "page_size": ctx.page_size},
    )
    return app
