from __future__ import annotations

from typing import Dict, List, Mapping

from dash import html

from catalog_browser.core.catalog import Catalog, Record
from catalog_browser.core.display import CORRELATION_ATTR, DisplayUnit
from catalog_browser.core.filter_query import ANY
from catalog_browser.ui.ids import preview_id

THEME_COLOURS: Dict[str, Dict[str, str]] = {
    "night": {"--color-dark": "255, 255, 255", "--color-light": "10, 10, 20"},
    "day": {"--color-dark": "10, 10, 20", "--color-light": "255, 255, 255"},
}


def select_options(table: Mapping[str, str], default_text: str) -> List[dict]:
    """Dropdown options for a lookup table, led by the ANY option."""
    options = [{"label": default_text, "value": ANY}]
    options.extend({"label": name, "value": key} for key, name in table.items())
    return options


def theme_style(theme: str | None) -> Dict[str, str]:
    return dict(THEME_COLOURS.get(theme or "day", THEME_COLOURS["day"]))


def show_more_label(remaining: int) -> list:
    return [
        html.Span("Show more"),
        html.Span(f" ({max(remaining, 0)})", className="list__remaining"),
    ]


def detail_subtitle(catalog: Catalog, record: Record) -> str:
    return f"{catalog.author_name(record.author_id)} ({record.published.year})"


def build_preview_button(unit: DisplayUnit) -> html.Button:
    """
    Dash representation of a DisplayUnit.

    The pattern-matching id lets one callback catch clicks on any unit; the
    data attribute is the correlation key the selection resolver walks to.
    """
    return html.Button(
        id=preview_id(unit.record_id),
        className="preview",
        n_clicks=0,
        children=[
            html.Img(className="preview__image", src=unit.image),
            html.Div(
                [
                    html.H3(unit.title, className="preview__title"),
                    html.Div(unit.author_name, className="preview__author"),
                ],
                className="preview__info",
            ),
        ],
        **{CORRELATION_ATTR: unit.record_id},
    )
