from __future__ import annotations

__all__ = ["IDs", "preview_id"]


class IDs:
    class Store:
        LIST_STATE = "list-state"

    class Control:
        ROOT = "catalog-root"

        # Header
        HEADER_SEARCH = "header-search"
        HEADER_SETTINGS = "header-settings"

        # Search overlay
        SEARCH_OVERLAY = "search-overlay"
        SEARCH_TITLE = "search-title"
        SEARCH_GENRES = "search-genres"
        SEARCH_AUTHORS = "search-authors"
        SEARCH_SUBMIT = "search-submit"
        SEARCH_CANCEL = "search-cancel"

        # Settings overlay
        SETTINGS_OVERLAY = "settings-overlay"
        SETTINGS_THEME = "settings-theme"
        SETTINGS_SAVE = "settings-save"
        SETTINGS_CANCEL = "settings-cancel"

        # List
        LIST_ITEMS = "list-items"
        LIST_MESSAGE = "list-message"
        LIST_BUTTON = "list-button"

        # Detail overlay
        LIST_ACTIVE = "list-active"
        LIST_BLUR = "list-blur"
        LIST_IMAGE = "list-image"
        LIST_TITLE = "list-title"
        LIST_SUBTITLE = "list-subtitle"
        LIST_DESCRIPTION = "list-description"
        LIST_CLOSE = "list-close"

    class Pattern:
        # pattern-matching "type" strings
        PREVIEW = "catalog-preview"


def preview_id(record_id: str) -> dict:
    return {"type": IDs.Pattern.PREVIEW, "index": record_id}
