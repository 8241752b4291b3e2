"""
Top-level package for the catalog browser.

This package exposes the core architecture (domain, config, UI adapters).
Most code should import from submodules such as:
    catalog_browser.core
    catalog_browser.config
    catalog_browser.ui
"""

__all__: list[str] = []
