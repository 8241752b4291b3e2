from dataclasses import dataclass
from pathlib import Path

from catalog_browser.config.model import GlobalConfig
from catalog_browser.core.catalog import Catalog
from catalog_browser.core.session import Session


@dataclass
class AppConfig:
    """
    Shared, read-only context for layout + callback registration.

    Passed explicitly instead of module-level globals. Per-browser list state
    is not kept here; it lives in the LIST_STATE store and is rebuilt into a
    Session for every callback.
    """
    config_root: Path
    global_config: GlobalConfig
    catalog: Catalog

    @property
    def page_size(self) -> int:
        return self.global_config.page_size

    def new_session(self, surface=None) -> Session:
        return Session.start(self.catalog, self.page_size, surface)

    def restore_session(self, snapshot, surface=None) -> Session:
        return Session.restore(self.catalog, self.page_size, snapshot, surface)

    def validate(self) -> None:
        """Ensure the catalog is attached before the app starts."""
        if self.catalog is None:
            raise RuntimeError("AppConfig.catalog must be initialized.")
