"""
Configuration layer: global.json parsing and catalog data loading.
"""

from .catalog_loader import load_catalog
from .config_loader import load_global_config
from .model import GlobalConfig

__all__ = ["GlobalConfig", "load_catalog", "load_global_config"]
