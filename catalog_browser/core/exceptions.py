class CatalogBrowserError(Exception):
    """Base exception for all catalog_browser errors"""
    pass

class ConfigError(CatalogBrowserError):
    """Invalid or missing global.json, or an unusable setting such as page_size"""
    pass

class CatalogSchemaError(CatalogBrowserError):
    """
    Data file doesn't match what the Catalog expects:
    missing book fields, non-mapping author/genre tables, bad timestamps, etc
    """
    pass
