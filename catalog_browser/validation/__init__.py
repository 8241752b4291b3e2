from .catalog_validation import validate_catalog, warn_on_invalid_catalog
from .errors import ValidationError, ValidationIssue

__all__ = ["ValidationError", "ValidationIssue", "validate_catalog", "warn_on_invalid_catalog"]
