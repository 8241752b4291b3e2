from __future__ import annotations

import logging
from collections import Counter

from catalog_browser.core.catalog import Catalog
from catalog_browser.validation.errors import ValidationError, ValidationIssue


def validate_catalog(catalog: Catalog) -> None:
    issues: list[ValidationIssue] = []

    id_counts = Counter(r.id for r in catalog.records)
    for record_id, count in sorted(id_counts.items()):
        if count > 1:
            issues.append(
                ValidationIssue("CATALOG_DUPLICATE_ID", f"Book id '{record_id}' appears {count} times.")
            )

    for record in catalog.records:
        if not record.title.strip():
            issues.append(ValidationIssue("CATALOG_EMPTY_TITLE", f"Book '{record.id}' has an empty title."))

        if record.author_id not in catalog.authors:
            issues.append(
                ValidationIssue(
                    "CATALOG_UNKNOWN_AUTHOR",
                    f"Book '{record.id}' references unknown author '{record.author_id}'.",
                )
            )

        unknown_genres = sorted(g for g in record.genre_ids if g not in catalog.genres)
        if unknown_genres:
            issues.append(
                ValidationIssue(
                    "CATALOG_UNKNOWN_GENRE",
                    f"Book '{record.id}' references unknown genres: {', '.join(unknown_genres)}.",
                )
            )

    if issues:
        raise ValidationError(issues)


def warn_on_invalid_catalog(catalog: Catalog, logger: logging.Logger) -> None:
    """
    Validate the catalog and log a warning if it is not consistent.

    Warn-only: the app still starts, unknown authors render as their raw id.
    """
    try:
        validate_catalog(catalog)
    except ValidationError as e:
        logger.warning(
            "Catalog validation failed: %s",
            "; ".join(str(issue) for issue in e.issues),
            extra={"codes": e.codes},
        )
