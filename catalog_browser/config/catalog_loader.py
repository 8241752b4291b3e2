from __future__ import annotations

import json
import logging
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Mapping

import pandas as pd

from catalog_browser.core.catalog import Catalog, Record
from catalog_browser.core.exceptions import CatalogSchemaError

logger = logging.getLogger(__name__)

REQUIRED_BOOK_FIELDS = ("id", "title", "author", "image", "description", "published", "genres")


def parse_published(value: Any) -> datetime:
    """
    Parse a published timestamp (ISO string, possibly with a trailing 'Z').
    Naive timestamps are taken as UTC.
    """
    try:
        ts = pd.Timestamp(value)
    except (TypeError, ValueError) as e:
        raise CatalogSchemaError(f"Invalid published timestamp {value!r}") from e

    if pd.isna(ts):
        raise CatalogSchemaError(f"Missing published timestamp {value!r}")
    if ts.tzinfo is None:
        ts = ts.tz_localize("UTC")
    return ts.to_pydatetime()


def record_from_raw(raw: Mapping[str, Any], index: int) -> Record:
    if not isinstance(raw, Mapping):
        raise CatalogSchemaError(f"Book #{index} must be an object, got {type(raw).__name__}")

    missing = [k for k in REQUIRED_BOOK_FIELDS if k not in raw]
    if missing:
        raise CatalogSchemaError(f"Book #{index} is missing fields: {', '.join(missing)}")

    genres = raw["genres"]
    if not isinstance(genres, (list, tuple)):
        raise CatalogSchemaError(f"Book #{index} 'genres' must be a list")

    return Record(
        id=str(raw["id"]),
        title=str(raw["title"]),
        author_id=str(raw["author"]),
        image=str(raw["image"]),
        description=str(raw["description"]),
        published=parse_published(raw["published"]),
        genre_ids=frozenset(str(g) for g in genres),
    )


def _lookup_table(raw: Dict[str, Any], key: str) -> Dict[str, str]:
    table = raw.get(key, {})
    if not isinstance(table, dict):
        raise CatalogSchemaError(f"'{key}' must map ids to display names")
    return {str(k): str(v) for k, v in table.items()}


def catalog_from_dict(raw: Dict[str, Any]) -> Catalog:
    books = raw.get("books")
    if not isinstance(books, list):
        raise CatalogSchemaError("'books' must be a list of book objects")

    records: List[Record] = [record_from_raw(entry, i) for i, entry in enumerate(books)]
    return Catalog(
        records,
        authors=_lookup_table(raw, "authors"),
        genres=_lookup_table(raw, "genres"),
    )


def load_catalog(path: Path) -> Catalog:
    """
    Load the catalog universe and its author/genre tables from a JSON data file.
    """
    path = Path(path)
    if not path.is_file():
        raise CatalogSchemaError(f"Catalog data file not found at {path}")

    try:
        with path.open(encoding="utf-8") as f:
            raw = json.load(f)
    except json.JSONDecodeError as e:
        raise CatalogSchemaError(f"Invalid JSON in {path}: {e}") from e

    if not isinstance(raw, dict):
        raise CatalogSchemaError(f"{path} must contain a JSON object")

    catalog = catalog_from_dict(raw)

    logger.info(
        "Catalog loaded",
        extra={
            "data_file": str(path),
            "n_books": len(catalog),
            "n_authors": len(catalog.authors),
            "n_genres": len(catalog.genres),
        },
    )
    return catalog
