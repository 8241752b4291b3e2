from __future__ import annotations

from typing import Tuple

from .catalog import Record
from .catalog_store import ResultView


def first_slice(page_size: int) -> Tuple[int, int]:
    """Range rendered right after a reset."""
    return 0, page_size


def next_slice(view: ResultView, page_size: int) -> Tuple[int, int]:
    """
    Half-open range for the next "load more" render.

    ``view.page`` is read *before* it is advanced; the caller advances the
    store once the slice has been rendered.
    """
    start = view.page * page_size
    return start, start + page_size


def slice_records(view: ResultView, start: int, end: int) -> Tuple[Record, ...]:
    # Out of range starts produce an empty tuple, not an error
    return view.matched[start:end]
