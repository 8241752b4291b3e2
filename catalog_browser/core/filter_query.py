from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict

ANY = "any"


@dataclass(frozen=True)
class FilterQuery:
    """
    Represents one search submission from the search overlay.

    Fields:

    - title: free text, matched as a case-insensitive substring. Blank matches everything.
    - author: author id, or ANY for no constraint.
    - genre: genre id, or ANY for no constraint.
    """

    title: str = ""
    author: str = ANY
    genre: str = ANY

    @property
    def is_unconstrained(self) -> bool:
        return not self.title.strip() and self.author == ANY and self.genre == ANY

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any] | None) -> FilterQuery:
        data = data or {}
        return cls(
            title=str(data.get("title") or ""),
            author=str(data.get("author") or ANY),
            genre=str(data.get("genre") or ANY),
        )
