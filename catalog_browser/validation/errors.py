from __future__ import annotations

from dataclasses import dataclass
from typing import List

from catalog_browser.core.exceptions import CatalogBrowserError


@dataclass(frozen=True)
class ValidationIssue:
    code: str
    message: str

    def __str__(self) -> str:
        return f"{self.code}: {self.message}"


class ValidationError(CatalogBrowserError):
    """Catalog loaded fine but is internally inconsistent."""

    def __init__(self, issues: List[ValidationIssue]):
        self.issues = issues
        super().__init__("\n".join(str(i) for i in issues))

    @property
    def codes(self) -> List[str]:
        return [i.code for i in self.issues]
