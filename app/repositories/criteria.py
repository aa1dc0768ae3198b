"""
Named search criteria accepted by the repositories.

Callers describe what they are looking for with one of a small set of
variants instead of handing the repository an arbitrary filter expression.
Each repository turns a criterion into a SQL condition on its own model.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional


class SearchKind(str, Enum):
    TITLE_EQUALS = "title_equals"
    TITLE_CONTAINS = "title_contains"
    GENRE_IS = "genre_is"


# Column each kind filters on
KIND_FIELDS = {
    SearchKind.TITLE_EQUALS: "title",
    SearchKind.TITLE_CONTAINS: "title",
    SearchKind.GENRE_IS: "genre_id",
}


@dataclass(frozen=True)
class SearchCriteria:
    kind: SearchKind
    value: Any
    exclude_id: Optional[int] = None

    @property
    def field(self) -> str:
        return KIND_FIELDS[self.kind]

    @classmethod
    def title_equals(cls, title: str, exclude_id: Optional[int] = None) -> "SearchCriteria":
        """Exact title match, optionally ignoring the row with `exclude_id`"""
        return cls(SearchKind.TITLE_EQUALS, title, exclude_id)

    @classmethod
    def title_contains(cls, text: str) -> "SearchCriteria":
        return cls(SearchKind.TITLE_CONTAINS, text)

    @classmethod
    def genre_is(cls, genre_id: int) -> "SearchCriteria":
        return cls(SearchKind.GENRE_IS, genre_id)
