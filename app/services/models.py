"""Shared dataclasses for service layer."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any


@dataclass(slots=True)
class Movie:
    """A stored film record. Only title, director and year change after creation."""

    id: int
    title: str
    director: str
    year: int

    def as_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(slots=True)
class MovieCandidate:
    """Unvalidated create/update input; fields keep whatever JSON type was sent."""

    title: Any = None
    director: Any = None
    year: Any = None


@dataclass(slots=True)
class MovieFilters:
    """Raw query-string filters for listing; empty values count as absent."""

    title: str | None = None
    year: str | None = None
    director: str | None = None
    min_year: str | None = None
    max_year: str | None = None
