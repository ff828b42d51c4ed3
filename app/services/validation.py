"""Field rules for movie candidates and lenient integer parsing."""

from __future__ import annotations

import re
from datetime import date
from typing import Any

from app.services.models import MovieCandidate

EARLIEST_FILM_YEAR = 1888

_LEADING_INT = re.compile(r"\s*([+-]?[0-9]+)")


def parse_int(raw: Any) -> int | None:
    """Parse an id or filter value the way query strings are read.

    Accepts real ints and strings that start with an optionally signed run of
    ASCII digits (``"1994abc"`` -> 1994). Returns ``None`` for anything else,
    including digit runs too long to convert; no id or year is that long.
    """

    if isinstance(raw, bool):
        return None
    if isinstance(raw, int):
        return raw
    if not isinstance(raw, str):
        return None
    match = _LEADING_INT.match(raw)
    if not match:
        return None
    try:
        return int(match.group(1))
    except ValueError:
        return None


def validate_movie(candidate: MovieCandidate, *, today: date | None = None) -> list[str]:
    """Return every rule the candidate breaks, in title/director/year order.

    The upper year bound is the calendar year at call time.
    """

    current_year = (today or date.today()).year
    errors: list[str] = []

    if not _is_present_text(candidate.title):
        errors.append("Title is required")

    if not _is_present_text(candidate.director):
        errors.append("Director is required")

    year = candidate.year
    if not year:
        errors.append("Year is required")
    elif not _is_int(year) or year < EARLIEST_FILM_YEAR or year > current_year:
        errors.append(f"Year must be a number between {EARLIEST_FILM_YEAR} and {current_year}")

    return errors


def _is_present_text(value: Any) -> bool:
    return isinstance(value, str) and bool(value.strip())


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)
