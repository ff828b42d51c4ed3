import datetime as dt

import pytest

from app.services.models import MovieCandidate
from app.services.validation import parse_int, validate_movie

TODAY = dt.date(2025, 6, 1)
YEAR_RANGE = "Year must be a number between 1888 and 2025"


def test_valid_candidate_has_no_errors():
    candidate = MovieCandidate(title="Alien", director="Ridley Scott", year=1979)
    assert validate_movie(candidate, today=TODAY) == []


def test_all_errors_collected_in_order():
    candidate = MovieCandidate(title="", director="", year=None)
    assert validate_movie(candidate, today=TODAY) == [
        "Title is required",
        "Director is required",
        "Year is required",
    ]


def test_whitespace_only_and_non_string_text_are_missing():
    candidate = MovieCandidate(title="   ", director=42, year=2000)
    assert validate_movie(candidate, today=TODAY) == [
        "Title is required",
        "Director is required",
    ]


@pytest.mark.parametrize("year", [None, 0, "", False])
def test_falsy_year_is_required(year):
    candidate = MovieCandidate(title="A", director="B", year=year)
    assert validate_movie(candidate, today=TODAY) == ["Year is required"]


@pytest.mark.parametrize("year", [1887, 2026, "1994", 1994.5, True])
def test_year_out_of_range_or_not_integer(year):
    candidate = MovieCandidate(title="A", director="B", year=year)
    assert validate_movie(candidate, today=TODAY) == [YEAR_RANGE]


def test_year_bounds_are_inclusive():
    for year in (1888, 2025):
        candidate = MovieCandidate(title="A", director="B", year=year)
        assert validate_movie(candidate, today=TODAY) == []


def test_upper_bound_follows_the_clock():
    candidate = MovieCandidate(title="A", director="B", year=2026)
    assert validate_movie(candidate, today=dt.date(2025, 12, 31)) == [YEAR_RANGE]
    assert validate_movie(candidate, today=dt.date(2026, 1, 1)) == []


def test_default_upper_bound_is_current_year():
    next_year = dt.date.today().year + 1
    candidate = MovieCandidate(title="A", director="B", year=next_year)
    assert validate_movie(candidate) == [
        f"Year must be a number between 1888 and {next_year - 1}"
    ]


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("12", 12),
        (" 7", 7),
        ("1994abc", 1994),
        ("-3", -3),
        (5, 5),
        ("abc", None),
        ("", None),
        (None, None),
        (True, None),
        (2.5, None),
        ("9" * 4301, None),
        ("\u0661", None),
        ("12\u0663", 12),
    ],
)
def test_parse_int(raw, expected):
    assert parse_int(raw) == expected
