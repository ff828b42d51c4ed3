"""In-memory movie collection with id assignment, filtering and CRUD rules."""

from __future__ import annotations

import logging
import threading
from datetime import date
from typing import Callable, Iterable

from app.services.models import Movie, MovieCandidate, MovieFilters
from app.services.validation import parse_int, validate_movie


logger = logging.getLogger(__name__)


class MovieStoreError(Exception):
    """Base exception for movie store failures."""


class MovieNotFound(MovieStoreError):
    """Raised when no stored movie matches the given id."""

    def __init__(self, movie_id: int | str) -> None:
        super().__init__(f"Movie {movie_id!r} not found")
        self.movie_id = movie_id


class MovieValidationError(MovieStoreError):
    """Raised when a candidate breaks one or more field rules."""

    def __init__(self, errors: list[str]) -> None:
        super().__init__("; ".join(errors))
        self.errors = list(errors)


SEED_MOVIES: tuple[Movie, ...] = (
    Movie(id=1, title="The Shawshank Redemption", director="Frank Darabont", year=1994),
    Movie(id=2, title="The Godfather", director="Francis Ford Coppola", year=1972),
    Movie(id=3, title="Inception", director="Christopher Nolan", year=2010),
)


class MovieStore:
    """Process-lifetime movie collection.

    Ids come from a counter that only moves forward, so a deleted id is never
    handed out again. All operations share one lock because FastAPI runs sync
    endpoints on a thread pool.
    """

    def __init__(
        self,
        movies: Iterable[Movie] = (),
        *,
        clock: Callable[[], date] = date.today,
    ) -> None:
        self._movies: list[Movie] = [
            Movie(id=m.id, title=m.title, director=m.director, year=m.year) for m in movies
        ]
        self._next_id = max((m.id for m in self._movies), default=0) + 1
        self._clock = clock
        self._lock = threading.RLock()

    @classmethod
    def seeded(cls, *, clock: Callable[[], date] = date.today) -> "MovieStore":
        return cls(SEED_MOVIES, clock=clock)

    @property
    def next_id(self) -> int:
        return self._next_id

    def validate(self, candidate: MovieCandidate) -> list[str]:
        return validate_movie(candidate, today=self._clock())

    def find_by_id(self, movie_id: int | str) -> Movie | None:
        with self._lock:
            return self._find(movie_id)

    def list(self, filters: MovieFilters | None = None) -> list[Movie]:
        filters = filters or MovieFilters()
        predicates = _build_predicates(filters)
        with self._lock:
            return [movie for movie in self._movies if all(p(movie) for p in predicates)]

    def create(self, candidate: MovieCandidate) -> Movie:
        errors = self.validate(candidate)
        if errors:
            raise MovieValidationError(errors)

        with self._lock:
            movie = Movie(
                id=self._next_id,
                title=candidate.title.strip(),
                director=candidate.director.strip(),
                year=candidate.year,
            )
            self._next_id += 1
            self._movies.append(movie)
        logger.info("Created movie id=%s title=%r", movie.id, movie.title)
        return movie

    def update(self, movie_id: int | str, candidate: MovieCandidate) -> Movie:
        with self._lock:
            movie = self._find(movie_id)
            if movie is None:
                raise MovieNotFound(movie_id)

            errors = self.validate(candidate)
            if errors:
                raise MovieValidationError(errors)

            movie.title = candidate.title.strip()
            movie.director = candidate.director.strip()
            movie.year = candidate.year
        logger.info("Updated movie id=%s", movie.id)
        return movie

    def delete(self, movie_id: int | str) -> None:
        with self._lock:
            movie = self._find(movie_id)
            if movie is None:
                raise MovieNotFound(movie_id)
            self._movies.remove(movie)
        logger.info("Deleted movie id=%s", movie.id)

    def _find(self, movie_id: int | str) -> Movie | None:
        wanted = parse_int(movie_id)
        if wanted is None:
            return None
        return next((m for m in self._movies if m.id == wanted), None)


def _build_predicates(filters: MovieFilters) -> list[Callable[[Movie], bool]]:
    """Turn the supplied filters into predicates; unparsable numbers are skipped."""

    predicates: list[Callable[[Movie], bool]] = []

    if filters.title:
        needle = filters.title.lower()
        predicates.append(lambda m: needle in m.title.lower())

    if filters.year:
        year = parse_int(filters.year)
        if year is not None:
            predicates.append(lambda m: m.year == year)

    if filters.director:
        director = filters.director.lower()
        predicates.append(lambda m: director in m.director.lower())

    if filters.min_year:
        min_year = parse_int(filters.min_year)
        if min_year is not None:
            predicates.append(lambda m: m.year >= min_year)

    if filters.max_year:
        max_year = parse_int(filters.max_year)
        if max_year is not None:
            predicates.append(lambda m: m.year <= max_year)

    return predicates
