"""Pydantic request/response schemas for the movies API.

Request bodies are deliberately loose: every field is optional and untyped so
that rule violations reach the store's validation and come back as the
``{"errors": [...]}`` list instead of a framework 422.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict

from app.services.models import Movie, MovieCandidate


class MovieIn(BaseModel):
    model_config = ConfigDict(extra="ignore")

    title: Any = None
    director: Any = None
    year: Any = None

    def to_candidate(self) -> MovieCandidate:
        return MovieCandidate(title=self.title, director=self.director, year=self.year)


class MovieOut(BaseModel):
    id: int
    title: str
    director: str
    year: int

    @classmethod
    def from_movie(cls, movie: Movie) -> "MovieOut":
        return cls(**movie.as_dict())


class ErrorResponse(BaseModel):
    error: str


class ValidationErrorResponse(BaseModel):
    errors: list[str]
