"""FastAPI entrypoint wiring the in-memory movie store to the REST routes."""

from __future__ import annotations

import logging
import time
from contextlib import asynccontextmanager
from typing import Any

from fastapi import Body, Depends, FastAPI, Query, Request, Response, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.core.config import get_settings
from app.core.logging_config import log_startup_banner, setup_logging
from app.models import ErrorResponse, MovieIn, MovieOut, ValidationErrorResponse
from app.services.models import MovieCandidate, MovieFilters
from app.services.movie_store import MovieNotFound, MovieStore, MovieValidationError
from app.store import build_store, get_store

logger = logging.getLogger(__name__)
request_logger = logging.getLogger("app.requests")


@asynccontextmanager
async def lifespan(_: FastAPI):
    """Configure logging and announce the routes before serving."""

    settings = get_settings()
    setup_logging(settings.log_level)
    log_startup_banner(logger, settings)
    yield


settings = get_settings()
app = FastAPI(title=settings.app_title, lifespan=lifespan)
app.state.store = build_store(settings)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    """Log one compact access line per request."""

    started = time.perf_counter()
    response = await call_next(request)
    if get_settings().request_logging:
        elapsed_ms = (time.perf_counter() - started) * 1000
        request_logger.info(
            "%s %s %s %.3f ms - %s",
            request.method,
            request.url.path,
            response.status_code,
            elapsed_ms,
            response.headers.get("content-length", "-"),
        )
    return response


@app.exception_handler(MovieNotFound)
async def movie_not_found_handler(request: Request, exc: MovieNotFound) -> JSONResponse:
    logger.warning("Movie not found: id=%r path=%s", exc.movie_id, request.url.path)
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND,
        content={"error": "Movie not found"},
    )


@app.exception_handler(MovieValidationError)
async def movie_validation_handler(request: Request, exc: MovieValidationError) -> JSONResponse:
    logger.warning("Rejected movie on %s: %s", request.url.path, exc.errors)
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"errors": exc.errors},
    )


@app.exception_handler(RequestValidationError)
async def request_body_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.warning("Undecodable body on %s: %s", request.url.path, exc.errors())
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"errors": ["Invalid JSON body"]},
    )


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    # Unknown paths and unsupported methods on known paths are both "no route".
    if exc.status_code in (status.HTTP_404_NOT_FOUND, status.HTTP_405_METHOD_NOT_ALLOWED):
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content={"error": "Route not found"},
        )
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": str(exc.detail)},
        headers=exc.headers,
    )


@app.api_route("/movies", methods=["GET", "HEAD"], response_model=list[MovieOut])
def list_movies(
    title: str | None = Query(None, description="Title contains (case-insensitive)"),
    year: str | None = Query(None, description="Exact release year"),
    director: str | None = Query(None, description="Director contains (case-insensitive)"),
    min_year: str | None = Query(None, alias="minYear", description="Released in or after"),
    max_year: str | None = Query(None, alias="maxYear", description="Released in or before"),
    store: MovieStore = Depends(get_store),
) -> list[MovieOut]:
    filters = MovieFilters(
        title=title,
        year=year,
        director=director,
        min_year=min_year,
        max_year=max_year,
    )
    return [MovieOut.from_movie(movie) for movie in store.list(filters)]


@app.api_route(
    "/movies/{movie_id}",
    methods=["GET", "HEAD"],
    response_model=MovieOut,
    responses={404: {"model": ErrorResponse}},
)
def get_movie(movie_id: str, store: MovieStore = Depends(get_store)) -> MovieOut:
    movie = store.find_by_id(movie_id)
    if movie is None:
        raise MovieNotFound(movie_id)
    return MovieOut.from_movie(movie)


@app.post(
    "/movies",
    response_model=MovieOut,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ValidationErrorResponse}},
)
def create_movie(
    payload: Any = Body(default=None),
    store: MovieStore = Depends(get_store),
) -> MovieOut:
    """Validate the body and append a new movie with the next id."""

    movie = store.create(_to_candidate(payload))
    return MovieOut.from_movie(movie)


@app.put(
    "/movies/{movie_id}",
    response_model=MovieOut,
    responses={400: {"model": ValidationErrorResponse}, 404: {"model": ErrorResponse}},
)
def update_movie(
    movie_id: str,
    payload: Any = Body(default=None),
    store: MovieStore = Depends(get_store),
) -> MovieOut:
    """Overwrite title, director and year; a missing id wins over a bad body."""

    movie = store.update(movie_id, _to_candidate(payload))
    return MovieOut.from_movie(movie)


@app.delete(
    "/movies/{movie_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses={404: {"model": ErrorResponse}},
)
def delete_movie(movie_id: str, store: MovieStore = Depends(get_store)) -> Response:
    store.delete(movie_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


def _to_candidate(payload: Any) -> MovieCandidate:
    # Arrays and scalars carry no fields, so they validate as an empty candidate.
    if not isinstance(payload, dict):
        return MovieCandidate()
    return MovieIn.model_validate(payload).to_candidate()


def run() -> None:
    """Serve the app with uvicorn on the configured host and port."""

    import uvicorn

    settings = get_settings()
    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
        access_log=False,
    )


if __name__ == "__main__":
    run()
