"""Logging setup and the startup banner."""

from __future__ import annotations

import logging

from app.core.config import Settings

_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

_ENDPOINTS = (
    ("GET", "/movies", "Get all movies (supports query params)"),
    ("GET", "/movies/:id", "Get movie by ID"),
    ("POST", "/movies", "Create new movie"),
    ("PUT", "/movies/:id", "Update movie"),
    ("DELETE", "/movies/:id", "Delete movie"),
)

_QUERY_PARAMS = (
    ("title", "name", "Filter by title"),
    ("year", "year", "Filter by year"),
    ("director", "name", "Filter by director"),
    ("minYear", "year", "Filter from year"),
    ("maxYear", "year", "Filter up to year"),
)


def setup_logging(level: str = "INFO") -> None:
    """Configure root logging once; unknown level names fall back to INFO."""

    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=_LOG_FORMAT,
    )


def log_startup_banner(logger: logging.Logger, settings: Settings) -> None:
    logger.info("Movie API server running on http://localhost:%s", settings.port)
    logger.info("Available endpoints:")
    for method, path, summary in _ENDPOINTS:
        logger.info("  %-6s %s - %s", method, path, summary)
    logger.info("Query parameters:")
    for name, placeholder, summary in _QUERY_PARAMS:
        logger.info("  ?%s=<%s> - %s", name, placeholder, summary)
    if settings.request_logging:
        logger.info("Request logging active (dev format)")
