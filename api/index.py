import logging

from app.core.config import get_settings
from app.core.logging_config import setup_logging
from app.main import app

# Serverless platforms import the module without running the ASGI lifespan,
# so logging is configured here instead.
setup_logging(get_settings().log_level)
logger = logging.getLogger(__name__)

logger.info("api/index.py initialized")

# This is the entry point for serverless functions
# It exports the FastAPI app instance
__all__ = ["app"]
