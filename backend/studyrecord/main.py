"""
Study Record API

FastAPI application exposing the study analytics services.

Usage:
    uvicorn studyrecord.main:app --reload
"""

import logging

from fastapi import FastAPI

from studyrecord.config import settings
from studyrecord.middleware.error_handling import setup_error_handling
from studyrecord.routers import analytics_router

logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    """Build the FastAPI application with logging, error handling and routers."""
    logging.basicConfig(
        level=settings.LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    app = FastAPI(title=f"{settings.APP_NAME} API")
    setup_error_handling(app, debug=settings.DEBUG)
    app.include_router(analytics_router.router)

    logger.info(f"{settings.APP_NAME} API ready (timezone={settings.ANALYTICS_TIMEZONE})")
    return app


app = create_app()
