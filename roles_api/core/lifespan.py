"""Application lifespan: startup and shutdown.

Startup configures logging and, when DB_CREATE_TABLES is set, creates
missing tables. Shutdown disposes the SQL engine.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from roles_api.core.config import get_settings
from roles_api.infrastructure.persistence import database
from roles_api.shared.telemetry.logging import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def create_lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Run startup then yield; on exit run shutdown."""
    settings = get_settings()
    setup_logging()

    if settings.db_create_tables:
        database._ensure_engine()
        await database.init_models(database.engine)
        logger.info("Database tables ensured")

    logger.info("%s %s started", settings.app_name, settings.app_version)

    yield

    await database.dispose_engine()
