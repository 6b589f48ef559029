"""Application lifespan: startup and shutdown.

Only wiring of infrastructure (logging, SQL engine dispose); no business logic.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from crm_templates.core.config import get_settings
from crm_templates.shared.telemetry import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def create_lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Configure logging, yield, then dispose the SQL engine if one was created."""
    setup_logging()
    settings = get_settings()
    if not settings.database_url:
        logger.warning(
            "DATABASE_URL is not set; template endpoints will answer 503 until it is configured"
        )
    logger.info("%s %s started", settings.app_name, settings.app_version)

    yield

    from crm_templates.infrastructure.persistence import database

    if database.engine is not None:
        await database.engine.dispose()
        logger.info("SQL engine disposed")
