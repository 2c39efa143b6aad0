#!/usr/bin/env python
"""
CLI script to create the hospital records schema.

Usage:
    python -m hospital.scripts.init_db
    python -m hospital.scripts.init_db --drop-existing
    DATABASE_URL=sqlite:///./hospital.db python -m hospital.scripts.init_db
"""

import argparse
import asyncio
import logging

from sqlalchemy.ext.asyncio import AsyncEngine

from hospital.config.settings import get_settings
from hospital.core.shared.logger import configure_logging
from hospital.database.async_db import create_async_database_engine
from hospital.database.base import Base

# Register every model with Base.metadata
from hospital.domains.healthcare.infrastructure.persistence.sqlalchemy import models  # noqa: F401

logger = logging.getLogger(__name__)


async def init_schema(engine: AsyncEngine, drop_existing: bool = False) -> list[str]:
    """
    Create all tables, optionally dropping them first.

    Returns:
        Names of the tables managed by the application
    """
    async with engine.begin() as conn:
        if drop_existing:
            logger.warning("Dropping existing hospital tables")
            await conn.run_sync(Base.metadata.drop_all)
        await conn.run_sync(Base.metadata.create_all)

    tables = sorted(Base.metadata.tables)
    logger.info(f"Schema ready: {', '.join(tables)}")
    return tables


async def main_async(drop_existing: bool) -> None:
    engine = create_async_database_engine()
    try:
        await init_schema(engine, drop_existing=drop_existing)
    finally:
        await engine.dispose()


def main() -> None:
    parser = argparse.ArgumentParser(description="Create the hospital records database schema")
    parser.add_argument(
        "--drop-existing",
        action="store_true",
        help="Drop the application tables before creating them (destroys data)",
    )
    args = parser.parse_args()

    settings = get_settings()
    configure_logging(settings.LOG_LEVEL, settings.LOG_FORMAT, settings.LOG_FILE)
    logger.info(f"Initializing {settings.ENVIRONMENT} database {settings.async_database_url.split('@')[-1]}")

    asyncio.run(main_async(args.drop_existing))


if __name__ == "__main__":
    main()
