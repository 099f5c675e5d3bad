#!/usr/bin/env python
"""
Script to create database tables for Nagrik Seva
"""

# Standard library imports
import asyncio
import sys

# Third-party imports
from sqlalchemy.exc import SQLAlchemyError

# Local application imports
from nagrik.core.db import async_engine, create_all_tables
from nagrik.core.monitoring.logging import get_logger

logger = get_logger("scripts.create_tables")


async def main() -> None:
    logger.info("Creating database tables...")
    try:
        tables = await create_all_tables()
    except SQLAlchemyError as e:
        logger.error(f"Error creating tables: {e}")
        sys.exit(1)
    finally:
        await async_engine.dispose()

    logger.info(f"Tables present: {', '.join(tables)}")


if __name__ == "__main__":
    asyncio.run(main())
