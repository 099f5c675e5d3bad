"""
Pre-start script to check database and cache connectivity.
"""

# Standard library imports
import asyncio
import sys

# Third-party imports
from redis.exceptions import RedisError
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

# Local application imports
from nagrik.core.caching.redis import redis_client
from nagrik.core.db import async_engine
from nagrik.core.monitoring.logging import get_logger
from nagrik.settings import settings

logger = get_logger(__name__)


async def check_database() -> bool:
    """Check if database is accessible and ready."""
    try:
        async with async_engine.connect() as conn:
            await conn.execute(text("SELECT 1"))
        logger.info("Database is ready")
        return True
    except (SQLAlchemyError, OSError) as e:
        logger.error(f"Database connection failed: {e}")
        return False


async def check_cache() -> bool:
    """Check Redis, unless caching is switched off."""
    if not settings.CACHE_ENABLED:
        logger.info("Cache disabled, skipping Redis check")
        return True
    try:
        await redis_client.ping()
        logger.info("Redis is ready")
        return True
    except (RedisError, OSError) as e:
        logger.error(f"Redis connection failed: {e}")
        return False


async def wait_for(check, name: str, max_retries: int = 30, retry_interval: int = 2) -> bool:
    """
    Retry ``check`` until it passes.

    Args:
        check: Async callable returning True when the service is up
        name: Service name for log lines
        max_retries: Maximum number of connection attempts
        retry_interval: Seconds between retries

    Returns:
        True if the service is ready, False otherwise
    """
    logger.info(f"Waiting for {name} to be ready...")

    for attempt in range(1, max_retries + 1):
        logger.info(f"{name} connection attempt {attempt}/{max_retries}")

        if await check():
            return True

        if attempt < max_retries:
            logger.info(f"Retrying in {retry_interval} seconds...")
            await asyncio.sleep(retry_interval)

    logger.error(f"Failed to connect to {name} after {max_retries} attempts")
    return False


async def main() -> None:
    """Main pre-start routine."""
    logger.info("Starting pre-start checks...")

    if not await wait_for(check_database, "database"):
        logger.error("Pre-start checks failed: Database is not available")
        sys.exit(1)

    if not await wait_for(check_cache, "redis"):
        logger.error("Pre-start checks failed: Redis is not available")
        sys.exit(1)

    await async_engine.dispose()
    logger.info("All pre-start checks passed")


if __name__ == "__main__":
    asyncio.run(main())
