# Standard library imports
import json
from typing import Any
from uuid import UUID

# Local application imports
from nagrik.core.caching.redis import redis_client
from nagrik.core.monitoring.logging import get_contextual_logger
from nagrik.settings import settings

logger = get_contextual_logger(__name__)

CACHE_PREFIX = "nagrik"


class CacheKeys:
    """Every cached read view has exactly one key builder here."""

    @staticmethod
    def issue(issue_id: UUID | str) -> str:
        return f"{CACHE_PREFIX}:issue:{issue_id}"

    @staticmethod
    def user_issues(user_id: UUID | str) -> str:
        return f"{CACHE_PREFIX}:user_issues:{user_id}"

    @staticmethod
    def all_issues() -> str:
        return f"{CACHE_PREFIX}:all_issues"

    @staticmethod
    def issue_stats() -> str:
        return f"{CACHE_PREFIX}:issue_stats"


def dependent_cache_keys(issue_id: UUID | str, reporter_id: UUID | str) -> list[str]:
    """The cached views that change when one issue is written."""
    return [
        CacheKeys.issue(issue_id),
        CacheKeys.user_issues(reporter_id),
        CacheKeys.all_issues(),
        CacheKeys.issue_stats(),
    ]


async def get_cached_data(cache_key: str) -> Any | None:
    """Get data from Redis cache if it exists"""
    if not settings.CACHE_ENABLED:
        return None
    try:
        cached_data = await redis_client.get(cache_key)
        if cached_data:
            return json.loads(cached_data)
        return None
    except Exception as e:
        logger.error(f"Error retrieving from cache: {str(e)}")
        return None


async def set_cached_data(cache_key: str, data: Any, expiry_seconds: int | None = None) -> None:
    """Set data in Redis cache with expiration time"""
    if not settings.CACHE_ENABLED:
        return
    expiry_seconds = expiry_seconds or settings.CACHE_TTL_SECONDS
    try:
        await redis_client.set(cache_key, json.dumps(data, default=str), ex=expiry_seconds)
        logger.debug(f"Cached data with key: {cache_key} for {expiry_seconds} seconds")
    except Exception as e:
        logger.error(f"Error setting cache: {str(e)}")


async def delete_cached_keys(cache_keys: list[str]) -> None:
    """Delete exactly the given keys; no pattern matching"""
    if not settings.CACHE_ENABLED or not cache_keys:
        return
    try:
        await redis_client.delete(*cache_keys)
        logger.debug(f"Deleted cache keys: {', '.join(cache_keys)}")
    except Exception as e:
        logger.error(f"Error deleting cache keys {cache_keys}: {str(e)}")
