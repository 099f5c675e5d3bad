# Third-party imports
import redis.asyncio as redis

# Local application imports
from nagrik.settings import settings

connection_pool: redis.ConnectionPool = redis.ConnectionPool.from_url(settings.REDIS_URL, decode_responses=True)

redis_client: redis.Redis = redis.Redis(connection_pool=connection_pool)
