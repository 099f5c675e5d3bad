# Third-party imports
from sqlalchemy import inspect

# Local application imports
from nagrik.core.db.create_async_engine import async_engine

# Import all models to register them with Base
from nagrik.models import Base


async def create_all_tables() -> list[str]:
    """Create any missing tables and return the table names now present."""
    async with async_engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
        return await conn.run_sync(lambda sync_conn: sorted(inspect(sync_conn).get_table_names()))
