# Local application imports
from nagrik.core.db.create_async_engine import async_engine
from nagrik.core.db.create_tables import create_all_tables
from nagrik.core.db.get_async_session import AsyncSessionLocal, get_async_session
from nagrik.core.db.run_with_new_session import run_with_new_session

__all__ = [
    "AsyncSessionLocal",
    "async_engine",
    "create_all_tables",
    "get_async_session",
    "run_with_new_session",
]
