# Third-party imports
from sqlalchemy import case, update
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.ext.asyncio import AsyncSession

# Local application imports
from nagrik.core.monitoring.logging import get_contextual_logger
from nagrik.models.issues.area_stats import AreaStats

logger = get_contextual_logger(__name__)

DIALECT_INSERTS = {
    "postgresql": postgresql.insert,
    "sqlite": sqlite.insert,
}


async def ensure_area_stats(db: AsyncSession, location: str) -> bool:
    """
    Create the counters row for ``location`` unless one exists.

    Uses INSERT ... ON CONFLICT DO NOTHING on the unique location, so two
    writers creating the same area both succeed. Returns True when this call
    created the row.
    """
    dialect = db.get_bind().dialect.name
    insert = DIALECT_INSERTS.get(dialect)
    if insert is None:
        raise ValueError(f"Unsupported database dialect for area counters: {dialect}")

    statement = insert(AreaStats).values(location=location).on_conflict_do_nothing(index_elements=["location"])
    result = await db.execute(statement)
    created = result.rowcount == 1
    if created:
        logger.debug(f"Created counters row for area {location!r}")
    return created


async def apply_area_stats_deltas(db: AsyncSession, location: str, deltas: dict[str, int]) -> None:
    """Add ``deltas`` to the area's counters in the database, never going below zero."""
    if not deltas:
        return

    values = {}
    for column_name, delta in deltas.items():
        column = getattr(AreaStats, column_name)
        values[column_name] = case((column + delta < 0, 0), else_=column + delta)

    await db.execute(
        update(AreaStats)
        .where(AreaStats.location == location)
        .values(**values)
        .execution_options(synchronize_session=False)
    )
