# Third-party imports
from sqlalchemy.ext.asyncio import AsyncSession

# Local application imports
from nagrik.core.monitoring.logging import get_contextual_logger
from nagrik.db_selectors.auth import get_user_by_phone
from nagrik.models.auth.user import User, UserRole
from nagrik.schemas.auth import UserProfileUpdate
from nagrik.utils.model_utils import apply_partial_update

logger = get_contextual_logger(__name__)


async def get_or_create_user(
    db: AsyncSession,
    phone_number: str,
    role: UserRole = UserRole.CITIZEN,
    display_name: str | None = None,
) -> User:
    """Return the user for ``phone_number`` (already E.164), creating it unverified if missing."""
    user = await get_user_by_phone(db, phone_number)
    if user is not None:
        return user

    user = User(phone_number=phone_number, role=role, display_name=display_name, is_phone_number_verified=False)
    db.add(user)
    await db.flush()
    logger.info(f"Created {role.value} user {user.id}")
    return user


async def update_profile(db: AsyncSession, user: User, update: UserProfileUpdate) -> User:
    """Apply the fields the client actually sent (PATCH semantics)."""
    changed = apply_partial_update(user, update)

    try:
        await db.commit()
    except Exception:
        await db.rollback()
        raise

    await db.refresh(user)
    logger.info(f"Updated profile fields {changed} for user {user.id}")
    return user
