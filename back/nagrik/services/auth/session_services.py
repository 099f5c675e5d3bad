# Standard library imports
from datetime import UTC, datetime, timedelta
from uuid import UUID

# Third-party imports
from fastapi import Request
from sqlalchemy.ext.asyncio import AsyncSession

# Local application imports
from nagrik.core.monitoring.logging import get_contextual_logger
from nagrik.models.auth.session import Session
from nagrik.settings import settings

logger = get_contextual_logger(__name__)


def get_client_ip(request: Request) -> str | None:
    forwarded = request.headers.get("x-forwarded-for")
    if forwarded:
        return forwarded.split(",")[0].strip()
    return request.client.host if request.client else None


async def create_session(
    db: AsyncSession,
    user_id: UUID,
    access_token_jti: str,
    refresh_token_jti: str,
    request: Request | None = None,
    expires_at: datetime | None = None,
) -> Session:
    """
    Open a session tied to a freshly issued token pair.

    Args:
        db: Database session
        user_id: User ID
        access_token_jti: JWT ID for the access token
        refresh_token_jti: JWT ID for the refresh token
        request: Optional request object to record client info
        expires_at: Session expiration time, defaults to the refresh token lifetime

    Returns:
        The created Session
    """
    if not expires_at:
        expires_at = datetime.now(UTC) + timedelta(minutes=settings.REFRESH_TOKEN_EXPIRE_MINUTES)

    user_agent = request.headers.get("user-agent") if request else None
    session = Session(
        user_id=user_id,
        access_token_jti=access_token_jti,
        refresh_token_jti=refresh_token_jti,
        user_agent=user_agent,
        ip_address=get_client_ip(request) if request else None,
        device_type="mobile" if user_agent and "Mobile" in user_agent else "web",
        expires_at=expires_at,
        is_active=True,
    )
    db.add(session)
    await db.commit()
    await db.refresh(session)

    logger.info(f"Session {session.id} opened for user {user_id}")
    return session


async def invalidate_session(db: AsyncSession, session: Session, reason: str = "manual_logout") -> None:
    session.invalidate(reason)
    await db.commit()
    logger.info(f"Session {session.id} invalidated ({reason})")
