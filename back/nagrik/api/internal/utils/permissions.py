# Standard library imports
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from uuid import UUID

# Third-party imports
from fastapi import Depends, HTTPException, Request, status
from fastapi.security import OAuth2PasswordBearer
import jwt
from sqlalchemy.ext.asyncio import AsyncSession

# Local application imports
from nagrik.core.db import get_async_session
from nagrik.core.monitoring.logging import get_contextual_logger
from nagrik.db_selectors.auth import get_session_by_jti, get_user_by_id
from nagrik.models.auth.session import Session
from nagrik.models.auth.user import User, UserRole
from nagrik.services.auth.token_services import ACCESS_TOKEN_TYPE, decode_token
from nagrik.settings import settings

oauth2_scheme = OAuth2PasswordBearer(tokenUrl=f"{settings.API_V1_STR}/auth/verify-otp", auto_error=False)

# Standard auth error responses
AUTH_ERROR_NOT_AUTHENTICATED = HTTPException(
    status_code=status.HTTP_401_UNAUTHORIZED,
    detail="Authentication required",
    headers={"WWW-Authenticate": "Bearer"},
)

AUTH_ERROR_INVALID_TOKEN = HTTPException(
    status_code=status.HTTP_401_UNAUTHORIZED,
    detail="Invalid or expired token",
)

AUTH_ERROR_TOKEN_EXPIRED = HTTPException(
    status_code=status.HTTP_401_UNAUTHORIZED,
    detail="Token has expired",
)

AUTH_ERROR_SESSION_EXPIRED = HTTPException(
    status_code=status.HTTP_401_UNAUTHORIZED,
    detail="Session expired or invalid, please login again",
)

AUTH_ERROR_USER_NOT_FOUND = HTTPException(
    status_code=status.HTTP_401_UNAUTHORIZED,
    detail="User not found",
)


@dataclass(frozen=True)
class RequestContext:
    """Who is calling, resolved once per request and passed to handlers explicitly."""

    user: User
    role: UserRole
    session: Session
    request_id: str | None = None

    @property
    def user_id(self) -> UUID:
        return self.user.id

    def has_role(self, *roles: UserRole) -> bool:
        return self.role in roles


async def _resolve_context(request: Request, token: str, db: AsyncSession) -> RequestContext:
    try:
        payload = decode_token(token)
        user_id_str = payload.get("sub")
        jti = payload.get("jti")

        if user_id_str is None or jti is None:
            raise AUTH_ERROR_INVALID_TOKEN

        if payload.get("token_type") != ACCESS_TOKEN_TYPE:
            raise AUTH_ERROR_INVALID_TOKEN

        try:
            user_id = UUID(user_id_str)
        except ValueError:
            raise AUTH_ERROR_INVALID_TOKEN

    except jwt.ExpiredSignatureError:
        raise AUTH_ERROR_TOKEN_EXPIRED
    except jwt.PyJWTError:
        raise AUTH_ERROR_INVALID_TOKEN

    # Get request_id if middleware set it
    request_id = getattr(request.state, "request_id", None)
    logger = get_contextual_logger(__name__, request_id=request_id, user_id=user_id_str)

    session = await get_session_by_jti(db, access_token_jti=jti)
    if session is None or not session.is_valid or session.user_id != user_id:
        logger.info("Rejected token for a closed or unknown session")
        raise AUTH_ERROR_SESSION_EXPIRED

    user = await get_user_by_id(db, user_id)
    if user is None:
        logger.warning(f"User with ID {user_id_str} not found")
        raise AUTH_ERROR_USER_NOT_FOUND

    return RequestContext(user=user, role=user.role, session=session, request_id=request_id)


async def get_request_context(
    request: Request,
    token: str | None = Depends(oauth2_scheme),
    db: AsyncSession = Depends(get_async_session),
) -> RequestContext:
    """
    Dependency for endpoints that require a logged-in user.

    Verifies the bearer access token, checks that the session it was issued
    for is still open, and loads the user.
    """
    if not token:
        raise AUTH_ERROR_NOT_AUTHENTICATED
    return await _resolve_context(request, token, db)


def require_roles(*roles: UserRole) -> Callable[..., Awaitable[RequestContext]]:
    """
    Dependency factory restricting an endpoint to the given roles.

    Returns the caller's `RequestContext`.
    """

    async def _check_role(context: RequestContext = Depends(get_request_context)) -> RequestContext:
        if not context.has_role(*roles):
            logger = get_contextual_logger(__name__, request_id=context.request_id, user_id=context.user_id)
            logger.warning(f"Role {context.role.value} denied; requires one of {[r.value for r in roles]}")
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail="You don't have permission to perform this action",
            )
        return context

    return _check_role
