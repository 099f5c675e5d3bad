# Third-party imports
from fastapi import APIRouter, Depends, HTTPException, Request, status
from sqlalchemy.ext.asyncio import AsyncSession

# Local application imports
from nagrik.api.internal.utils.permissions import RequestContext, get_request_context
from nagrik.core.db import get_async_session
from nagrik.core.monitoring.logging import get_contextual_logger
from nagrik.schemas.auth import (
    AccessTokenResponse,
    OTPRequest,
    OTPSentResponse,
    OTPVerifyRequest,
    UserProfileUpdate,
    UserResponse,
)
from nagrik.services.auth import (
    create_session,
    generate_auth_tokens,
    invalidate_session,
    request_otp,
    update_profile,
    verify_otp,
)
from nagrik.settings import settings

router = APIRouter()


@router.post("/send-otp", response_model=OTPSentResponse)
async def send_otp(payload: OTPRequest, db: AsyncSession = Depends(get_async_session)):
    """Send a login code to the phone number; first contact registers a citizen account"""
    await request_otp(db, payload.phone_number)
    return OTPSentResponse(
        phone_number=payload.phone_number,
        expires_in_seconds=settings.OTP_EXPIRE_MINUTES * 60,
    )


@router.post("/verify-otp", response_model=AccessTokenResponse)
async def verify_otp_and_login(
    payload: OTPVerifyRequest,
    request: Request,
    db: AsyncSession = Depends(get_async_session),
):
    """Exchange a valid code for an access/refresh token pair"""
    logger = get_contextual_logger(__name__, request_id=getattr(request.state, "request_id", None))

    result = await verify_otp(db, payload.phone_number, payload.otp_code)
    if not result["success"]:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=result["error"])

    user = result["user"]
    tokens, access_jti, refresh_jti = generate_auth_tokens(user)
    await create_session(
        db,
        user_id=user.id,
        access_token_jti=access_jti,
        refresh_token_jti=refresh_jti,
        request=request,
    )

    logger.info(f"User {user.id} logged in")
    return tokens


@router.post("/logout", status_code=status.HTTP_204_NO_CONTENT)
async def logout(
    context: RequestContext = Depends(get_request_context),
    db: AsyncSession = Depends(get_async_session),
):
    """Close the session the current access token belongs to"""
    # The context was resolved in this request's db session
    await invalidate_session(db, context.session, reason="manual_logout")


@router.get("/me", response_model=UserResponse)
async def read_profile(context: RequestContext = Depends(get_request_context)):
    return UserResponse.model_validate(context.user)


@router.patch("/me", response_model=UserResponse)
async def edit_profile(
    payload: UserProfileUpdate,
    context: RequestContext = Depends(get_request_context),
    db: AsyncSession = Depends(get_async_session),
):
    user = await update_profile(db, context.user, payload)
    return UserResponse.model_validate(user)
