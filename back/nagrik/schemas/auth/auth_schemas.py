# Standard library imports
from datetime import datetime
from uuid import UUID

# Third-party imports
from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator

# Local application imports
from nagrik.models.auth.user import UserRole
from nagrik.utils.validators.phone_validator import validate_phone_number


class PhoneNumberMixin(BaseModel):
    phone_number: str = Field(..., description="Mobile number, 10 digits or E.164")

    @field_validator("phone_number")
    @classmethod
    def normalize_phone(cls, v: str) -> str:
        normalized = validate_phone_number(v)
        if normalized is None:
            raise ValueError("Invalid mobile number")
        return normalized


class OTPRequest(PhoneNumberMixin):
    pass


class OTPSentResponse(BaseModel):
    message: str = "OTP sent successfully"
    phone_number: str
    expires_in_seconds: int


class OTPVerifyRequest(PhoneNumberMixin):
    otp_code: str = Field(..., min_length=6, max_length=6, pattern=r"^\d{6}$", description="6-digit OTP code")


class AccessTokenResponse(BaseModel):
    access_token: str
    refresh_token: str
    token_type: str = "bearer"  # nosec B105
    user_id: str
    role: UserRole


class UserResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    phone_number: str
    display_name: str | None
    email: str | None
    photo_url: str | None
    role: UserRole
    is_phone_number_verified: bool
    last_login: datetime | None
    created_at: datetime


class UserProfileUpdate(BaseModel):
    display_name: str | None = Field(None, min_length=1, max_length=100)
    email: EmailStr | None = None
    photo_url: str | None = None
