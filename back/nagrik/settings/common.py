# Standard library imports
import secrets
from typing import Annotated, Any, Literal

# Third-party imports
from pydantic import AnyUrl, BeforeValidator, computed_field
from pydantic_core import MultiHostUrl
from pydantic_settings import BaseSettings, SettingsConfigDict


def parse_cors(v: Any) -> list[str] | str:
    if isinstance(v, str) and not v.startswith("["):
        return [i.strip() for i in v.split(",")]
    elif isinstance(v, list | str):
        return v
    raise ValueError(v)


class CommonSettings(BaseSettings):
    model_config = SettingsConfigDict(
        # Use top level .env file (one level above ./back/)
        env_file="../.env",
        env_ignore_empty=True,
        extra="ignore",
    )

    # General settings
    API_V1_STR: str = "/api/v1"
    SECRET_KEY: str = secrets.token_urlsafe(32)
    ENVIRONMENT: Literal["dev", "staging", "production"] = "dev"
    UNDER_DEVELOPMENT: bool = False  # Set to True to log OTP codes instead of sending SMS
    DEBUG_MODE: bool = False
    PROJECT_NAME: str = "Nagrik Seva"

    # Database settings
    DATABASE_URL: str | None = None  # Full async URL, overrides the POSTGRES_* parts
    POSTGRES_SERVER: str = "localhost"
    POSTGRES_PORT: int = 5432
    POSTGRES_USER: str = "nagrik"
    POSTGRES_PASSWORD: str = "nagrik"
    POSTGRES_DB: str = "nagrik_seva"
    DATABASE_ECHO: bool = False
    AUTO_CREATE_TABLES: bool = False  # create missing tables on startup instead of via the script

    @property
    def SQLALCHEMY_ASYNC_DATABASE_URI(self) -> str:
        if self.DATABASE_URL:
            return self.DATABASE_URL
        return str(
            MultiHostUrl.build(
                scheme="postgresql+asyncpg",  # async driver for async queries
                username=self.POSTGRES_USER,
                password=self.POSTGRES_PASSWORD,
                host=self.POSTGRES_SERVER,
                port=self.POSTGRES_PORT,
                path=self.POSTGRES_DB,
            )
        )

    # CORS settings
    BACKEND_CORS_ORIGINS: Annotated[list[AnyUrl] | str, BeforeValidator(parse_cors)] = [
        AnyUrl("http://localhost/"),
        AnyUrl("http://localhost:3000/"),
        AnyUrl("http://localhost:5173/"),
        AnyUrl("http://localhost:8000/"),
    ]

    @computed_field  # type: ignore[prop-decorator, misc]
    @property
    def all_cors_origins(self) -> list[str]:
        return [str(origin).rstrip("/") for origin in self.BACKEND_CORS_ORIGINS]

    # Optional settings
    SENTRY_DSN: str | None = None

    # JWT settings
    JWT_ALGORITHM: str = "HS256"
    JWT_SECRET_KEY: str = secrets.token_urlsafe(32)
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60 * 24 * 1  # 1 day for production must be 30 min
    REFRESH_TOKEN_EXPIRE_MINUTES: int = 60 * 24 * 30  # 30 days

    # OTP settings
    OTP_EXPIRE_MINUTES: int = 10
    OTP_MAX_ATTEMPTS: int = 3

    # Redis settings
    REDIS_URL: str = "redis://localhost:6379/0"
    CACHE_ENABLED: bool = True
    CACHE_TTL_SECONDS: int = 5 * 60  # 5 minutes
    ANALYTICS_CACHE_TTL_SECONDS: int = 10 * 60  # 10 minutes

    # Admin settings
    ADMIN_PHONE_NUMBER: str = "+919876543210"
    ADMIN_DISPLAY_NAME: str = "Admin"

    # Geocoding settings (OpenStreetMap Nominatim)
    NOMINATIM_BASE_URL: str = "https://nominatim.openstreetmap.org"
    NOMINATIM_USER_AGENT: str = "Nagrik-Seva-App/1.0"
    GEOCODING_DEFAULT_CITY: str = "Delhi"
    GEOCODING_TIMEOUT: float = 10.0

    # S3 settings
    S3_URL: str = "http://localhost:9000"
    S3_ACCESS_KEY_ID: str = "minioadmin"
    S3_SECRET_ACCESS_KEY: str = "minioadmin"
    S3_PUBLIC_BUCKET_NAME: str = "nagrik-public"
    S3_SECURE: bool = False

    # Photo upload
    ALLOWED_PHOTO_TYPES: list[str] = [
        "image/png",
        "image/jpeg",
        "image/jpg",
    ]
    MAX_PHOTO_SIZE: int = 10 * 1024 * 1024  # 10 MB

    # Pagination configurations
    PAGINATION_CONFIGS: dict[str, dict[str, int]] = {
        "large": {
            # Public listings feeding the area dashboards
            "default_limit": 100,
            "max_limit": 1000,
            "min_limit": 1,
            "default_offset": 0,
        },
    }
