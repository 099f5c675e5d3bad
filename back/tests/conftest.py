"""
Shared pytest fixtures for the Nagrik Seva test suite.

Every test gets a fresh in-memory SQLite database, an in-process httpx
AsyncClient, and fake geocoding/storage collaborators swapped in through
FastAPI dependency overrides. Redis caching is switched off.
"""

# Standard library imports
import os

os.environ["ENVIRONMENT"] = "dev"
os.environ["DATABASE_URL"] = "sqlite+aiosqlite://"
os.environ["CACHE_ENABLED"] = "false"
os.environ["AUTO_CREATE_TABLES"] = "false"

# Standard library imports
from collections.abc import AsyncGenerator
from dataclasses import dataclass, field
from uuid import UUID

# Third-party imports
import httpx
import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

# Local application imports
from main import create_app
from nagrik.core.db import get_async_session
from nagrik.dependancies.common import get_geocoder, get_photo_storage
from nagrik.models import Base, OTP, UserRole
from nagrik.services.auth import get_or_create_user
from nagrik.services.geocoding import GeocodedLocation
from nagrik.services.storage import build_photo_key

TEST_OTP_CODE = "123456"

CITIZEN_PHONE = "9811111111"
OTHER_CITIZEN_PHONE = "9822222222"
ADMIN_PHONE = "9833333333"
WORKER_PHONE = "9844444444"


class FakeGeocoder:
    """Answers from a fixed table; unknown areas fail like a Nominatim miss."""

    def __init__(self, known: dict[str, GeocodedLocation] | None = None, reverse_address: str = "Janpath, New Delhi"):
        self.known = known or {}
        self.reverse_address = reverse_address
        self.queries: list[str] = []

    async def geocode(self, area_name: str) -> GeocodedLocation:
        self.queries.append(area_name)
        return self.known.get(area_name, GeocodedLocation.failed(area_name))

    async def reverse_geocode(self, lat: float, lng: float) -> str:
        return self.reverse_address


@dataclass
class FakePhotoStorage:
    uploads: list[tuple[str, bytes, str]] = field(default_factory=list)

    async def upload_photo(self, user_id: UUID, file_name: str | None, data: bytes, content_type: str) -> str:
        key = build_photo_key(user_id, file_name)
        self.uploads.append((key, data, content_type))
        return f"http://files.test/nagrik-public/{key}"


@pytest.fixture(autouse=True)
def fixed_otp_code(monkeypatch):
    """Make every issued one-time code predictable."""
    monkeypatch.setattr(OTP, "generate_code", classmethod(lambda cls: TEST_OTP_CODE))


@pytest_asyncio.fixture
async def session_factory() -> AsyncGenerator[async_sessionmaker[AsyncSession], None]:
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield async_sessionmaker(bind=engine, class_=AsyncSession, expire_on_commit=False)

    await engine.dispose()


@pytest.fixture
def geocoder() -> FakeGeocoder:
    return FakeGeocoder(
        known={
            "Connaught Place": GeocodedLocation(
                lat=28.6315, lng=77.2167, address="Connaught Place, New Delhi, Delhi, India", success=True
            ),
            "Market Street": GeocodedLocation(lat=28.65, lng=77.23, address="Market Street, Delhi", success=True),
        }
    )


@pytest.fixture
def photo_storage() -> FakePhotoStorage:
    return FakePhotoStorage()


@pytest_asyncio.fixture
async def client(session_factory, geocoder, photo_storage) -> AsyncGenerator[httpx.AsyncClient, None]:
    """In-process httpx AsyncClient bound to the test database."""
    app = create_app()

    async def override_session() -> AsyncGenerator[AsyncSession, None]:
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_async_session] = override_session
    app.dependency_overrides[get_geocoder] = lambda: geocoder
    app.dependency_overrides[get_photo_storage] = lambda: photo_storage

    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://testserver") as c:
        yield c


async def login(client: httpx.AsyncClient, phone_number: str) -> dict[str, str]:
    """Run the OTP flow and return Authorization headers."""
    resp = await client.post("/api/v1/auth/send-otp", json={"phone_number": phone_number})
    assert resp.status_code == 200, resp.text
    resp = await client.post("/api/v1/auth/verify-otp", json={"phone_number": phone_number, "otp_code": TEST_OTP_CODE})
    assert resp.status_code == 200, resp.text
    return {"Authorization": f"Bearer {resp.json()['access_token']}"}


async def create_user_with_role(session_factory, phone_number: str, role: UserRole) -> None:
    async with session_factory() as db:
        await get_or_create_user(db, f"+91{phone_number}", role=role)
        await db.commit()


@pytest_asyncio.fixture
async def citizen_headers(client) -> dict[str, str]:
    return await login(client, CITIZEN_PHONE)


@pytest_asyncio.fixture
async def admin_headers(client, session_factory) -> dict[str, str]:
    await create_user_with_role(session_factory, ADMIN_PHONE, UserRole.ADMIN)
    return await login(client, ADMIN_PHONE)


@pytest_asyncio.fixture
async def worker_headers(client, session_factory) -> dict[str, str]:
    await create_user_with_role(session_factory, WORKER_PHONE, UserRole.WORKER)
    return await login(client, WORKER_PHONE)
