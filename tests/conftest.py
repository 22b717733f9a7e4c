import os

# Must be in place before config/database are imported
os.environ["DATABASE_URL"] = "sqlite+aiosqlite://"
os.environ["STAFF_EMAIL_DOMAIN"] = "@valdosta.edu"
os.environ["OPENING_HOUR"] = "8"
os.environ["CLOSING_HOUR"] = "16"
os.environ["MIN_PURPOSE_LENGTH"] = "10"
os.environ["STAFF_BLOCK_NAME"] = "VSU STAFF"
os.environ["ADMIN_BLOCK_MESSAGE"] = "Reserved for administrative purposes"

from datetime import date

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from auth import AuthorizationGate
from booking_service import BookingService
from database import init_db
from models import ReservationDraft
from persistence import PersistenceAdapter
from store import ReservationStore

MONDAY = date(2024, 6, 3)
WEDNESDAY = date(2024, 6, 5)
STAFF_EMAIL = "jdoe@valdosta.edu"


@pytest.fixture
async def engine():
    """In-memory SQLite engine with the kv_store table created."""
    test_engine = create_async_engine(
        "sqlite+aiosqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    await init_db(test_engine)
    yield test_engine
    await test_engine.dispose()


@pytest.fixture
def adapter(engine):
    return PersistenceAdapter(sessionmaker(engine, class_=AsyncSession, expire_on_commit=False))


@pytest.fixture
def store(adapter):
    return ReservationStore(adapter)


@pytest.fixture
def gate(adapter):
    return AuthorizationGate(adapter)


@pytest.fixture
def service(gate, store):
    return BookingService(gate, store, today=lambda: WEDNESDAY)


@pytest.fixture
async def staff_service(service):
    await service.login(STAFF_EMAIL, "Jane Doe")
    return service


@pytest.fixture
async def client(service):
    from main import app, get_booking_service

    app.dependency_overrides[get_booking_service] = lambda: service
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as http:
        yield http
    app.dependency_overrides.clear()


@pytest.fixture
def make_draft():
    """Factory for an ordinary booking request on Monday 09:00."""

    def _make(**overrides) -> ReservationDraft:
        fields = {
            "requester_name": "Sam Rivera",
            "requester_email": "sam@example.com",
            "date": MONDAY,
            "time": "09:00",
            "purpose_message": "Team sync 1",
        }
        fields.update(overrides)
        return ReservationDraft(**fields)

    return _make
