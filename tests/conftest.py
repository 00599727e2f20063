import pytest
from datetime import datetime, timedelta, UTC
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from rental_manager.models.base import Base
# Import model classes to ensure they're registered with SQLAlchemy
from rental_manager.models.kv_entry import KeyValueEntry  # noqa: F401
from rental_manager.directory import DirectoryStore
from rental_manager.repositories.kv_store import KeyValueStore
from rental_manager.schemas.payment_schemas import Payment

# Test database (SQLite in-memory for speed)
# Use StaticPool to ensure all connections share the same in-memory database
SQLALCHEMY_TEST_DATABASE_URL = "sqlite:///:memory:"
engine = create_engine(
    SQLALCHEMY_TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

FROZEN_NOW = datetime(2024, 6, 15, 10, 30, tzinfo=UTC)


class FrozenClock:
    """Clock that only moves when told to"""

    def __init__(self, now: datetime = FROZEN_NOW):
        self.now = now

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs) -> None:
        self.now = self.now + timedelta(**kwargs)


@pytest.fixture(scope="function")
def db_session():
    """Create fresh database for each test"""
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def kv_store(db_session):
    """Empty key-value store"""
    return KeyValueStore(db_session)


@pytest.fixture
def clock():
    return FrozenClock()


@pytest.fixture
def directory(kv_store, clock):
    """Directory store seeded with demo users and the room catalog"""
    store = DirectoryStore(kv_store, clock)
    store.initialize()
    return store


@pytest.fixture
def tenant_session(directory):
    """Tenant One (uid 2) signed in"""
    directory.login("tenant1@building.com", "tenant123")
    return directory.get_current_session()


@pytest.fixture
def owner_session(directory):
    """Owner (uid 1) signed in"""
    directory.login("owner@building.com", "owner123")
    return directory.get_current_session()


def make_registration(tenant_id: str = "2", room_number: str = "203", **overrides) -> dict:
    """Registration payload in the stored camelCase shape"""
    data = {
        "tenantId": tenant_id,
        "tenantName": "Tenant One",
        "aadharNumber": "123412341234",
        "aadharCardUrl": "",
        "company": "Acme Ltd",
        "familyMembersCount": 2,
        "roomNumber": room_number,
        "roomType": "double" if room_number[-1] in "34" else "single",
        "joinedAt": "2024-06-01T09:00:00.000Z",
        "phone": "9876543211",
    }
    data.update(overrides)
    return data


def make_payment(tenant_id: str = "2", month: str = "2024-06", **overrides) -> Payment:
    data = {
        "tenant_id": tenant_id,
        "room_number": "203",
        "month": month,
        "amount": 12000,
        "screenshot_url": "blob:proof-1",
        "status": "paid",
        "created_at": FROZEN_NOW,
        "type": "rent",
    }
    data.update(overrides)
    return Payment(**data)
