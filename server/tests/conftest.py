"""Test configuration and fixtures."""

import os

# Must be set before goglobe settings are loaded
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("BEARER_TOKEN_SECRET", "test-secret-key-with-at-least-32-bytes!")

from datetime import date, datetime, timedelta, timezone  # noqa: E402
from decimal import Decimal  # noqa: E402

import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from goglobe.core.database import Base  # noqa: E402
from goglobe.core.dependencies import get_db  # noqa: E402
from goglobe.core.security import create_access_token  # noqa: E402
from goglobe.models import (  # noqa: E402
    Agency,
    City,
    Country,
    Hotel,
    Property,
    PropertyKind,
    Room,
    TravelOffer,
    UserKind,
)
from goglobe.repositories import UserRepository  # noqa: E402
from goglobe.services import UserService  # noqa: E402

# Test database URL (in-memory SQLite for speed)
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"

TEST_PASSWORD = "correct-horse-battery"


@pytest_asyncio.fixture(scope="function")
async def test_engine():
    """Create a test database engine."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        echo=False,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    await engine.dispose()


@pytest_asyncio.fixture(scope="function")
async def test_session(test_engine):
    """Create a test database session."""
    async_session = async_sessionmaker(
        test_engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )

    async with async_session() as session:
        yield session


@pytest_asyncio.fixture(scope="function")
async def test_app(test_session):
    """The application with its database dependency bound to the test session."""
    from goglobe.main import app

    async def override_get_db():
        yield test_session

    app.dependency_overrides[get_db] = override_get_db

    yield app

    app.dependency_overrides.clear()


@pytest_asyncio.fixture(scope="function")
async def test_client(test_app):
    """Create a test HTTP client."""
    transport = ASGITransport(app=test_app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


def auth_headers(user) -> dict:
    token = create_access_token(user_id=user.id, email=user.email, roles=[user.role])
    return {"Authorization": f"Bearer {token}"}


@pytest_asyncio.fixture
async def admin_user(test_session):
    return await UserService(UserRepository(test_session)).create_user(
        email="admin@goglobe.example.com",
        password=TEST_PASSWORD,
        name="Ada",
        surname="Admin",
        kind=UserKind.ADMINISTRATOR
    )


@pytest_asyncio.fixture
async def client_user(test_session):
    return await UserService(UserRepository(test_session)).create_user(
        email="client@goglobe.example.com",
        password=TEST_PASSWORD,
        name="Carl",
        surname="Client",
        birth_date=date(1990, 5, 17)
    )


@pytest_asyncio.fixture
async def other_client(test_session):
    return await UserService(UserRepository(test_session)).create_user(
        email="other@goglobe.example.com",
        password=TEST_PASSWORD,
        name="Olga",
        surname="Other"
    )


@pytest.fixture
def user_password():
    """Password shared by the fixture accounts."""
    return TEST_PASSWORD


@pytest.fixture
def admin_headers(admin_user):
    return auth_headers(admin_user)


@pytest.fixture
def client_headers(client_user):
    return auth_headers(client_user)


@pytest.fixture
def other_client_headers(other_client):
    return auth_headers(other_client)


@pytest_asyncio.fixture
async def catalogue(test_session):
    """An agency, destination, hotel with rooms, properties and one travel offer."""
    agency = Agency(name="Sunrise Travel", address="12 Harbour Street")
    country = Country(name="Iceland")
    city = City(name="Reykjavik")
    hotel = Hotel(name="Aurora Lodge", star_count=4, rooms=[Room(type="single"), Room(type="double")])
    transfer = Property(name="Airport transfer", kind=PropertyKind.INCLUDED.value)
    insurance = Property(name="Travel insurance", kind=PropertyKind.EXCLUDED.value)
    test_session.add_all([agency, country, city, hotel, transfer, insurance])
    await test_session.flush()

    departure = datetime(2030, 2, 1, 9, 0, tzinfo=timezone.utc)
    offer = TravelOffer(
        agency_id=agency.id,
        country_id=country.id,
        city_id=city.id,
        hotel_id=hotel.id,
        description="Northern lights week",
        departure_date=departure,
        return_date=departure + timedelta(days=6),
        person_count=2,
        price=Decimal("1299.00"),
        is_feeding_included=True,
        properties=[transfer]
    )
    test_session.add(offer)
    await test_session.commit()

    return {
        "agency": agency,
        "country": country,
        "city": city,
        "hotel": hotel,
        "properties": [transfer, insurance],
        "travel_offer": offer,
    }


@pytest.fixture
def sample_travel_offer_data(catalogue):
    """Request body for creating a travel offer against the sample catalogue."""
    return {
        "agency_id": catalogue["agency"].id,
        "country_id": catalogue["country"].id,
        "city_id": catalogue["city"].id,
        "hotel_id": catalogue["hotel"].id,
        "description": "Fjords and glaciers",
        "departure_date": "2030-06-01T08:00:00Z",
        "return_date": "2030-06-08T18:00:00Z",
        "person_count": 2,
        "price": "899.50",
        "is_feeding_included": False,
        "property_ids": [prop.id for prop in catalogue["properties"]],
    }
