"""
Test configuration and fixtures for the LightBnB data access layer.
Provides database fixtures, test data factories, and common test utilities.
"""

import pytest
import os
from datetime import date
from typing import AsyncGenerator, List, Optional
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine, async_sessionmaker
from sqlalchemy.pool import StaticPool

from lightbnb.database import Base
from lightbnb.models import User, Property, PropertyReview, Reservation
from lightbnb.repositories.user import UserRepository
from lightbnb.repositories.property import PropertyRepository
from lightbnb.repositories.reservation import ReservationRepository
from lightbnb.services.data_access import DataAccessService


# Test database configuration
TEST_DATABASE_URL = os.getenv("TEST_DATABASE_URL", "sqlite+aiosqlite://")


@pytest.fixture
async def test_engine():
    """Create a fresh schema for every test."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        echo=False,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False} if "sqlite" in TEST_DATABASE_URL else {}
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
def session_factory(test_engine) -> async_sessionmaker:
    """Session factory bound to the test engine."""
    return async_sessionmaker(
        bind=test_engine,
        class_=AsyncSession,
        expire_on_commit=False
    )


@pytest.fixture
async def db_session(session_factory: async_sessionmaker) -> AsyncGenerator[AsyncSession, None]:
    """Create a test database session."""
    async with session_factory() as session:
        try:
            yield session
        finally:
            await session.rollback()
            await session.close()


# Repository fixtures
@pytest.fixture
def user_repository(db_session: AsyncSession) -> UserRepository:
    """Create a user repository instance."""
    return UserRepository(db_session)


@pytest.fixture
def property_repository(db_session: AsyncSession) -> PropertyRepository:
    """Create a property repository instance."""
    return PropertyRepository(db_session)


@pytest.fixture
def reservation_repository(db_session: AsyncSession) -> ReservationRepository:
    """Create a reservation repository instance."""
    return ReservationRepository(db_session)


# Service fixtures
@pytest.fixture
def data_access_service(session_factory: async_sessionmaker) -> DataAccessService:
    """Create a data access service on the test database."""
    return DataAccessService(session_factory)


# Test data factories
class UserFactory:
    """Factory for creating test users."""

    _counter = 0

    @classmethod
    def create_user_data(
        cls,
        name: str = "Test User",
        email: Optional[str] = None,
        password: str = "$2a$10$FB/BOAVhpuLvpOREQVmvmezD4ED/.JBIDRh70tGevYzYzQgFId2u."
    ) -> dict:
        """Create user data dictionary."""
        cls._counter += 1
        return {
            "name": name,
            "email": email or f"user{cls._counter}@example.com",
            "password": password,
        }

    @classmethod
    async def create_user(
        cls,
        user_repo: UserRepository,
        name: str = "Test User",
        email: Optional[str] = None
    ) -> User:
        """Create a test user in the database."""
        return await user_repo.add_user(cls.create_user_data(name=name, email=email))


class PropertyFactory:
    """Factory for creating test properties."""

    @staticmethod
    def create_property_data(
        owner_id: int,
        title: str = "Speed lamp",
        cost_per_night: int = 100,
        city: str = "Vancouver",
        number_of_bedrooms: int = 2,
        number_of_bathrooms: int = 1,
        parking_spaces: int = 1
    ) -> dict:
        """Create property data dictionary."""
        return {
            "owner_id": owner_id,
            "title": title,
            "description": "description",
            "thumbnail_photo_url": "https://images.example.com/thumb.jpg",
            "cover_photo_url": "https://images.example.com/cover.jpg",
            "cost_per_night": cost_per_night,
            "parking_spaces": parking_spaces,
            "number_of_bathrooms": number_of_bathrooms,
            "number_of_bedrooms": number_of_bedrooms,
            "country": "Canada",
            "street": "536 Namsub Highway",
            "city": city,
            "province": "British Columbia",
            "post_code": "28142",
        }

    @staticmethod
    async def create_property(
        property_repo: PropertyRepository,
        owner_id: int,
        **overrides
    ) -> Property:
        """Create a test property in the database."""
        property_data = PropertyFactory.create_property_data(owner_id=owner_id, **overrides)
        return await property_repo.add_property(property_data)


class ReviewFactory:
    """Factory for creating property reviews."""

    @staticmethod
    async def create_reviews(
        db: AsyncSession,
        property_id: int,
        guest_id: int,
        ratings: List[int]
    ) -> List[PropertyReview]:
        """Create one review per rating for a property."""
        reviews = [
            PropertyReview(property_id=property_id, guest_id=guest_id, rating=rating, message="message")
            for rating in ratings
        ]
        db.add_all(reviews)
        await db.commit()
        return reviews


class ReservationFactory:
    """Factory for creating reservations."""

    @staticmethod
    async def create_reservation(
        reservation_repo: ReservationRepository,
        property_id: int,
        guest_id: int,
        start_date: date,
        end_date: date
    ) -> Reservation:
        """Create a test reservation in the database."""
        return await reservation_repo.create({
            "property_id": property_id,
            "guest_id": guest_id,
            "start_date": start_date,
            "end_date": end_date,
        })


# Common test fixtures
@pytest.fixture
async def owner_a(user_repository: UserRepository) -> User:
    """First property owner."""
    return await UserFactory.create_user(user_repository, name="Owner A", email="owner.a@example.com")


@pytest.fixture
async def owner_b(user_repository: UserRepository) -> User:
    """Second property owner."""
    return await UserFactory.create_user(user_repository, name="Owner B", email="owner.b@example.com")


@pytest.fixture
async def guest(user_repository: UserRepository) -> User:
    """A guest who reserves and reviews properties."""
    return await UserFactory.create_user(user_repository, name="Guest", email="guest@example.com")


@pytest.fixture
async def listings(
    db_session: AsyncSession,
    property_repository: PropertyRepository,
    owner_a: User,
    owner_b: User,
    guest: User
) -> dict:
    """
    Four properties:

    cheap       owner A  Vancouver   50  ratings [4]     avg 4.0
    mid         owner A  Toronto    120  ratings [5, 3]  avg 4.0
    expensive   owner B  Vancouver  300  ratings [2]     avg 2.0
    unreviewed  owner B  Vancouver   10  no reviews
    """
    cheap = await PropertyFactory.create_property(
        property_repository, owner_a.id, title="Cheap", cost_per_night=50, city="Vancouver"
    )
    mid = await PropertyFactory.create_property(
        property_repository, owner_a.id, title="Mid", cost_per_night=120, city="Toronto"
    )
    expensive = await PropertyFactory.create_property(
        property_repository, owner_b.id, title="Expensive", cost_per_night=300, city="Vancouver"
    )
    unreviewed = await PropertyFactory.create_property(
        property_repository, owner_b.id, title="Unreviewed", cost_per_night=10, city="Vancouver"
    )

    await ReviewFactory.create_reviews(db_session, cheap.id, guest.id, [4])
    await ReviewFactory.create_reviews(db_session, mid.id, guest.id, [5, 3])
    await ReviewFactory.create_reviews(db_session, expensive.id, guest.id, [2])

    return {
        "cheap": cheap,
        "mid": mid,
        "expensive": expensive,
        "unreviewed": unreviewed,
    }


# Utility functions for tests
def titles(rows) -> List[str]:
    """Titles of returned listings, in order."""
    return [row.title for row in rows]
