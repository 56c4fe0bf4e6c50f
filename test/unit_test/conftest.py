"""Shared fixtures: an in-memory SQLite database and row factories."""

from __future__ import annotations

from typing import AsyncGenerator

import pytest
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from homeharbor.core.database.base import utc_now
from homeharbor.core.database.entities import Location, Property, User
from homeharbor.core.database.utils import create_all

TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest.fixture(scope="function")
async def in_memory_engine() -> AsyncGenerator:
    """Create in-memory SQLite engine with every table."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    await create_all(engine)
    try:
        yield engine
    finally:
        await engine.dispose()


@pytest.fixture(scope="function")
def session_factory(in_memory_engine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(in_memory_engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture(scope="function")
async def session(session_factory) -> AsyncGenerator[AsyncSession, None]:
    """Create a new session for each test."""
    async with session_factory() as session:
        yield session


@pytest.fixture
def make_user(session: AsyncSession):
    async def _make(**overrides) -> User:
        username = overrides.get("username", "tester")
        data = {
            "name": "Test User",
            "email": f"{username}@example.com",
            "username": username,
            "role": "user",
        }
        data.update(overrides)
        user = User(**data, created_at=utc_now(), updated_at=utc_now())
        session.add(user)
        await session.commit()
        await session.refresh(user)
        return user

    return _make


@pytest.fixture
def make_property(session: AsyncSession):
    async def _make(user: User, **overrides) -> Property:
        data = {
            "title": "Listing",
            "description": "A listing",
            "price": 100000.0,
            "address": "Street 1",
            "city": "Helsinki",
            "area": 50.0,
            "bedrooms": 2,
            "bathrooms": 1,
            "property_type": "Apartment",
            "listing_type": "sell",
            "user_id": user.id,
        }
        data.update(overrides)
        prop = Property(**data)
        session.add(prop)
        await session.commit()
        await session.refresh(prop)
        return prop

    return _make


@pytest.fixture
def make_location(session: AsyncSession):
    async def _make(**overrides) -> Location:
        data = {"name": "Helsinki", "city": "Helsinki", "country": "Finland"}
        data.update(overrides)
        location = Location(**data)
        session.add(location)
        await session.commit()
        await session.refresh(location)
        return location

    return _make
