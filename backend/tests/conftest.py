"""
Pytest fixtures for test database, client, authentication and seeded data.

Integration tests run against a separate database (SQLite through aiosqlite
unless TEST_DATABASE_URL says otherwise). Tables are created and dropped per
test for isolation. Service unit tests use an in-memory HotelStore instead.
"""

import os
import tempfile
from datetime import datetime, timezone
from pathlib import Path
from typing import AsyncGenerator, Optional

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine, async_sessionmaker
from sqlalchemy.pool import NullPool

from hotels_api.main import app
from hotels_api.db.base import Base
from hotels_api.db.session import get_db
from hotels_api.core.security import create_access_token
from hotels_api.models import (
    Address,
    Enrollment,
    Hotel,
    Room,
    Session,
    Ticket,
    TicketStatus,
    TicketType,
    User,
)
from hotels_api.stores.interfaces import HotelStore

TEST_DATABASE_URL = os.getenv(
    "TEST_DATABASE_URL",
    f"sqlite+aiosqlite:///{Path(tempfile.gettempdir()) / 'hotels_api_test.db'}",
)

test_engine = create_async_engine(TEST_DATABASE_URL, echo=False, poolclass=NullPool)
TestSessionLocal = async_sessionmaker(test_engine, class_=AsyncSession, expire_on_commit=False)


@pytest_asyncio.fixture(scope="function")
async def db_session() -> AsyncGenerator[AsyncSession, None]:
    """Create tables, yield session, then drop tables for isolation."""
    async with test_engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
        await conn.run_sync(Base.metadata.create_all)

    async with TestSessionLocal() as session:
        yield session

    async with test_engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)


@pytest_asyncio.fixture(scope="function")
async def client(db_session: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """HTTP client whose requests each get a fresh session on the test database."""

    async def override_get_db():
        async with TestSessionLocal() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


class Factory:
    """Creates and commits rows on the test session."""

    def __init__(self, db: AsyncSession) -> None:
        self.db = db
        self._seq = 0

    async def _save(self, obj):
        self.db.add(obj)
        await self.db.commit()
        await self.db.refresh(obj)
        return obj

    def _next(self) -> int:
        self._seq += 1
        return self._seq

    async def user(self) -> User:
        n = self._next()
        return await self._save(User(email=f"user{n}@example.com", password="hashed"))

    async def session_token(self, user: User) -> str:
        token = create_access_token(user.id)
        await self._save(Session(user_id=user.id, token=token))
        return token

    async def enrollment_with_address(self, user: User) -> Enrollment:
        enrollment = await self._save(Enrollment(
            name="Test Attendee",
            cpf="12345678909",
            birthday=datetime(1990, 5, 17, tzinfo=timezone.utc),
            phone="(21) 98999-9999",
            user_id=user.id,
        ))
        await self._save(Address(
            cep="20000-000",
            street="Rua Teste",
            city="Rio de Janeiro",
            state="RJ",
            number="42",
            neighborhood="Centro",
            enrollment_id=enrollment.id,
        ))
        return enrollment

    async def ticket_type(self, includes_hotel: bool = True, is_remote: bool = False) -> TicketType:
        return await self._save(TicketType(
            name=f"Ticket type {self._next()}",
            price=25000,
            includes_hotel=includes_hotel,
            is_remote=is_remote,
        ))

    async def ticket(self, enrollment: Enrollment, ticket_type: TicketType, status: TicketStatus) -> Ticket:
        return await self._save(Ticket(
            enrollment_id=enrollment.id,
            ticket_type_id=ticket_type.id,
            status=status.value,
        ))

    async def hotel(self, name: Optional[str] = None) -> Hotel:
        return await self._save(Hotel(
            name=name or f"Hotel {self._next()}",
            image="https://example.com/hotel.png",
        ))

    async def room(self, hotel: Hotel, capacity: int = 2) -> Room:
        return await self._save(Room(name=f"Room {self._next()}", capacity=capacity, hotel_id=hotel.id))


@pytest_asyncio.fixture
async def factory(db_session: AsyncSession) -> Factory:
    return Factory(db_session)


@pytest_asyncio.fixture
async def test_user(factory: Factory) -> User:
    return await factory.user()


@pytest_asyncio.fixture
async def auth_headers(factory: Factory, test_user: User) -> dict:
    """Authorization headers for a user with an active session."""
    token = await factory.session_token(test_user)
    return {"Authorization": f"Bearer {token}"}


@pytest_asyncio.fixture
async def paid_user_headers(factory: Factory, test_user: User, auth_headers: dict) -> dict:
    """Headers for a user holding a paid, in-person ticket that includes a hotel."""
    enrollment = await factory.enrollment_with_address(test_user)
    ticket_type = await factory.ticket_type(includes_hotel=True, is_remote=False)
    await factory.ticket(enrollment, ticket_type, TicketStatus.PAID)
    return auth_headers


class InMemoryHotelStore(HotelStore):
    """HotelStore backed by plain lists of transient model instances."""

    def __init__(self) -> None:
        self.enrollments: list[Enrollment] = []
        self.tickets: list[Ticket] = []
        self.hotels: list[Hotel] = []
        self.rooms: list[Room] = []
        self.calls: list[str] = []

    async def find_enrollment_by_user(self, user_id: int) -> Optional[Enrollment]:
        self.calls.append("find_enrollment_by_user")
        return next((e for e in self.enrollments if e.user_id == user_id), None)

    async def find_ticket_by_enrollment(self, enrollment_id: int) -> Optional[Ticket]:
        self.calls.append("find_ticket_by_enrollment")
        matching = [t for t in self.tickets if t.enrollment_id == enrollment_id]
        return max(matching, key=lambda t: t.id) if matching else None

    async def find_all_hotels(self) -> list[Hotel]:
        self.calls.append("find_all_hotels")
        return sorted(self.hotels, key=lambda h: h.id)

    async def hotel_exists(self, hotel_id: int) -> bool:
        self.calls.append("hotel_exists")
        return any(h.id == hotel_id for h in self.hotels)

    async def find_rooms_by_hotel(self, hotel_id: int) -> list[Room]:
        self.calls.append("find_rooms_by_hotel")
        return sorted((r for r in self.rooms if r.hotel_id == hotel_id), key=lambda r: r.id)

    # Seeding helpers

    def add_enrollment(self, user_id: int) -> Enrollment:
        enrollment = Enrollment(id=len(self.enrollments) + 1, user_id=user_id, name="Attendee")
        self.enrollments.append(enrollment)
        return enrollment

    def add_ticket(
        self,
        enrollment: Enrollment,
        status: TicketStatus,
        includes_hotel: bool = True,
        is_remote: bool = False,
    ) -> Ticket:
        ticket_type = TicketType(
            id=len(self.tickets) + 1,
            name="Type",
            price=100,
            includes_hotel=includes_hotel,
            is_remote=is_remote,
        )
        ticket = Ticket(
            id=len(self.tickets) + 1,
            enrollment_id=enrollment.id,
            ticket_type_id=ticket_type.id,
            status=status.value,
        )
        ticket.ticket_type = ticket_type
        self.tickets.append(ticket)
        return ticket

    def add_hotel(self, name: str = "Hotel") -> Hotel:
        now = datetime.now(timezone.utc)
        hotel = Hotel(id=len(self.hotels) + 1, name=name, image="img.png", created_at=now, updated_at=now)
        self.hotels.append(hotel)
        return hotel

    def add_room(self, hotel: Hotel, capacity: int = 2) -> Room:
        now = datetime.now(timezone.utc)
        room = Room(
            id=len(self.rooms) + 1,
            name=f"Room {len(self.rooms) + 1}",
            capacity=capacity,
            hotel_id=hotel.id,
            created_at=now,
            updated_at=now,
        )
        room.hotel = hotel
        self.rooms.append(room)
        return room


@pytest.fixture
def store() -> InMemoryHotelStore:
    return InMemoryHotelStore()
