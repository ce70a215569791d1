"""
SQLAlchemy implementation of HotelStore.

Every method is a single SELECT on the request's AsyncSession. Related rows
the services need (address, ticket type, owning hotel) are eager-loaded so
nothing lazy-loads outside the async context.
"""

from typing import Optional

from sqlalchemy import select, exists
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload, joinedload

from hotels_api.models import Enrollment, Hotel, Room, Ticket
from hotels_api.stores.interfaces import HotelStore


class SQLAlchemyHotelStore(HotelStore):

    def __init__(self, db: AsyncSession) -> None:
        self._db = db

    async def find_enrollment_by_user(self, user_id: int) -> Optional[Enrollment]:
        result = await self._db.execute(
            select(Enrollment)
            .where(Enrollment.user_id == user_id)
            .options(selectinload(Enrollment.address))
        )
        return result.scalar_one_or_none()

    async def find_ticket_by_enrollment(self, enrollment_id: int) -> Optional[Ticket]:
        result = await self._db.execute(
            select(Ticket)
            .where(Ticket.enrollment_id == enrollment_id)
            .options(joinedload(Ticket.ticket_type))
            .order_by(Ticket.created_at.desc(), Ticket.id.desc())
            .limit(1)
        )
        return result.scalars().first()

    async def find_all_hotels(self) -> list[Hotel]:
        result = await self._db.execute(select(Hotel).order_by(Hotel.id.asc()))
        return list(result.scalars().all())

    async def hotel_exists(self, hotel_id: int) -> bool:
        result = await self._db.execute(select(exists().where(Hotel.id == hotel_id)))
        return bool(result.scalar())

    async def find_rooms_by_hotel(self, hotel_id: int) -> list[Room]:
        result = await self._db.execute(
            select(Room)
            .where(Room.hotel_id == hotel_id)
            .options(joinedload(Room.hotel))
            .order_by(Room.id.asc())
        )
        return list(result.scalars().all())
