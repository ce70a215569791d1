"""
Hotel catalog reads, run only after eligibility has been confirmed.
"""

import re

from hotels_api.core.logging import get_logger
from hotels_api.core.metrics import record_catalog_read
from hotels_api.domain.errors import NotFound
from hotels_api.models import Hotel, Room
from hotels_api.stores.interfaces import HotelStore

logger = get_logger(__name__)

_HOTEL_ID_PATTERN = re.compile(r"^[0-9]+$")
MAX_HOTEL_ID = 2**31 - 1  # INTEGER primary key


def parse_hotel_id(raw: str) -> int:
    """
    Parse a path parameter into a hotel id.
    Anything other than a positive base-10 integer is treated as not found.
    """
    value = raw.strip() if isinstance(raw, str) else str(raw)
    if not _HOTEL_ID_PATTERN.match(value):
        raise NotFound()
    hotel_id = int(value)
    if hotel_id <= 0 or hotel_id > MAX_HOTEL_ID:
        raise NotFound()
    return hotel_id


class CatalogReader:
    """Lists hotels and a hotel's rooms."""

    def __init__(self, store: HotelStore) -> None:
        self._store = store

    async def list_hotels(self) -> list[Hotel]:
        """All hotels; an empty catalog is an empty list."""
        hotels = await self._store.find_all_hotels()
        record_catalog_read("hotels", found=True)
        logger.info("hotels_listed", count=len(hotels))
        return hotels

    async def list_rooms(self, hotel_id: int) -> list[Room]:
        """
        Rooms of one hotel.
        A missing hotel raises NotFound; an existing hotel without rooms
        yields an empty list.
        """
        rooms = await self._store.find_rooms_by_hotel(hotel_id)
        if not rooms and not await self._store.hotel_exists(hotel_id):
            record_catalog_read("rooms", found=False)
            logger.info("hotel_rooms_not_found", hotel_id=hotel_id)
            raise NotFound()

        record_catalog_read("rooms", found=True)
        logger.info("hotel_rooms_listed", hotel_id=hotel_id, count=len(rooms))
        return rooms
