"""Store interfaces (repository pattern).

Services depend only on this interface; the SQLAlchemy implementation is
built per request and injected through the service constructors.
"""

from abc import ABC, abstractmethod
from typing import Optional

from hotels_api.models import Enrollment, Hotel, Room, Ticket


class HotelStore(ABC):
    """Read-only access to enrollment, ticket and hotel catalog data."""

    @abstractmethod
    async def find_enrollment_by_user(self, user_id: int) -> Optional[Enrollment]:
        """Return the user's enrollment with its address, or None."""
        ...

    @abstractmethod
    async def find_ticket_by_enrollment(self, enrollment_id: int) -> Optional[Ticket]:
        """Return the most recent ticket for an enrollment with its type loaded, or None."""
        ...

    @abstractmethod
    async def find_all_hotels(self) -> list[Hotel]:
        """Return all hotels ordered by id."""
        ...

    @abstractmethod
    async def hotel_exists(self, hotel_id: int) -> bool:
        ...

    @abstractmethod
    async def find_rooms_by_hotel(self, hotel_id: int) -> list[Room]:
        """Return the hotel's rooms ordered by id, each with its hotel loaded."""
        ...
