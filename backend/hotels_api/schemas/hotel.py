"""
Pydantic schemas for hotel catalog responses.
Serialized with camelCase keys (createdAt, hotelId, ...).
"""

from datetime import datetime
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = ConfigDict(
        from_attributes=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )


class HotelResponse(CamelModel):
    id: int
    name: str
    image: str
    created_at: datetime
    updated_at: datetime


class RoomResponse(CamelModel):
    id: int
    name: str
    capacity: int
    hotel_id: int
    created_at: datetime
    updated_at: datetime
    hotel: HotelResponse
