from hotels_api.schemas.hotel import HotelResponse, RoomResponse

__all__ = ["HotelResponse", "RoomResponse"]
