"""
Hotel endpoints, gated by enrollment and ticket eligibility.
"""

from fastapi import APIRouter, Depends

from hotels_api.api.deps import get_catalog_reader, get_eligibility_checker
from hotels_api.api.errors import MaskedErrorRoute
from hotels_api.core.security import get_current_user_id
from hotels_api.schemas.hotel import HotelResponse, RoomResponse
from hotels_api.services.catalog_service import CatalogReader, parse_hotel_id
from hotels_api.services.eligibility_service import EligibilityChecker

router = APIRouter(prefix="/hotels", tags=["Hotels"], route_class=MaskedErrorRoute)


@router.get("", response_model=list[HotelResponse])
async def list_hotels(
    user_id: int = Depends(get_current_user_id),
    checker: EligibilityChecker = Depends(get_eligibility_checker),
    catalog: CatalogReader = Depends(get_catalog_reader),
):
    """
    List all hotels.

    401 without enrollment, 404 without a ticket that includes a hotel,
    402 while that ticket is unpaid.
    """
    await checker.evaluate(user_id)
    return await catalog.list_hotels()


@router.get("/{hotel_id}", response_model=list[RoomResponse])
async def list_hotel_rooms(
    hotel_id: str,
    user_id: int = Depends(get_current_user_id),
    checker: EligibilityChecker = Depends(get_eligibility_checker),
    catalog: CatalogReader = Depends(get_catalog_reader),
):
    """
    List the rooms of a hotel.

    Same eligibility rules as the hotel list. A malformed or unknown hotel id
    is 404; a hotel without rooms returns an empty list.
    """
    await checker.evaluate(user_id)
    return await catalog.list_rooms(parse_hotel_id(hotel_id))
