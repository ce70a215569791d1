"""
Central API router that aggregates all route modules.
"""

from fastapi import APIRouter
from hotels_api.api.routes import hotels

api_router = APIRouter()
api_router.include_router(hotels.router)
