"""
Persistence layer for the hotel endpoints.
"""

from .interfaces import HotelStore
from .sqlalchemy_store import SQLAlchemyHotelStore

__all__ = ['HotelStore', 'SQLAlchemyHotelStore']
