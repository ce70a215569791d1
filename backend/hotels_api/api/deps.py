"""
Dependency wiring: one store per request-scoped session, injected into the
services through their constructors.
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from hotels_api.db.session import get_db
from hotels_api.services.catalog_service import CatalogReader
from hotels_api.services.eligibility_service import EligibilityChecker
from hotels_api.stores import HotelStore, SQLAlchemyHotelStore


def get_store(db: AsyncSession = Depends(get_db)) -> HotelStore:
    return SQLAlchemyHotelStore(db)


def get_eligibility_checker(store: HotelStore = Depends(get_store)) -> EligibilityChecker:
    return EligibilityChecker(store)


def get_catalog_reader(store: HotelStore = Depends(get_store)) -> CatalogReader:
    return CatalogReader(store)
