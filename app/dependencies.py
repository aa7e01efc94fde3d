from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db
from app.services.booking_service import BookingService
from app.services.catalog_service import CatalogService
from app.store import BookingStore


async def get_booking_store(db: AsyncSession = Depends(get_db)) -> BookingStore:
    return BookingStore(db)


async def get_booking_service(store: BookingStore = Depends(get_booking_store)) -> BookingService:
    return BookingService(store)


async def get_catalog_service(store: BookingStore = Depends(get_booking_store)) -> CatalogService:
    return CatalogService(store)
