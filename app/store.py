"""Relational persistence for the booking flow."""
import logging
from contextlib import asynccontextmanager
from datetime import date

from sqlalchemy import select, update
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.booking import Booking
from app.models.user import User
from app.models.vehicle import Vehicle
from app.models.vehicle_type import VehicleType
from app.utils.exceptions import StoreError

logger = logging.getLogger(__name__)

_UPSERT_DIALECTS = {
    "postgresql": postgresql.insert,
    "sqlite": sqlite.insert,
}


@asynccontextmanager
async def _translate_errors(operation: str):
    try:
        yield
    except SQLAlchemyError as exc:
        logger.exception("Store operation %s failed", operation)
        raise StoreError() from exc


class BookingStore:
    """Query primitives over one database session.

    Methods flush but never commit; wrap writes in ``transaction()``.
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    @asynccontextmanager
    async def transaction(self):
        async with _translate_errors("transaction"):
            async with self.session.begin():
                yield

    async def find_user(self, first_name: str, last_name: str) -> User | None:
        async with _translate_errors("find_user"):
            result = await self.session.execute(
                select(User).where(User.first_name == first_name, User.last_name == last_name)
            )
            return result.scalars().first()

    async def create_user(self, first_name: str, last_name: str) -> User:
        """Insert the renter unless the name pair already exists, then return the row."""
        async with _translate_errors("create_user"):
            insert = _UPSERT_DIALECTS[self.session.get_bind().dialect.name]
            await self.session.execute(
                insert(User)
                .values(first_name=first_name, last_name=last_name)
                .on_conflict_do_nothing(index_elements=["first_name", "last_name"])
            )
            result = await self.session.execute(
                select(User).where(User.first_name == first_name, User.last_name == last_name)
            )
            return result.scalars().one()

    async def lock_vehicle(self, vehicle_id: int) -> bool:
        """Write-lock the vehicle row until the transaction ends.

        Returns False when no such vehicle exists.
        """
        async with _translate_errors("lock_vehicle"):
            # A no-op update holds a row lock on PostgreSQL and the write lock on SQLite.
            result = await self.session.execute(
                update(Vehicle)
                .where(Vehicle.id == vehicle_id)
                .values(type_id=Vehicle.type_id)
                .execution_options(synchronize_session=False)
            )
            return result.rowcount > 0

    async def find_overlapping_booking(
        self, vehicle_id: int, start_date: date, end_date: date
    ) -> Booking | None:
        async with _translate_errors("find_overlapping_booking"):
            result = await self.session.execute(
                select(Booking)
                .where(
                    Booking.vehicle_id == vehicle_id,
                    Booking.start_date <= end_date,
                    Booking.end_date >= start_date,
                )
                .limit(1)
            )
            return result.scalars().first()

    async def create_booking(
        self, user_id: int, vehicle_id: int, start_date: date, end_date: date
    ) -> Booking:
        async with _translate_errors("create_booking"):
            booking = Booking(
                user_id=user_id,
                vehicle_id=vehicle_id,
                start_date=start_date,
                end_date=end_date,
            )
            self.session.add(booking)
            await self.session.flush()
            return booking

    async def list_vehicle_types(self, wheel_count: int) -> list[VehicleType]:
        async with _translate_errors("list_vehicle_types"):
            result = await self.session.execute(
                select(VehicleType).where(VehicleType.wheel_count == wheel_count)
            )
            return list(result.scalars().all())

    async def list_vehicles(self, type_id: int) -> list[Vehicle]:
        async with _translate_errors("list_vehicles"):
            result = await self.session.execute(
                select(Vehicle).where(Vehicle.type_id == type_id)
            )
            return list(result.scalars().all())
