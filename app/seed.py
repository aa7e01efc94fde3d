import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.user import User
from app.models.vehicle import Vehicle
from app.models.vehicle_type import VehicleType

logger = logging.getLogger(__name__)

SEED_VEHICLE_TYPES = [
    {"name": "SUV", "wheel_count": 4},
    {"name": "Sedan", "wheel_count": 4},
    {"name": "Hatchback", "wheel_count": 4},
    {"name": "Cruiser", "wheel_count": 2},
]

# Keyed by vehicle type name.
SEED_VEHICLES = [
    {"model_name": "Hyundai Creta", "type": "SUV"},
    {"model_name": "Toyota Fortuner", "type": "SUV"},
    {"model_name": "Honda City", "type": "Sedan"},
    {"model_name": "Maruti Swift", "type": "Hatchback"},
    {"model_name": "Royal Enfield Classic 350", "type": "Cruiser"},
]

SEED_USER = {"first_name": "Alister", "last_name": "Hosamani"}


async def seed_data(session: AsyncSession) -> None:
    result = await session.execute(select(VehicleType).limit(1))
    if result.scalars().first() is not None:
        return

    types_by_name = {}
    for t in SEED_VEHICLE_TYPES:
        vehicle_type = VehicleType(**t)
        session.add(vehicle_type)
        types_by_name[t["name"]] = vehicle_type
    await session.flush()

    for v in SEED_VEHICLES:
        session.add(Vehicle(model_name=v["model_name"], type_id=types_by_name[v["type"]].id))

    session.add(User(**SEED_USER))

    await session.commit()
    logger.info("Seeded %d vehicle types and %d vehicles", len(SEED_VEHICLE_TYPES), len(SEED_VEHICLES))
