from app.models.vehicle import Vehicle
from app.models.vehicle_type import VehicleType
from app.store import BookingStore
from app.utils.exceptions import ValidationError
from app.utils.identifiers import parse_id

WHEEL_COUNTS = ("2", "4")


class CatalogService:
    """Read-only listings behind the wizard's dropdowns."""

    def __init__(self, store: BookingStore):
        self.store = store

    async def list_vehicle_types(self, wheel_count) -> list[VehicleType]:
        if wheel_count is None or str(wheel_count) not in WHEEL_COUNTS:
            raise ValidationError("wheelCount must be 2 or 4")
        return await self.store.list_vehicle_types(int(wheel_count))

    async def list_vehicles(self, type_id) -> list[Vehicle]:
        try:
            parsed = parse_id(type_id)
        except ValueError:
            raise ValidationError("Invalid typeId")
        return await self.store.list_vehicles(parsed)
