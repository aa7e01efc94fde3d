from app.models.vehicle_type import VehicleType
from app.models.vehicle import Vehicle
from app.models.user import User
from app.models.booking import Booking

__all__ = ["VehicleType", "Vehicle", "User", "Booking"]
