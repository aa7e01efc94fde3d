"""Create bookings without ever double-booking a vehicle."""
import logging
from dataclasses import dataclass
from datetime import date

from app.models.booking import Booking
from app.schemas.booking import BookingCreate
from app.store import BookingStore
from app.utils.dates import parse_date
from app.utils.exceptions import ConflictError, ValidationError
from app.utils.identifiers import parse_id

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BookingRequest:
    first_name: str
    last_name: str
    vehicle_id: int
    start_date: date
    end_date: date


def _is_blank(value) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    return False


def validate_booking_request(payload: BookingCreate) -> BookingRequest:
    fields = (
        payload.first_name,
        payload.last_name,
        payload.vehicle_id,
        payload.start_date,
        payload.end_date,
    )
    if any(_is_blank(value) for value in fields):
        raise ValidationError("Missing required fields")

    try:
        vehicle_id = parse_id(payload.vehicle_id)
    except ValueError:
        raise ValidationError("Invalid vehicleId")

    try:
        start_date = parse_date(payload.start_date)
    except ValueError:
        raise ValidationError("Invalid startDate")
    try:
        end_date = parse_date(payload.end_date)
    except ValueError:
        raise ValidationError("Invalid endDate")

    if start_date > end_date:
        raise ValidationError("End date must be same or after start date")

    return BookingRequest(
        first_name=payload.first_name.strip(),
        last_name=payload.last_name.strip(),
        vehicle_id=vehicle_id,
        start_date=start_date,
        end_date=end_date,
    )


class BookingService:
    def __init__(self, store: BookingStore):
        self.store = store

    async def create_booking(self, payload: BookingCreate) -> Booking:
        """Validate, resolve the renter, check for overlaps and insert.

        Lock, check and insert share one transaction, so a rejected request
        leaves no rows behind (not even a newly created renter).
        """
        request = validate_booking_request(payload)

        async with self.store.transaction():
            if not await self.store.lock_vehicle(request.vehicle_id):
                raise ValidationError("Vehicle not found")

            user = await self.store.find_user(request.first_name, request.last_name)
            if user is None:
                user = await self.store.create_user(request.first_name, request.last_name)

            existing = await self.store.find_overlapping_booking(
                request.vehicle_id, request.start_date, request.end_date
            )
            if existing is not None:
                logger.info(
                    "Rejected booking of vehicle %s for %s..%s: overlaps booking %s",
                    request.vehicle_id, request.start_date, request.end_date, existing.id,
                )
                raise ConflictError()

            booking = await self.store.create_booking(
                user.id, request.vehicle_id, request.start_date, request.end_date
            )

        logger.info(
            "Created booking %s of vehicle %s for user %s (%s..%s)",
            booking.id, booking.vehicle_id, booking.user_id, booking.start_date, booking.end_date,
        )
        return booking
