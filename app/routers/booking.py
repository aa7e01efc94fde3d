from fastapi import APIRouter, Body, Depends

from app.dependencies import get_booking_service
from app.schemas.booking import BookingCreate, BookingResponse
from app.services.booking_service import BookingService

router = APIRouter(prefix="/booking", tags=["booking"])


@router.post("/create-booking", status_code=201)
async def create_booking(
    payload: BookingCreate | None = Body(default=None),
    service: BookingService = Depends(get_booking_service),
):
    # An empty body is an empty form.
    booking = await service.create_booking(payload or BookingCreate())
    return {"booking": BookingResponse.model_validate(booking).model_dump(mode="json", by_alias=True)}
