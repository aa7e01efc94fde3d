from datetime import date

from pydantic import BaseModel
from pydantic.alias_generators import to_camel


class BookingCreate(BaseModel):
    """Raw booking form payload. Presence and format are checked by the service."""

    first_name: str | None = None
    last_name: str | None = None
    vehicle_id: int | str | None = None
    start_date: str | None = None
    end_date: str | None = None

    model_config = {"alias_generator": to_camel, "populate_by_name": True}


class BookingResponse(BaseModel):
    id: int
    user_id: int
    vehicle_id: int
    start_date: date
    end_date: date

    model_config = {"from_attributes": True, "alias_generator": to_camel, "populate_by_name": True}
