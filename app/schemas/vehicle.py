from pydantic import BaseModel
from pydantic.alias_generators import to_camel


class VehicleTypeResponse(BaseModel):
    id: int
    name: str
    wheel_count: int

    model_config = {"from_attributes": True, "alias_generator": to_camel, "populate_by_name": True}


class VehicleResponse(BaseModel):
    id: int
    model_name: str
    type_id: int

    model_config = {"from_attributes": True, "alias_generator": to_camel, "populate_by_name": True}
