from fastapi import APIRouter, Depends, Query

from app.dependencies import get_catalog_service
from app.schemas.vehicle import VehicleTypeResponse
from app.services.catalog_service import CatalogService

router = APIRouter(prefix="/vehicletype", tags=["vehicle types"])


@router.get("/vehicle-type")
async def get_vehicle_types(
    wheel_count: str | None = Query(default=None, alias="wheelCount"),
    service: CatalogService = Depends(get_catalog_service),
):
    types = await service.list_vehicle_types(wheel_count)
    return [VehicleTypeResponse.model_validate(t).model_dump(by_alias=True) for t in types]
