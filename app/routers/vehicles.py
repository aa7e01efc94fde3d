from fastapi import APIRouter, Depends

from app.dependencies import get_catalog_service
from app.schemas.vehicle import VehicleResponse
from app.services.catalog_service import CatalogService

router = APIRouter(prefix="/vehicle", tags=["vehicles"])


@router.get("/{type_id}")
async def get_vehicles(type_id: str, service: CatalogService = Depends(get_catalog_service)):
    vehicles = await service.list_vehicles(type_id)
    return [VehicleResponse.model_validate(v).model_dump(by_alias=True) for v in vehicles]
