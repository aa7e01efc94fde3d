import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.config import settings
from app.database import create_tables, async_session
from app.seed import seed_data
from app.routers.booking import router as booking_router
from app.routers.vehicle_types import router as vehicle_types_router
from app.routers.vehicles import router as vehicles_router
from app.utils.exceptions import register_exception_handlers
from app.utils.response import success_response

SERVICE_NAME = "vehicle-booking-api"
SERVICE_VERSION = "0.1.0"


@asynccontextmanager
async def lifespan(app: FastAPI):
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    await create_tables()
    if settings.seed_on_startup:
        async with async_session() as session:
            await seed_data(session)
    yield


app = FastAPI(
    title="Vehicle Booking API",
    description="Backend for the vehicle rental booking wizard",
    version=SERVICE_VERSION,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE", "PATCH"],
    allow_headers=["Content-Type", "Authorization"],
)

register_exception_handlers(app)

app.include_router(booking_router, prefix="/api")
app.include_router(vehicle_types_router, prefix="/api")
app.include_router(vehicles_router, prefix="/api")


@app.get("/health")
async def health_check():
    return success_response(data={"service": SERVICE_NAME, "version": SERVICE_VERSION})
