from fastapi import APIRouter

from lobo_irl.api.routes import measurements, sensors

api_router = APIRouter(prefix="/api/v1")
api_router.include_router(sensors.router, tags=["sensors"])
api_router.include_router(measurements.router, tags=["measurements"])
