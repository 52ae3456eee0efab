from fastapi import FastAPI
from pydantic import field_validator
from pydantic_settings import BaseSettings
from contextlib import asynccontextmanager
import logging

from routers.api import router as api_router
from schemas import AppHealthOK
from sensor_core.config_loader import config_loader
from sensor_core.models.sensor_enum import SensorSource
from sensor_core.service_manager import service_manager

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    app_name: str = "Motion Sensor Panel API"
    debug: bool = True
    # Where samples come from: emulation, serial or external (pushed over HTTP)
    # Config file value, overridden by the SENSOR_SOURCE environment variable
    sensor_source: SensorSource = config_loader.get_source()

    @field_validator("sensor_source", mode="before")
    @classmethod
    def normalize_source(cls, value):
        if isinstance(value, str):
            return value.strip().lower()
        return value


settings = Settings()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Start the sensor services for the lifetime of the application."""
    try:
        logger.info("Starting background services with %s source", settings.sensor_source.value)
        await service_manager.start_services(source=settings.sensor_source)
    except ValueError as e:
        if settings.sensor_source == SensorSource.SERIAL:
            logger.error("Failed to start serial feed: %s, falling back to emulation", e)
            await service_manager.start_services(source=SensorSource.EMULATION)
        else:
            logger.error("Failed to start services: %s", e)
            raise

    try:
        yield
    finally:
        logger.info("Stopping background services")
        service_manager.stop_services()


app = FastAPI(title=settings.app_name, debug=settings.debug, lifespan=lifespan)


@app.get("/", tags=["meta"])
async def read_root() -> dict[str, str]:
    return {"message": settings.app_name}


@app.get("/health", tags=["meta"], response_model=AppHealthOK)
async def healthcheck() -> AppHealthOK:
    return AppHealthOK(status="ok", app=settings.app_name)


# mount API router under /api
app.include_router(api_router, prefix="/api")
logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
