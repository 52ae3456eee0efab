from fastapi import APIRouter

from routers import display, orientation, sensor

router = APIRouter()

# include sub-routers
router.include_router(sensor.router)
router.include_router(orientation.router)
router.include_router(display.router)
