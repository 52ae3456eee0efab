from fastapi import APIRouter

from sensor_core.display.panel import display_panel

from schemas import DisplayResponse

router = APIRouter(prefix="/display", tags=["display"])


@router.get("", response_model=DisplayResponse)
async def get_display() -> DisplayResponse:
    """
    Get the text of every label on the sensor screen, keyed by label
    (mag_x, acc_y, rotv_s, prox, azimuth, ...).
    Sensors without hardware show the "unavailable" placeholder and sensors
    without a reading yet show the "no data" placeholder.
    """
    return DisplayResponse(labels=display_panel.labels())
