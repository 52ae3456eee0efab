from fastapi import APIRouter, HTTPException

from sensor_core.errors import OrientationUndefinedError, SensorUnavailableError
from sensor_core.processing.orientation_processor import orientation_processor

from schemas import OrientationResponse

router = APIRouter(prefix="/orientation", tags=["orientation"])


@router.get("", response_model=OrientationResponse, responses={
    409: {
        "description": "No valid orientation yet (missing or degenerate readings).",
        "content": {
            "application/json": {
                "example": {"detail": "Orientation is not available yet"}
            }
        }
    },
    503: {
        "description": "Accelerometer or magnetometer hardware is missing.",
        "content": {
            "application/json": {
                "example": {"detail": "Sensor MAGNETIC_FIELD is not available"}
            }
        }
    }
})
async def get_orientation() -> OrientationResponse:
    """
    Get the device orientation (degrees) computed from the latest accelerometer
    and magnetometer readings.

    - **azimuth**: heading from magnetic north, (-180, 180]
    - **pitch**: tilt about the lateral axis, (-180, 180]
    - **roll**: tilt about the longitudinal axis, [-90, 90]
    """
    try:
        result = orientation_processor.current()
    except SensorUnavailableError as e:
        raise HTTPException(status_code=503, detail=str(e))
    except OrientationUndefinedError as e:
        raise HTTPException(status_code=409, detail=str(e))
    return OrientationResponse(azimuth=result.azimuth, pitch=result.pitch, roll=result.roll)
