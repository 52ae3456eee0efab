from fastapi import APIRouter, HTTPException

from sensor_core.config_loader import config_loader
from sensor_core.errors import SensorUnavailableError
from sensor_core.models.sensor_data import SensorSample
from sensor_core.models.sensor_enum import SensorKind
from sensor_core.services.sensor_manager import sensor_manager

from schemas import SampleInput, SampleResponse, SensorInfo, SensorList

VALID_SENSOR_VALUES = ", ".join([k.name for k in SensorKind])

router = APIRouter(prefix="/sensor", tags=["sensor"])

INVALID_KIND_RESPONSE = {
    "description": "Invalid sensor kind provided.",
    "content": {
        "application/json": {
            "example": {"detail": f"Invalid sensor kind: INVALID. Valid values are: {VALID_SENSOR_VALUES}"}
        }
    }
}

UNAVAILABLE_RESPONSE = {
    "description": "The device has no hardware for this sensor.",
    "content": {
        "application/json": {
            "example": {"detail": "Sensor PROXIMITY is not available"}
        }
    }
}


def parse_kind(kind: str) -> SensorKind:
    """Resolve a path parameter (name or alias, any case) or answer 400."""
    try:
        return SensorKind.from_name(kind)
    except ValueError:
        raise HTTPException(
            status_code=400,
            detail=f"Invalid sensor kind: {kind}. Valid values are: {VALID_SENSOR_VALUES}"
        )


@router.get("", response_model=SensorList)
async def list_sensors() -> SensorList:
    """
    List every sensor kind of the panel with its component count and whether
    the device has hardware for it.
    """
    infos = []
    for kind in SensorKind:
        cfg = config_loader.get_sensor_config(kind)
        infos.append(SensorInfo(
            kind=kind.name,
            display_name=cfg.displayName,
            components=kind.component_count(),
            available=sensor_manager.is_available(kind) if sensor_manager.running
            else config_loader.is_sensor_available(kind),
        ))
    return SensorList(list=infos)


@router.get("/{kind}/data", response_model=SampleResponse, responses={
    400: INVALID_KIND_RESPONSE,
    409: {
        "description": "Sensor services are not running, or no reading has been received from this sensor yet.",
        "content": {
            "application/json": {
                "example": {"detail": "No reading received yet from GYROSCOPE"}
            }
        }
    },
    503: UNAVAILABLE_RESPONSE,
})
async def get_sensor_data(kind: str) -> SampleResponse:
    """
    Get the latest sample of a sensor kind.
    """
    sensor_kind = parse_kind(kind)

    if not sensor_manager.running:
        raise HTTPException(status_code=409, detail="Sensor services are not running")

    try:
        sample = sensor_manager.get_latest(sensor_kind)
    except SensorUnavailableError as e:
        raise HTTPException(status_code=503, detail=str(e))

    if sample is None:
        raise HTTPException(
            status_code=409,
            detail=f"No reading received yet from {sensor_kind.name}"
        )
    return SampleResponse(kind=sample.kind.name, timestamp=sample.timestamp, values=list(sample.values))


@router.post("/{kind}/data", status_code=204, responses={
    400: {
        "description": "Invalid sensor kind or wrong number of values.",
        "content": {
            "application/json": {
                "example": {"detail": "ACCELEROMETER expects 3 components, got 2"}
            }
        }
    },
    409: {
        "description": "Sensor services are not running.",
        "content": {
            "application/json": {
                "example": {"detail": "Sensor services are not running"}
            }
        }
    },
    503: UNAVAILABLE_RESPONSE,
})
async def post_sensor_data(kind: str, sample_in: SampleInput) -> None:
    """
    Push a new reading for a sensor kind, as an external sensor feed would.
    Extra trailing values are ignored; missing values are rejected.
    """
    sensor_kind = parse_kind(kind)

    if not sensor_manager.running:
        raise HTTPException(status_code=409, detail="Sensor services are not running")

    if not sensor_manager.is_available(sensor_kind):
        raise HTTPException(status_code=503, detail=str(SensorUnavailableError(sensor_kind)))

    try:
        sample = SensorSample.from_values(sensor_kind, sample_in.values, sample_in.timestamp)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    sensor_manager.submit(sample)
