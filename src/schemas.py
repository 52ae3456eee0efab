from typing import Dict, List, Optional
from pydantic import BaseModel


class AppHealthOK(BaseModel):
    status: str
    app: str


class SensorInfo(BaseModel):
    kind: str
    display_name: str
    components: int
    available: bool


class SensorList(BaseModel):
    list: List[SensorInfo]


class SampleResponse(BaseModel):
    kind: str
    timestamp: float
    values: List[float]


class SampleInput(BaseModel):
    values: List[float]
    timestamp: Optional[float] = None


class OrientationResponse(BaseModel):
    azimuth: float
    pitch: float
    roll: float


class DisplayResponse(BaseModel):
    labels: Dict[str, str]
