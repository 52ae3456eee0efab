from dataclasses import dataclass, field
from typing import Dict

from sensor_core.models.sensor_enum import SensorDelay, SensorKind, SensorSource


@dataclass
class configSensorData:
    kind: SensorKind
    description : str = "No description"
    displayName : str = "Unnamed Sensor"
    available: bool = True

@dataclass
class serialConfigData:
    port : str = ""
    baud : int = 115200

@dataclass
class placeholderConfigData:
    unavailable : str = "Sensor not available"
    noData : str = "--"

@dataclass
class configData:
    sensors : Dict[SensorKind, configSensorData]
    source : SensorSource = SensorSource.EMULATION
    delay : SensorDelay = SensorDelay.NORMAL
    serial : serialConfigData = field(default_factory=serialConfigData)
    orientationRefresh : str = "accelerometer"
    placeholders : placeholderConfigData = field(default_factory=placeholderConfigData)
