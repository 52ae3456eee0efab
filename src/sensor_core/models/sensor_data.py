"""
Sensor sample model.
"""

import time
from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

from sensor_core.models.sensor_enum import SensorKind


@dataclass(frozen=True)
class SensorSample:
    """
    Data class representing a single reading of one sensor kind.
    Immutable: a new reading replaces the previous sample wholesale.
    """
    timestamp: float
    kind: SensorKind
    values: Tuple[float, ...]

    def __post_init__(self):
        expected = self.kind.component_count()
        if len(self.values) != expected:
            raise ValueError(
                f"{self.kind.name} expects {expected} components, got {len(self.values)}"
            )

    @classmethod
    def from_values(
        cls,
        kind: SensorKind,
        values: Sequence[float],
        timestamp: Optional[float] = None,
    ) -> "SensorSample":
        """
        Build a sample from a raw value sequence.
        Extra trailing values (e.g. a heading accuracy term) are dropped,
        missing values raise ValueError.
        """
        expected = kind.component_count()
        if len(values) < expected:
            raise ValueError(
                f"{kind.name} expects {expected} components, got {len(values)}"
            )
        return cls(
            timestamp=time.time() if timestamp is None else float(timestamp),
            kind=kind,
            values=tuple(float(v) for v in values[:expected]),
        )
