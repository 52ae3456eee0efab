"""
LatestSampleStore keeps the most recent sample for each sensor kind.
Entries are overwritten on every reading, never merged.
"""
from typing import Dict, Optional

from sensor_core.models.sensor_data import SensorSample
from sensor_core.models.sensor_enum import SensorKind


class LatestSampleStore:
    """
    Mapping from sensor kind to its latest sample.
    - At most one entry per kind
    - Absence means the kind has not produced a reading yet
    """

    __slots__ = ('_samples',)

    def __init__(self):
        self._samples: Dict[SensorKind, SensorSample] = {}

    def put(self, sample: SensorSample) -> None:
        """Replace the entry for the sample's kind."""
        self._samples[sample.kind] = sample

    def get(self, kind: SensorKind) -> Optional[SensorSample]:
        return self._samples.get(kind)

    def snapshot(self) -> Dict[SensorKind, SensorSample]:
        """Get a copy of all entries. Samples are immutable so a shallow copy is enough."""
        return dict(self._samples)

    def clear(self) -> None:
        self._samples.clear()

    def __len__(self) -> int:
        return len(self._samples)

    def __contains__(self, kind: SensorKind) -> bool:
        return kind in self._samples
