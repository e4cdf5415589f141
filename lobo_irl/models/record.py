from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping

MeasurementValue = float | str


@dataclass(frozen=True)
class MeasurementRecord:
    sensor: str
    date_time: str | None
    data: Mapping[str, MeasurementValue] = field(default_factory=dict)

    def __post_init__(self) -> None:
        # Read-only view over a private copy of the readings.
        object.__setattr__(self, "data", MappingProxyType(dict(self.data)))

    def as_dict(self) -> dict[str, Any]:
        return {
            "sensor": self.sensor,
            "dateTime": self.date_time,
            "data": dict(self.data),
        }
