from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class MeasurementType(str, Enum):
    float = "float"
    string = "string"


@dataclass(frozen=True)
class Location:
    lat: float
    lng: float


@dataclass(frozen=True)
class SensorDescriptor:
    key: str
    description: str
    location: Location
    url: str

    def within(self, *, min_lat: float, max_lat: float, min_lng: float, max_lng: float) -> bool:
        return (
            min_lat <= self.location.lat <= max_lat
            and min_lng <= self.location.lng <= max_lng
        )


@dataclass(frozen=True)
class MeasurementDescriptor:
    key: str
    name: str
    type: MeasurementType
    unit: str = ""
    medium: str = ""
