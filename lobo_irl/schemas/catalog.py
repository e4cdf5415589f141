from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from lobo_irl.models.sensor import MeasurementType


class LocationConfig(BaseModel):
    lat: float = Field(ge=-90, le=90)
    lng: float = Field(ge=-180, le=180)


class SensorConfig(BaseModel):
    model_config = ConfigDict(extra="ignore")

    description: str = ""
    location: LocationConfig
    url: str = Field(min_length=1)


class MeasurementConfig(BaseModel):
    model_config = ConfigDict(extra="ignore")

    name: str = Field(min_length=1)
    type: MeasurementType
    unit: str = ""
    medium: str = ""


class CatalogDocument(BaseModel):
    sensors: dict[str, SensorConfig] = Field(default_factory=dict)
    measurements: dict[str, MeasurementConfig] = Field(default_factory=dict)
