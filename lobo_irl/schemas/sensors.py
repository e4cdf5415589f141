from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from lobo_irl.models.record import MeasurementRecord
from lobo_irl.models.sensor import MeasurementDescriptor, MeasurementType, SensorDescriptor


class LocationRead(BaseModel):
    lat: float
    lng: float


class SensorRead(BaseModel):
    key: str = Field(min_length=1)
    description: str
    location: LocationRead
    url: str

    @classmethod
    def from_descriptor(cls, sensor: SensorDescriptor) -> SensorRead:
        return cls(
            key=sensor.key,
            description=sensor.description,
            location=LocationRead(lat=sensor.location.lat, lng=sensor.location.lng),
            url=sensor.url,
        )


class MeasurementRead(BaseModel):
    key: str = Field(min_length=1)
    name: str
    type: MeasurementType
    unit: str
    medium: str

    @classmethod
    def from_descriptor(cls, measurement: MeasurementDescriptor) -> MeasurementRead:
        return cls(
            key=measurement.key,
            name=measurement.name,
            type=measurement.type,
            unit=measurement.unit,
            medium=measurement.medium,
        )


class SensorDataRead(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    sensor: str
    date_time: str | None = Field(default=None, alias="dateTime")
    data: dict[str, float | str] = Field(default_factory=dict)

    @classmethod
    def from_record(cls, record: MeasurementRecord) -> SensorDataRead:
        return cls(sensor=record.sensor, date_time=record.date_time, data=dict(record.data))
