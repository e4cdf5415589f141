"""Static sensor and measurement tables.

The catalog is loaded once from YAML and never mutated afterwards. Mapping
order follows the document: measurement order decides which name wins when
one display label is a prefix of another, so it must not be re-sorted.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Mapping

import yaml
from pydantic import ValidationError

from lobo_irl.core.errors import CatalogError
from lobo_irl.models.sensor import Location, MeasurementDescriptor, SensorDescriptor
from lobo_irl.schemas.catalog import CatalogDocument


class StaticCatalog:
    def __init__(
        self,
        *,
        sensors: Mapping[str, SensorDescriptor],
        measurements: Mapping[str, MeasurementDescriptor],
    ) -> None:
        self._sensors = dict(sensors)
        self._measurements = dict(measurements)

    @classmethod
    def from_mapping(cls, raw: Any) -> StaticCatalog:
        if not isinstance(raw, Mapping):
            raise CatalogError("Catalog document must be a mapping")
        try:
            doc = CatalogDocument.model_validate(raw)
        except ValidationError as e:
            raise CatalogError(f"Invalid catalog document: {e}") from e

        sensors = {
            key: SensorDescriptor(
                key=key,
                description=cfg.description,
                location=Location(lat=cfg.location.lat, lng=cfg.location.lng),
                url=cfg.url,
            )
            for key, cfg in doc.sensors.items()
        }
        measurements = {
            key: MeasurementDescriptor(
                key=key,
                name=cfg.name,
                type=cfg.type,
                unit=cfg.unit,
                medium=cfg.medium,
            )
            for key, cfg in doc.measurements.items()
        }
        return cls(sensors=sensors, measurements=measurements)

    @classmethod
    def from_yaml(cls, path: Path) -> StaticCatalog:
        try:
            with path.open("r", encoding="utf-8") as handle:
                raw = yaml.safe_load(handle)
        except (OSError, yaml.YAMLError) as e:
            raise CatalogError(f"Could not read catalog {path}: {e}") from e
        return cls.from_mapping(raw)

    @property
    def measurements(self) -> Mapping[str, MeasurementDescriptor]:
        return self._measurements

    def sensor_keys(self) -> list[str]:
        return list(self._sensors)

    def sensors_in_area(
        self, *, min_lat: float, max_lat: float, min_lng: float, max_lng: float
    ) -> list[str]:
        return [
            key
            for key, sensor in self._sensors.items()
            if sensor.within(
                min_lat=min_lat, max_lat=max_lat, min_lng=min_lng, max_lng=max_lng
            )
        ]

    def get_sensor(self, key: str) -> SensorDescriptor | None:
        return self._sensors.get(key)

    def measurement_keys(self) -> list[str]:
        return list(self._measurements)

    def get_measurement(self, key: str) -> MeasurementDescriptor | None:
        return self._measurements.get(key)
