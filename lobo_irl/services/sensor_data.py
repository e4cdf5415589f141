from __future__ import annotations

import asyncio
import logging

from lobo_irl.clients.fetch import SensorFetcher
from lobo_irl.core.errors import UnknownSensorError
from lobo_irl.models.record import MeasurementRecord
from lobo_irl.repositories.catalog import StaticCatalog
from lobo_irl.services.parser import parse_sensor_text

logger = logging.getLogger(__name__)


class SensorDataService:
    def __init__(self, *, catalog: StaticCatalog, fetcher: SensorFetcher) -> None:
        self._catalog = catalog
        self._fetcher = fetcher

    async def read_sensor(self, key: str, *, allow_cache: bool = True) -> MeasurementRecord:
        sensor = self._catalog.get_sensor(key)
        if sensor is None:
            raise UnknownSensorError(key)

        text = await self._fetcher.fetch(sensor.url, allow_cache=allow_cache)
        record = parse_sensor_text(key, text, self._catalog.measurements)
        logger.debug(
            "Parsed sensor response",
            extra={"sensor": key, "count": len(record.data)},
        )
        return record

    async def read_all(self, *, allow_cache: bool = True) -> list[MeasurementRecord]:
        # gather keeps input order and propagates the first failure.
        keys = self._catalog.sensor_keys()
        records = await asyncio.gather(
            *(self.read_sensor(key, allow_cache=allow_cache) for key in keys)
        )
        return list(records)
