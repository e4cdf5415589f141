"""Public entry point for querying LOBO water-quality stations."""

from __future__ import annotations

from typing import Callable, Optional

import httpx

from lobo_irl.clients.fetch import FetchCache, SensorFetcher
from lobo_irl.core.config import Settings, load_settings
from lobo_irl.models.record import MeasurementRecord
from lobo_irl.models.sensor import MeasurementDescriptor, SensorDescriptor
from lobo_irl.repositories.catalog import StaticCatalog
from lobo_irl.services.sensor_data import SensorDataService

SensorData = MeasurementRecord | list[MeasurementRecord]
SensorDataCallback = Callable[[Optional[BaseException], Optional[SensorData]], None]


class LoboClient:
    """Catalog lookups plus cached, concurrent sensor reads.

    One client owns one HTTP connection pool and one response cache; create it
    once and reuse it for the life of the process.
    """

    def __init__(
        self,
        *,
        catalog: StaticCatalog,
        cache: FetchCache | None = None,
        timeout_seconds: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._catalog = catalog
        self._fetcher = SensorFetcher(
            cache=cache, timeout_seconds=timeout_seconds, transport=transport
        )
        self._service = SensorDataService(catalog=catalog, fetcher=self._fetcher)

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> LoboClient:
        return cls(
            catalog=StaticCatalog.from_yaml(settings.catalog_path),
            timeout_seconds=settings.http_timeout_seconds,
            transport=transport,
        )

    @property
    def cache(self) -> FetchCache:
        return self._fetcher.cache

    async def aclose(self) -> None:
        await self._fetcher.aclose()

    async def __aenter__(self) -> LoboClient:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    def get_sensors(
        self,
        min_lat: float | None = None,
        max_lat: float | None = None,
        min_lng: float | None = None,
        max_lng: float | None = None,
    ) -> list[str]:
        """Sensor keys, limited to an inclusive lat/lng box when all four bounds are set.

        A bound of ``0`` counts as unset, so boxes touching the equator or the
        prime meridian fall back to the full list.
        """
        if min_lat and max_lat and min_lng and max_lng:
            return self._catalog.sensors_in_area(
                min_lat=min_lat, max_lat=max_lat, min_lng=min_lng, max_lng=max_lng
            )
        return self._catalog.sensor_keys()

    def get_sensor(self, key: str) -> SensorDescriptor | None:
        return self._catalog.get_sensor(key)

    def get_measurements(self) -> list[str]:
        return self._catalog.measurement_keys()

    def get_measurement(self, key: str) -> MeasurementDescriptor | None:
        return self._catalog.get_measurement(key)

    async def get_sensor_data(
        self,
        sensor: str | None = None,
        *,
        allow_cache: bool = True,
        callback: SensorDataCallback | None = None,
    ) -> SensorData:
        """Latest readings for one sensor, or for every sensor in catalog order.

        ``callback``, when given, receives ``(error, result)`` once the read
        settles; the coroutine still returns the result or raises the error.
        """
        try:
            if sensor:
                result: SensorData = await self._service.read_sensor(
                    sensor, allow_cache=allow_cache
                )
            else:
                result = await self._service.read_all(allow_cache=allow_cache)
        except Exception as e:
            if callback is not None:
                callback(e, None)
            raise
        if callback is not None:
            callback(None, result)
        return result


def get_client(settings: Settings | None = None) -> LoboClient:
    return LoboClient.from_settings(settings or load_settings())
