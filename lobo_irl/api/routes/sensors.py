from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query, status

from lobo_irl.api.deps import get_lobo_client, to_http_error
from lobo_irl.client import LoboClient
from lobo_irl.core.errors import LoboError
from lobo_irl.schemas.sensors import SensorDataRead, SensorRead

router = APIRouter(prefix="/sensors")

Client = Annotated[LoboClient, Depends(get_lobo_client)]


@router.get("", response_model=list[str])
def list_sensors(
    client: Client,
    min_lat: Annotated[float | None, Query(ge=-90, le=90)] = None,
    max_lat: Annotated[float | None, Query(ge=-90, le=90)] = None,
    min_lng: Annotated[float | None, Query(ge=-180, le=180)] = None,
    max_lng: Annotated[float | None, Query(ge=-180, le=180)] = None,
) -> list[str]:
    return client.get_sensors(min_lat, max_lat, min_lng, max_lng)


@router.get("/data", response_model=list[SensorDataRead], response_model_by_alias=True)
async def all_sensor_data(client: Client, no_cache: bool = False) -> list[SensorDataRead]:
    try:
        records = await client.get_sensor_data(allow_cache=not no_cache)
    except LoboError as e:
        raise to_http_error(e) from e
    return [SensorDataRead.from_record(r) for r in records]


@router.get("/{key}", response_model=SensorRead)
def get_sensor(key: str, client: Client) -> SensorRead:
    sensor = client.get_sensor(key)
    if sensor is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Sensor not found")
    return SensorRead.from_descriptor(sensor)


@router.get("/{key}/data", response_model=SensorDataRead, response_model_by_alias=True)
async def sensor_data(key: str, client: Client, no_cache: bool = False) -> SensorDataRead:
    try:
        record = await client.get_sensor_data(key, allow_cache=not no_cache)
    except LoboError as e:
        raise to_http_error(e) from e
    return SensorDataRead.from_record(record)
