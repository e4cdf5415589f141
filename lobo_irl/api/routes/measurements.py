from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status

from lobo_irl.api.deps import get_lobo_client
from lobo_irl.client import LoboClient
from lobo_irl.schemas.sensors import MeasurementRead

router = APIRouter(prefix="/measurements")


@router.get("", response_model=list[str])
def list_measurements(client: Annotated[LoboClient, Depends(get_lobo_client)]) -> list[str]:
    return client.get_measurements()


@router.get("/{key}", response_model=MeasurementRead)
def get_measurement(
    key: str, client: Annotated[LoboClient, Depends(get_lobo_client)]
) -> MeasurementRead:
    measurement = client.get_measurement(key)
    if measurement is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Measurement not found"
        )
    return MeasurementRead.from_descriptor(measurement)
