from __future__ import annotations

from fastapi import HTTPException, Request, status

from lobo_irl.client import LoboClient
from lobo_irl.core.errors import FetchError, LoboError, ParseError, UnknownSensorError


def get_lobo_client(request: Request) -> LoboClient:
    return request.app.state.lobo_client


def to_http_error(e: LoboError) -> HTTPException:
    if isinstance(e, UnknownSensorError):
        return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    if isinstance(e, FetchError):
        return HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail="Sensor source unavailable",
        )
    if isinstance(e, ParseError):
        return HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail="Sensor response could not be parsed",
        )
    return HTTPException(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        detail="Sensor data unavailable",
    )
