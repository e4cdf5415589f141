"""Client for the LOBO water-quality stations of the Indian River Lagoon."""

from lobo_irl.client import LoboClient, get_client
from lobo_irl.core.errors import (
    CatalogError,
    FetchError,
    LoboError,
    ParseError,
    UnknownSensorError,
)
from lobo_irl.models.record import MeasurementRecord
from lobo_irl.models.sensor import (
    Location,
    MeasurementDescriptor,
    MeasurementType,
    SensorDescriptor,
)

__all__ = [
    "CatalogError",
    "FetchError",
    "Location",
    "LoboClient",
    "LoboError",
    "MeasurementDescriptor",
    "MeasurementRecord",
    "MeasurementType",
    "ParseError",
    "SensorDescriptor",
    "UnknownSensorError",
    "get_client",
]
