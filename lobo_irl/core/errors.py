from __future__ import annotations


class LoboError(Exception):
    """Base class for errors raised by the LOBO client."""


class CatalogError(LoboError):
    pass


class FetchError(LoboError):
    """A sensor URL could not be fetched, or returned an unusable response."""

    def __init__(self, url: str, cause: BaseException | None = None) -> None:
        reason = str(cause) if cause is not None else "empty response"
        super().__init__(f"Failed to fetch {url}: {reason}")
        self.url = url
        self.cause = cause


class ParseError(LoboError, ValueError):
    """A value declared as numeric could not be converted."""

    def __init__(self, *, sensor: str, measurement: str, value: str) -> None:
        super().__init__(
            f"Sensor {sensor!r}: value {value!r} for {measurement!r} is not a number"
        )
        self.sensor = sensor
        self.measurement = measurement
        self.value = value


class UnknownSensorError(LoboError, KeyError):
    def __init__(self, key: str) -> None:
        super().__init__(key)
        self.key = key

    def __str__(self) -> str:
        return f"Unknown sensor {self.key!r}"
