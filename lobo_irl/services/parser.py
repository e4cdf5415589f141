"""Turns the text a LOBO station publishes into a `MeasurementRecord`.

Stations answer with loosely structured HTML, one reading per line::

    <p>2016-07-22 09:00:00 EST</p>
    pH: <b>7.947</b> <br/>
    Salinity: <b>24.06</b> <br/>

A `<p>` line holding a colon is the observation time. Any other line that
starts with a known measurement label followed by ": " carries the value
of that measurement inside the first `<b>...</b>` pair.
"""

from __future__ import annotations

import math
import re
from typing import Mapping

from lobo_irl.core.errors import ParseError
from lobo_irl.models.record import MeasurementRecord, MeasurementValue
from lobo_irl.models.sensor import MeasurementDescriptor, MeasurementType

# Plain decimal or exponent notation; no nan, inf or digit separators.
_NUMBER = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?")


def _is_timestamp_line(line: str) -> bool:
    return line.startswith("<p>") and line.find(":") > 0


def _extract_timestamp(line: str) -> str:
    return line.replace("</p>", "").replace("<p>", "").strip()


def _match_measurement(
    line: str, measurements: Mapping[str, MeasurementDescriptor]
) -> str | None:
    # Catalog order decides between labels that prefix one another.
    for key, measurement in measurements.items():
        if line.startswith(f"{measurement.name}: "):
            return key
    return None


def _extract_value(line: str) -> str:
    bold = line.replace("<b>", "", 1).split("</b>", 1)[0]
    _, _, value = bold.partition(":")
    return value.strip()


def _coerce(
    sensor_key: str, measurement: MeasurementDescriptor, raw: str
) -> MeasurementValue:
    if measurement.type is not MeasurementType.float:
        return raw
    value = float(raw) if _NUMBER.fullmatch(raw) else math.nan
    if not math.isfinite(value):
        raise ParseError(sensor=sensor_key, measurement=measurement.key, value=raw)
    return value


def parse_sensor_text(
    sensor_key: str,
    raw_text: str,
    measurements: Mapping[str, MeasurementDescriptor],
) -> MeasurementRecord:
    date_time: str | None = None
    matched: list[tuple[str, str]] = []

    for raw_line in raw_text.split("\n"):
        stripped = raw_line.strip()
        if _is_timestamp_line(stripped):
            date_time = _extract_timestamp(stripped)
            continue
        line = raw_line.rstrip("\r")
        key = _match_measurement(line, measurements)
        if key is not None:
            matched.append((line, key))

    data: dict[str, MeasurementValue] = {}
    for line, key in matched:
        data[key] = _coerce(sensor_key, measurements[key], _extract_value(line))

    return MeasurementRecord(sensor=sensor_key, date_time=date_time or None, data=data)
