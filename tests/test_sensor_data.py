from __future__ import annotations

import asyncio

import pytest

from lobo_irl.client import LoboClient
from lobo_irl.core.errors import FetchError, ParseError, UnknownSensorError
from lobo_irl.models.record import MeasurementRecord
from tests.fakes import FakeSensorTransport


def test_single_sensor_returns_one_record(lobo: LoboClient) -> None:
    record = asyncio.run(lobo.get_sensor_data("LAGOON-N"))

    assert isinstance(record, MeasurementRecord)
    assert record.sensor == "LAGOON-N"
    assert record.date_time == "2016-07-22 09:00:00 EST"
    assert record.data["pH"] == 7.947


def test_all_sensors_in_catalog_order(lobo: LoboClient) -> None:
    records = asyncio.run(lobo.get_sensor_data())

    assert [r.sensor for r in records] == lobo.get_sensors()
    assert [r.data["pH"] for r in records] == [7.947, 8.011]


def test_repeated_reads_use_the_cache(lobo: LoboClient, transport: FakeSensorTransport) -> None:
    async def _run() -> None:
        await lobo.get_sensor_data()
        await lobo.get_sensor_data("LAGOON-N")

    asyncio.run(_run())
    assert transport.total_calls == 2
    assert len(lobo.cache) == 2


def test_no_cache_refetches(lobo: LoboClient, transport: FakeSensorTransport) -> None:
    async def _run() -> None:
        await lobo.get_sensor_data("LAGOON-N")
        await lobo.get_sensor_data("LAGOON-N", allow_cache=False)

    asyncio.run(_run())
    assert transport.calls["http://lobo.test/north"] == 2


def test_one_failing_sensor_fails_the_whole_batch(
    lobo: LoboClient, transport: FakeSensorTransport
) -> None:
    transport.failing.add("http://lobo.test/south")

    with pytest.raises(FetchError) as excinfo:
        asyncio.run(lobo.get_sensor_data())

    assert excinfo.value.url == "http://lobo.test/south"


def test_bad_value_surfaces_as_parse_error(
    lobo: LoboClient, transport: FakeSensorTransport
) -> None:
    transport.bodies["http://lobo.test/north"] = "pH: <b>--</b> <br/>\n"

    with pytest.raises(ParseError):
        asyncio.run(lobo.get_sensor_data("LAGOON-N"))


def test_unknown_sensor_is_rejected(lobo: LoboClient, transport: FakeSensorTransport) -> None:
    with pytest.raises(UnknownSensorError):
        asyncio.run(lobo.get_sensor_data("NOT A SENSOR"))
    assert transport.total_calls == 0


def test_callback_receives_result(lobo: LoboClient) -> None:
    calls = []

    result = asyncio.run(
        lobo.get_sensor_data("LAGOON-S", callback=lambda err, res: calls.append((err, res)))
    )

    assert calls == [(None, result)]


def test_callback_receives_error(lobo: LoboClient, transport: FakeSensorTransport) -> None:
    transport.failing.add("http://lobo.test/north")
    calls = []

    with pytest.raises(FetchError) as excinfo:
        asyncio.run(
            lobo.get_sensor_data(callback=lambda err, res: calls.append((err, res)))
        )

    assert calls == [(excinfo.value, None)]
