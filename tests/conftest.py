from __future__ import annotations

import asyncio
from pathlib import Path

import pytest
import yaml
from fastapi.testclient import TestClient

from lobo_irl.client import LoboClient
from lobo_irl.core.config import Settings
from lobo_irl.factory import create_app
from lobo_irl.repositories.catalog import StaticCatalog
from tests.fakes import SAMPLE_RESPONSE, TEST_CATALOG, FakeSensorTransport


@pytest.fixture()
def catalog() -> StaticCatalog:
    return StaticCatalog.from_mapping(TEST_CATALOG)


@pytest.fixture()
def transport() -> FakeSensorTransport:
    return FakeSensorTransport(
        {
            "http://lobo.test/north": SAMPLE_RESPONSE,
            "http://lobo.test/south": SAMPLE_RESPONSE.replace("7.947", "8.011"),
        }
    )


@pytest.fixture()
def lobo(catalog: StaticCatalog, transport: FakeSensorTransport) -> LoboClient:
    client = LoboClient(catalog=catalog, transport=transport)
    yield client
    asyncio.run(client.aclose())


@pytest.fixture()
def catalog_file(tmp_path: Path) -> Path:
    path = tmp_path / "configuration.yaml"
    path.write_text(yaml.safe_dump(TEST_CATALOG, sort_keys=False), encoding="utf-8")
    return path


@pytest.fixture()
def settings(catalog_file: Path) -> Settings:
    return Settings(
        _env_file=None,
        env="test",
        debug=True,
        docs_enabled=False,
        log_level="WARNING",
        catalog_path=catalog_file,
    )


@pytest.fixture()
def api(settings: Settings, transport: FakeSensorTransport) -> TestClient:
    app = create_app(settings, transport=transport)
    with TestClient(app) as client:
        yield client
