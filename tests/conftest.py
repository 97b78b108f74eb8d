from __future__ import annotations

import pytest

from requests_mock import Mocker

from metaweather import WeatherClient

from payloads import BASE_URL


@pytest.fixture
def requests_mock():
    with Mocker() as mock:
        yield mock


@pytest.fixture
def client():
    with WeatherClient(base_url=BASE_URL, request_timeout=5.0) as weather_client:
        yield weather_client


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    monkeypatch.delenv("METAWEATHER_BASE_URL", raising=False)
    monkeypatch.delenv("METAWEATHER_TIMEOUT", raising=False)
