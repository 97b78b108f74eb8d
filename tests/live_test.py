"""Checks against the public service; run with METAWEATHER_LIVE=1."""
from __future__ import annotations

import os
from datetime import date

import pytest

from metaweather import WeatherClient

pytestmark = pytest.mark.skipif(
    os.environ.get("METAWEATHER_LIVE", "0") != "1",
    reason="set METAWEATHER_LIVE=1 to query the live service",
)

SAMPLE_PLACES = {"London": "44418", "New York": "2459115", "Amsterdam": "727232"}


@pytest.fixture
def live_client():
    with WeatherClient(request_timeout=15.0) as client:
        yield client


@pytest.mark.parametrize("query", ["Amsterdam", "A"])
def test_search_by_name(live_client, query):
    locations = live_client.search_by_name(query)

    assert locations
    assert all(location.title for location in locations)


def test_search_by_name_without_match(live_client):
    assert live_client.search_by_name("A" * 48) == []


def test_search_by_coordinates(live_client):
    locations = live_client.search_by_coordinates("51.453732", "-2.591560")

    assert locations
    assert all(location.title for location in locations)


@pytest.mark.parametrize("title, woeid", sorted(SAMPLE_PLACES.items()))
def test_get_weather(live_client, title, woeid):
    assert live_client.get_weather(woeid).title == title


def test_get_weather_unknown_place(live_client):
    assert live_client.get_weather("00000").title == ""


@pytest.mark.parametrize("woeid", sorted(SAMPLE_PLACES.values()))
def test_get_weather_for_today(live_client, woeid):
    samples = live_client.get_weather_for_date(woeid, date.today())

    assert samples
    assert all(sample.weather_state_name for sample in samples)
