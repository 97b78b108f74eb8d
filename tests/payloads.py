from __future__ import annotations

BASE_URL = "https://metaweather.test"


def sample_payload(**overrides) -> dict:
    payload = {
        "id": 5929340367568896,
        "weather_state_name": "Light Rain",
        "weather_state_abbr": "lr",
        "wind_direction_compass": "SW",
        "created": "2020-03-10T12:05:02.123456Z",
        "applicable_date": "2020-03-10",
        "min_temp": 7.43,
        "max_temp": 13.285,
        "the_temp": 12.41,
        "wind_speed": 11.56324129614471,
        "wind_direction": 224.5,
        "air_pressure": 1004,
        "humidity": 78,
        "visibility": 9.99,
        "predictability": 75,
    }
    payload.update(overrides)
    return payload


def report_payload(**overrides) -> dict:
    payload = {
        "consolidated_weather": [
            sample_payload(),
            sample_payload(id=6434531384098816, applicable_date="2020-03-11", weather_state_name="Showers"),
        ],
        "time": "2020-03-10T13:30:07.123456Z",
        "sun_rise": "2020-03-10T06:19:12.441034Z",
        "sun_set": "2020-03-10T17:58:32.118730Z",
        "timezone_name": "LMT",
        "parent": {
            "title": "England",
            "location_type": "Region / State / Province",
            "woeid": 24554868,
            "latt_long": "52.883560,-1.974060",
        },
        "sources": [
            {"title": "BBC", "slug": "bbc", "url": "http://www.bbc.co.uk/weather/", "crawl_rate": 360},
            {"title": "Met Office", "slug": "met-office", "url": "http://www.metoffice.gov.uk/", "crawl_rate": 180},
        ],
        "title": "London",
        "location_type": "City",
        "woeid": 44418,
        "latt_long": "51.506321,-0.12714",
        "timezone": "Europe/London",
    }
    payload.update(overrides)
    return payload
