"""Client for the MetaWeather location search and weather API."""
from __future__ import annotations

import logging

from .base import DecodeError, MetaWeatherError, RequestConfig, TransportError
from .client import WeatherClient
from .config import ClientConfig, ConfigurationError
from .entities import (
    Location,
    LocationWithDistance,
    ParentLocation,
    WeatherReport,
    WeatherSample,
    WeatherSource,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.3.0"

__all__ = [
    "ClientConfig",
    "ConfigurationError",
    "DecodeError",
    "Location",
    "LocationWithDistance",
    "MetaWeatherError",
    "ParentLocation",
    "RequestConfig",
    "TransportError",
    "WeatherClient",
    "WeatherReport",
    "WeatherSample",
    "WeatherSource",
]
