from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional, Tuple


@dataclass(frozen=True)
class Location:
    """A place known to the service.

    ``woeid`` is the identifier every weather query takes; ``latt_long``
    is kept exactly as the service formats it (``"51.506321,-0.12714"``).
    """

    title: str = ""
    location_type: str = ""
    woeid: int = 0
    latt_long: str = ""


@dataclass(frozen=True)
class LocationWithDistance(Location):
    """Location returned by a coordinate search, ``distance`` in metres."""

    distance: int = 0


@dataclass(frozen=True)
class ParentLocation(Location):
    """Region containing the place a report was requested for."""


@dataclass(frozen=True)
class WeatherSource:
    title: str = ""
    slug: str = ""
    url: str = ""
    crawl_rate: int = 0


@dataclass(frozen=True)
class WeatherSample:
    """One day's consolidated reading.

    Readings the service leaves as ``null`` (common in historical data)
    are ``None``.
    """

    id: int = 0
    weather_state_name: str = ""
    weather_state_abbr: str = ""
    wind_direction_compass: str = ""
    created: Optional[datetime] = None
    applicable_date: str = ""
    min_temp: Optional[float] = None
    max_temp: Optional[float] = None
    the_temp: Optional[float] = None
    wind_speed: Optional[float] = None
    wind_direction: Optional[float] = None
    air_pressure: Optional[float] = None
    humidity: Optional[int] = None
    visibility: Optional[float] = None
    predictability: Optional[int] = None


@dataclass(frozen=True)
class WeatherReport:
    """Current weather for a place, with its forecast samples and sources.

    The service answers an unknown woeid with a body that carries none of
    these fields, so such a report has an empty ``title``; check
    :attr:`found` before using it.
    """

    woeid: int = 0
    title: str = ""
    location_type: str = ""
    timezone: str = ""
    timezone_name: str = ""
    latt_long: str = ""
    time: Optional[datetime] = None
    sun_rise: Optional[datetime] = None
    sun_set: Optional[datetime] = None
    parent: ParentLocation = field(default_factory=ParentLocation)
    sources: Tuple[WeatherSource, ...] = ()
    consolidated_weather: Tuple[WeatherSample, ...] = ()

    @property
    def found(self) -> bool:
        return bool(self.title)


__all__ = [
    "Location",
    "LocationWithDistance",
    "ParentLocation",
    "WeatherReport",
    "WeatherSample",
    "WeatherSource",
]
