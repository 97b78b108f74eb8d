from __future__ import annotations

from dataclasses import replace
from datetime import date
from typing import Any, Callable, List, Optional, TypeVar
from urllib.parse import quote

import requests
from pydantic import ValidationError

from . import schemas
from .base import DecodeError, MetaWeatherProvider, RequestConfig
from .entities import Location, LocationWithDistance, WeatherReport, WeatherSample

T = TypeVar("T")


def _path_segment(value: str) -> str:
    # a "/" in a woeid must not reach another endpoint
    return quote(str(value), safe="")


class WeatherClient(MetaWeatherProvider):
    """Client for the MetaWeather location search and weather endpoints.

    Every call issues a single blocking GET bounded by ``request_timeout``.
    Connection problems raise :class:`~metaweather.base.TransportError`;
    bodies that are not JSON or do not fit the expected records raise
    :class:`~metaweather.base.DecodeError`. Searches that match nothing
    return an empty list.
    """

    search_path = "/api/location/search/"
    location_path = "/api/location/{woeid}"
    location_date_path = "/api/location/{woeid}/{year}/{month}/{day}"

    def __init__(
        self,
        config: Optional[RequestConfig] = None,
        *,
        base_url: Optional[str] = None,
        request_timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
    ) -> None:
        config = config or RequestConfig()
        if base_url is not None:
            config = replace(config, base_url=base_url)
        if request_timeout is not None:
            config = replace(config, request_timeout=request_timeout)
        super().__init__(session=session, request_config=config)

    # Public API ---------------------------------------------------------
    def search_by_name(self, query: str) -> List[Location]:
        data = self._get_json(self.search_path, {"query": query})
        return self._decode(schemas.parse_locations, data)

    def search_by_coordinates(self, latitude: str, longitude: str) -> List[LocationWithDistance]:
        data = self._get_json(self.search_path, {"lattlong": f"{latitude},{longitude}"})
        return self._decode(schemas.parse_locations_with_distance, data)

    def get_location(self, location: str) -> List[Location]:
        """Search by coordinates when ``location`` reads ``"lat,long"``, by name otherwise."""
        if "," in location:
            latitude, longitude = (part.strip() for part in location.split(",", 1))
            return list(self.search_by_coordinates(latitude, longitude))
        return self.search_by_name(location)

    def get_weather(self, place_id: str) -> WeatherReport:
        """Return the current report for ``place_id``.

        The service does not signal an unknown woeid with an error, so the
        report comes back empty instead: check ``report.found``.
        """
        data = self._get_json(self.location_path.format(woeid=_path_segment(place_id)))
        report = self._decode(schemas.parse_weather_report, data)
        if not report.found:
            self._log.info("No location found for woeid %s", place_id)
        return report

    def get_weather_for_date(self, place_id: str, day: date) -> List[WeatherSample]:
        path = self.location_date_path.format(
            woeid=_path_segment(place_id),
            year=f"{day.year:04d}",
            month=day.month,
            day=day.day,
        )
        data = self._get_json(path)
        return self._decode(schemas.parse_weather_samples, data)

    # helpers ------------------------------------------------------------
    def _decode(self, parser: Callable[[Any], T], data: Any) -> T:
        try:
            return parser(data)
        except ValidationError as exc:
            self._log.error("Unexpected response shape: %s", exc)
            raise DecodeError(f"unexpected response shape: {exc.error_count()} error(s)") from exc


__all__ = ["WeatherClient"]
