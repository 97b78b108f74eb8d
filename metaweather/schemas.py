"""Response schemas for the MetaWeather JSON API.

The models are strict about JSON types: a string where the service sends
a woeid or a temperature is a shape error, as is a float where it sends a
count or a number where it sends a timestamp. They are lenient about
presence: any key the service omits falls back to its empty default, the
same way the upstream API's own clients read its responses. Timestamps
are parsed from ISO-8601 strings only.
"""
from __future__ import annotations

from datetime import datetime
from typing import Annotated, Any, List, Optional

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, StrictFloat, StrictInt, StrictStr, TypeAdapter

from .entities import (
    Location,
    LocationWithDistance,
    ParentLocation,
    WeatherReport,
    WeatherSample,
    WeatherSource,
)

__all__ = [
    "LocationSchema",
    "LocationWithDistanceSchema",
    "WeatherReportSchema",
    "WeatherSampleSchema",
    "WeatherSourceSchema",
    "parse_locations",
    "parse_locations_with_distance",
    "parse_weather_report",
    "parse_weather_samples",
]


def _require_timestamp_string(value: Any) -> Any:
    # pydantic would otherwise read a bare number as a unix timestamp
    if value is not None and not isinstance(value, str):
        raise ValueError("timestamp must be an ISO-8601 string")
    return value


Timestamp = Annotated[datetime, BeforeValidator(_require_timestamp_string)]


class _ResponseModel(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True)


class LocationSchema(_ResponseModel):
    title: StrictStr = ""
    location_type: StrictStr = ""
    woeid: StrictInt = 0
    latt_long: StrictStr = ""

    def to_entity(self) -> Location:
        return Location(
            title=self.title,
            location_type=self.location_type,
            woeid=self.woeid,
            latt_long=self.latt_long,
        )

    def to_parent(self) -> ParentLocation:
        return ParentLocation(
            title=self.title,
            location_type=self.location_type,
            woeid=self.woeid,
            latt_long=self.latt_long,
        )


class LocationWithDistanceSchema(LocationSchema):
    distance: StrictInt = 0

    def to_entity(self) -> LocationWithDistance:
        return LocationWithDistance(
            title=self.title,
            location_type=self.location_type,
            woeid=self.woeid,
            latt_long=self.latt_long,
            distance=self.distance,
        )


class WeatherSourceSchema(_ResponseModel):
    title: StrictStr = ""
    slug: StrictStr = ""
    url: StrictStr = ""
    crawl_rate: StrictInt = 0

    def to_entity(self) -> WeatherSource:
        return WeatherSource(
            title=self.title,
            slug=self.slug,
            url=self.url,
            crawl_rate=self.crawl_rate,
        )


class WeatherSampleSchema(_ResponseModel):
    id: StrictInt = 0
    weather_state_name: StrictStr = ""
    weather_state_abbr: StrictStr = ""
    wind_direction_compass: StrictStr = ""
    created: Optional[Timestamp] = None
    applicable_date: StrictStr = ""
    min_temp: Optional[StrictFloat] = None
    max_temp: Optional[StrictFloat] = None
    the_temp: Optional[StrictFloat] = None
    wind_speed: Optional[StrictFloat] = None
    wind_direction: Optional[StrictFloat] = None
    air_pressure: Optional[StrictFloat] = None
    humidity: Optional[StrictInt] = None
    visibility: Optional[StrictFloat] = None
    predictability: Optional[StrictInt] = None

    def to_entity(self) -> WeatherSample:
        return WeatherSample(**self.model_dump())


class WeatherReportSchema(_ResponseModel):
    woeid: StrictInt = 0
    title: StrictStr = ""
    location_type: StrictStr = ""
    timezone: StrictStr = ""
    timezone_name: StrictStr = ""
    latt_long: StrictStr = ""
    time: Optional[Timestamp] = None
    sun_rise: Optional[Timestamp] = None
    sun_set: Optional[Timestamp] = None
    parent: LocationSchema = Field(default_factory=LocationSchema)
    sources: List[WeatherSourceSchema] = Field(default_factory=list)
    consolidated_weather: List[WeatherSampleSchema] = Field(default_factory=list)

    def to_entity(self) -> WeatherReport:
        return WeatherReport(
            woeid=self.woeid,
            title=self.title,
            location_type=self.location_type,
            timezone=self.timezone,
            timezone_name=self.timezone_name,
            latt_long=self.latt_long,
            time=self.time,
            sun_rise=self.sun_rise,
            sun_set=self.sun_set,
            parent=self.parent.to_parent(),
            sources=tuple(source.to_entity() for source in self.sources),
            consolidated_weather=tuple(sample.to_entity() for sample in self.consolidated_weather),
        )


_LOCATIONS = TypeAdapter(List[LocationSchema])
_LOCATIONS_WITH_DISTANCE = TypeAdapter(List[LocationWithDistanceSchema])
_SAMPLES = TypeAdapter(List[WeatherSampleSchema])


# Each parser raises ``pydantic.ValidationError`` when the payload does not
# fit; the client turns that into ``DecodeError``.
def parse_locations(payload: Any) -> List[Location]:
    return [item.to_entity() for item in _LOCATIONS.validate_python(payload)]


def parse_locations_with_distance(payload: Any) -> List[LocationWithDistance]:
    return [item.to_entity() for item in _LOCATIONS_WITH_DISTANCE.validate_python(payload)]


def parse_weather_report(payload: Any) -> WeatherReport:
    return WeatherReportSchema.model_validate(payload).to_entity()


def parse_weather_samples(payload: Any) -> List[WeatherSample]:
    return [item.to_entity() for item in _SAMPLES.validate_python(payload)]
