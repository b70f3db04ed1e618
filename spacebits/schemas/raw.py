"""
Raw documents, in the upstream APIs' own field names and nesting.

Unknown upstream fields are ignored; missing required ones fail validation.
"""
from typing import Optional

from pydantic import BaseModel, ConfigDict

from .aliases import aliased
from .common import (
    LaunchPad,
    LaunchProvider,
    LaunchTag,
    LaunchVehicle,
    Links,
    Mission,
    NearEarthObject,
    PersonInSpace,
)


class RawDocument(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True, strict=True)


class RawNearEarthObjectFeed(RawDocument):
    """NASA NeoWs /feed response. `near_earth_objects` is keyed by calendar date."""
    links: Optional[Links] = None
    element_count: int
    near_earth_objects: dict[str, list[NearEarthObject]]


class RawPeopleInSpace(RawDocument):
    """open-notify astros.json response."""
    message: Optional[str] = None
    number: Optional[int] = None
    people: list[PersonInSpace]


class RawLaunch(RawDocument):
    id: int
    cospar_id: Optional[str] = None
    sort_date: str
    name: str
    slug: Optional[str] = None
    provider: LaunchProvider
    vehicle: LaunchVehicle
    pad: Optional[LaunchPad] = None
    missions: list[Mission]
    mission_description: Optional[str] = None
    launch_description: Optional[str] = None
    win_open: Optional[str] = None
    t0: Optional[str] = None
    win_close: Optional[str] = None
    date_str: Optional[str] = None
    tags: list[LaunchTag]
    weather_summary: Optional[str] = None
    weather_temp: Optional[float] = None
    weather_condition: Optional[str] = None
    weather_wind_mph: Optional[float] = None
    weather_icon: Optional[str] = None
    weather_updated: Optional[str] = None
    modified: str


class RawLaunchFeed(RawDocument):
    """rocketlaunch.live /json/launches/next/N response."""
    valid: bool = aliased("valid")
    count: int
    limit: int
    total: int
    last_page: int
    launches: list[RawLaunch] = aliased("launches")


class RawAstronautRosterPage(RawDocument):
    url: str
    html: str
