"""
Canonical snapshot models.

This is the shape written to the blob store and returned by the read routes.
Field names are fixed snake_case. Timestamp, link and launch-list fields
still accept their older names on input (see `aliases.FIELD_ALIASES`), so
people and near-earth-object blobs from earlier revisions load. Launch
snapshots group window and weather into nested objects; older flat launch
blobs do not load and are replaced on the next refresh.
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
    Value,
)

# Capture timestamps are rendered like "2024-06-01 12:00:00 +0000"
CAPTURE_TIME_FORMAT = "%Y-%m-%d %H:%M:%S %z"


class Snapshot(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True, strict=True)


class NearEarthObjectSnapshot(Snapshot):
    links: Optional[Links] = None
    element_count: int
    updated_date_time: str = aliased("updated_date_time")
    near_earth_objects: list[NearEarthObject]


class PeopleInSpaceSnapshot(Snapshot):
    update_time: str = aliased("update_time")
    people: list[PersonInSpace]


class LaunchWindow(Value):
    opens: Optional[str] = None
    t0: Optional[str] = None
    closes: Optional[str] = None


class LaunchWeather(Value):
    summary: Optional[str] = None
    temp: Optional[float] = None
    condition: Optional[str] = None
    wind_mph: Optional[float] = None
    icon: Optional[str] = None
    updated: Optional[str] = None


class Launch(Value):
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
    date_str: Optional[str] = None
    window: LaunchWindow
    tags: list[LaunchTag]
    weather: LaunchWeather
    modified: str


class UpcomingLaunchesSnapshot(Snapshot):
    valid: bool = aliased("valid")
    count: int
    limit: int
    total: int
    last_page: int
    updated_date_time: str = aliased("updated_date_time")
    launches: list[Launch] = aliased("launches")


class Astronaut(Value):
    name: str
    profile_url: str


class AstronautRosterSnapshot(Snapshot):
    updated_date_time: str = aliased("updated_date_time")
    source_url: str
    astronauts: list[Astronaut]


# dataset name -> stored model
SNAPSHOT_MODELS: dict[str, type[Snapshot]] = {
    "people_in_space": PeopleInSpaceSnapshot,
    "near_earth_objects": NearEarthObjectSnapshot,
    "upcoming_launches": UpcomingLaunchesSnapshot,
    "astronauts": AstronautRosterSnapshot,
}
