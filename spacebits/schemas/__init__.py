from .aliases import FIELD_ALIASES, aliased
from .canonical import (
    CAPTURE_TIME_FORMAT,
    SNAPSHOT_MODELS,
    Astronaut,
    AstronautRosterSnapshot,
    Launch,
    LaunchWeather,
    LaunchWindow,
    NearEarthObjectSnapshot,
    PeopleInSpaceSnapshot,
    Snapshot,
    UpcomingLaunchesSnapshot,
)
from .raw import (
    RawAstronautRosterPage,
    RawDocument,
    RawLaunch,
    RawLaunchFeed,
    RawNearEarthObjectFeed,
    RawPeopleInSpace,
)

__all__ = [
    "FIELD_ALIASES",
    "aliased",
    "CAPTURE_TIME_FORMAT",
    "SNAPSHOT_MODELS",
    "Astronaut",
    "AstronautRosterSnapshot",
    "Launch",
    "LaunchWeather",
    "LaunchWindow",
    "NearEarthObjectSnapshot",
    "PeopleInSpaceSnapshot",
    "Snapshot",
    "UpcomingLaunchesSnapshot",
    "RawAstronautRosterPage",
    "RawDocument",
    "RawLaunch",
    "RawLaunchFeed",
    "RawNearEarthObjectFeed",
    "RawPeopleInSpace",
]
