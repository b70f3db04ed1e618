# spacebits/schemas/common.py
# Value types that appear unchanged in both the raw feeds and the stored snapshots.
from typing import Optional

from pydantic import BaseModel, ConfigDict, StrictStr

from .aliases import aliased


class Value(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True, strict=True)


class Links(Value):
    next: Optional[str] = None
    prev: Optional[str] = None
    this: Optional[str] = aliased("self", None)


# --- near-earth objects ------------------------------------------------------

class DiameterRange(Value):
    estimated_diameter_min: float
    estimated_diameter_max: float


class EstimatedDiameter(Value):
    kilometers: DiameterRange
    meters: DiameterRange
    miles: DiameterRange
    feet: DiameterRange


# Velocities and distances arrive as decimal strings with more digits than a
# float repr keeps; they stay strings end to end.
class RelativeVelocity(Value):
    kilometers_per_second: StrictStr
    kilometers_per_hour: StrictStr
    miles_per_hour: StrictStr


class MissDistance(Value):
    astronomical: StrictStr
    lunar: StrictStr
    kilometers: StrictStr
    miles: StrictStr


class CloseApproachEvent(Value):
    close_approach_date: str
    epoch_date_close_approach: int
    relative_velocity: RelativeVelocity
    miss_distance: MissDistance
    orbiting_body: str


class NearEarthObject(Value):
    id: str
    neo_reference_id: str
    name: str
    nasa_jpl_url: str
    absolute_magnitude_h: float
    estimated_diameter: EstimatedDiameter
    is_potentially_hazardous_asteroid: bool
    close_approach_data: list[CloseApproachEvent]
    is_sentry_object: bool
    links: Links


# --- people in space ---------------------------------------------------------

class PersonInSpace(Value):
    name: str
    craft: str  # free text; upstream adds new craft names over time


# --- launches ----------------------------------------------------------------

class LaunchProvider(Value):
    id: int
    name: str
    slug: Optional[str] = None


class LaunchVehicle(Value):
    id: int
    name: str
    company_id: Optional[int] = None
    slug: Optional[str] = None


class PadLocation(Value):
    id: int
    name: str
    state: Optional[str] = None
    statename: Optional[str] = None
    country: Optional[str] = None
    slug: Optional[str] = None


class LaunchPad(Value):
    id: int
    name: str
    location: Optional[PadLocation] = None


class Mission(Value):
    id: int
    name: str
    description: Optional[str] = None


class LaunchTag(Value):
    id: int
    text: str
