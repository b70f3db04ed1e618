from .registry import get_normalizer
from .people import PeopleInSpaceNormalizer
from .neo import NearEarthObjectNormalizer, flatten_by_date
from .launches import UpcomingLaunchesNormalizer
from .astronauts import AstronautRosterNormalizer
from .types import Dataset
from .base import Normalizer, format_capture_time

__all__ = [
    "get_normalizer",
    "PeopleInSpaceNormalizer",
    "NearEarthObjectNormalizer",
    "flatten_by_date",
    "UpcomingLaunchesNormalizer",
    "AstronautRosterNormalizer",
    "Dataset",
    "Normalizer",
    "format_capture_time",
]
