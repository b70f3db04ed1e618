from .astronauts import AstronautRosterNormalizer
from .base import Normalizer
from .launches import UpcomingLaunchesNormalizer
from .neo import NearEarthObjectNormalizer
from .people import PeopleInSpaceNormalizer
from .types import Dataset

_NORMALIZERS: dict[str, Normalizer] = {
    "people_in_space": PeopleInSpaceNormalizer(),
    "near_earth_objects": NearEarthObjectNormalizer(),
    "upcoming_launches": UpcomingLaunchesNormalizer(),
    "astronauts": AstronautRosterNormalizer(),
}

def get_normalizer(dataset: Dataset) -> Normalizer:
    """Normalizer for a dataset. Normalizers are stateless, so one instance is shared."""
    try:
        return _NORMALIZERS[dataset]
    except KeyError:
        raise ValueError(f"unknown dataset: {dataset!r}") from None
