from spacebits.errors import DeserializationError
from spacebits.schemas import NearEarthObjectSnapshot, RawNearEarthObjectFeed
from spacebits.schemas.common import NearEarthObject
from .base import Normalizer, format_capture_time
from .types import CaptureTime, Raw

class NearEarthObjectNormalizer(Normalizer):
    """
    Collapses the feed's date-keyed mapping into one ordered list and stamps
    the capture time. Everything else is carried over unchanged, including
    the velocity/distance strings.
    """
    def normalize(self, raw: Raw, captured_at: CaptureTime) -> NearEarthObjectSnapshot:
        if not isinstance(raw, RawNearEarthObjectFeed):
            raise DeserializationError(f"expected RawNearEarthObjectFeed, got {type(raw).__name__}")
        return NearEarthObjectSnapshot(
            links=raw.links,
            element_count=raw.element_count,
            updated_date_time=format_capture_time(captured_at),
            near_earth_objects=flatten_by_date(raw.near_earth_objects),
        )


def flatten_by_date(by_date: dict[str, list[NearEarthObject]]) -> list[NearEarthObject]:
    """Concatenate each date's objects, dates in lexicographic (= chronological for ISO dates) order."""
    out: list[NearEarthObject] = []
    for day in sorted(by_date):
        out.extend(by_date[day])
    return out
