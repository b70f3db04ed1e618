from spacebits.errors import DeserializationError
from spacebits.schemas import PeopleInSpaceSnapshot, RawPeopleInSpace
from .base import Normalizer, format_capture_time
from .types import CaptureTime, Raw

class PeopleInSpaceNormalizer(Normalizer):
    """
    open-notify's roster carries no timestamp of its own, so the snapshot is
    stamped with the capture time. People and craft names pass through as-is.
    """
    def normalize(self, raw: Raw, captured_at: CaptureTime) -> PeopleInSpaceSnapshot:
        if not isinstance(raw, RawPeopleInSpace):
            raise DeserializationError(f"expected RawPeopleInSpace, got {type(raw).__name__}")
        return PeopleInSpaceSnapshot(
            update_time=format_capture_time(captured_at),
            people=list(raw.people),
        )
