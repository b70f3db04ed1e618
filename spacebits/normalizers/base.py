# spacebits/normalizers/base.py
from datetime import datetime, timezone
from typing import Protocol

from spacebits.schemas import CAPTURE_TIME_FORMAT
from .types import Canonical, CaptureTime, Raw

class Normalizer(Protocol):
    def normalize(self, raw: Raw, captured_at: CaptureTime) -> Canonical:
        """Return a NEW canonical snapshot. Do not mutate `raw`."""
        ...

def format_capture_time(captured_at: datetime) -> str:
    """Render a capture time in UTC as 'YYYY-MM-DD HH:MM:SS +0000'. Naive values are taken as UTC."""
    if captured_at.tzinfo is None:
        captured_at = captured_at.replace(tzinfo=timezone.utc)
    return captured_at.astimezone(timezone.utc).strftime(CAPTURE_TIME_FORMAT)
