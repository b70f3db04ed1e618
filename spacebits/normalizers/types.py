# spacebits/normalizers/types.py
from datetime import datetime
from typing import Literal

from spacebits.schemas import RawDocument, Snapshot

Dataset = Literal["people_in_space", "near_earth_objects", "upcoming_launches", "astronauts"]

CaptureTime = datetime
Raw = RawDocument
Canonical = Snapshot
