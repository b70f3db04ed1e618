import re
from typing import Optional
from urllib.parse import urljoin, urlparse

from bs4 import BeautifulSoup

from spacebits.errors import DeserializationError
from spacebits.schemas import Astronaut, AstronautRosterSnapshot, RawAstronautRosterPage
from .base import Normalizer, format_capture_time
from .types import CaptureTime, Raw

# NASA publishes each astronaut biography under /people/<slug>/
PROFILE_PATH = re.compile(r"^/people/[^/]+/?$")

class AstronautRosterNormalizer(Normalizer):
    """
    Pulls astronaut names and biography links out of the NASA astronauts page.
    Links are made absolute and de-duplicated in document order; links to
    other hosts are dropped.
    """
    def normalize(self, raw: Raw, captured_at: CaptureTime) -> AstronautRosterSnapshot:
        if not isinstance(raw, RawAstronautRosterPage):
            raise DeserializationError(f"expected RawAstronautRosterPage, got {type(raw).__name__}")
        return AstronautRosterSnapshot(
            updated_date_time=format_capture_time(captured_at),
            source_url=raw.url,
            astronauts=parse_roster(raw.html, raw.url),
        )


def parse_roster(html: str, base_url: str) -> list[Astronaut]:
    soup = BeautifulSoup(html, "html.parser")
    host = urlparse(base_url).netloc
    seen: set[str] = set()
    out: list[Astronaut] = []
    for a in soup.find_all("a", href=True):
        url = urljoin(base_url, a["href"])
        parts = urlparse(url)
        if parts.netloc != host or not PROFILE_PATH.match(parts.path) or url in seen:
            continue
        name = clean_name(a.get_text(" "))
        if not name:
            continue
        seen.add(url)
        out.append(Astronaut(name=name, profile_url=url))
    return out


def clean_name(n: Optional[str]) -> str:
    """Trim and collapse whitespace."""
    if not n: return ""
    return re.sub(r"\s+", " ", n.strip())
