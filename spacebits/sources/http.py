# spacebits/sources/http.py
import logging
from typing import Any, Optional

import requests

from spacebits.errors import DeserializationError, NetworkError, UpstreamStatusError

log = logging.getLogger(__name__)

USER_AGENT = "spacebits-ingest/1.0"


def new_session() -> requests.Session:
    s = requests.Session()
    s.headers.update({"User-Agent": USER_AGENT, "Accept": "application/json"})
    return s


def _get(session: requests.Session, url: str, params: Optional[dict], timeout: float) -> requests.Response:
    try:
        resp = session.get(url, params=params, timeout=timeout)
    except requests.RequestException as e:
        # connection refused, DNS, timeouts, ...
        raise NetworkError(f"GET {url} failed: {e}") from e
    if resp.status_code != 200:
        log.warning("upstream error: url=%s status=%s", url, resp.status_code)
        raise UpstreamStatusError(resp.status_code, url)
    return resp


def fetch_json(session: requests.Session, url: str, params: Optional[dict] = None,
               timeout: float = 30.0) -> Any:
    """One GET; anything but HTTP 200 with a JSON body is an error."""
    resp = _get(session, url, params, timeout)
    try:
        return resp.json()
    except ValueError as e:
        raise DeserializationError(f"response from {url} is not JSON") from e


def fetch_text(session: requests.Session, url: str, params: Optional[dict] = None,
               timeout: float = 30.0) -> str:
    resp = _get(session, url, params, timeout)
    return resp.text
