# tests/conftest.py
import copy
from datetime import datetime, timezone

import pytest
import requests
from fastapi.testclient import TestClient

from spacebits.db import Base, make_engine, make_session_factory
from spacebits.deps import get_clock, get_http_session, get_secret_resolver
from spacebits.main import app
from spacebits.repositories import SqlSnapshotStore
from spacebits.settings import load_settings

FIXED_NOW = datetime(2024, 6, 1, 12, 0, 0, tzinfo=timezone.utc)
NASA_KEY = "nasa-test-key"


# --- Fake HTTP: routes by URL, records every call ---
class FakeResponse:
    def __init__(self, status_code=200, payload=None, text=None):
        self.status_code = status_code
        self._payload = payload
        self.text = text if text is not None else ""

    def json(self):
        if self._payload is None:
            raise ValueError("No JSON object could be decoded")
        return copy.deepcopy(self._payload)


class FakeSession:
    def __init__(self):
        self.routes = {}
        self.calls = []

    def add(self, url, status_code=200, json=None, text=None):
        self.routes[url] = FakeResponse(status_code, json, text)

    def fail(self, url, exc):
        self.routes[url] = exc

    def get(self, url, params=None, timeout=None):
        self.calls.append({"url": url, "params": params, "timeout": timeout})
        r = self.routes.get(url)
        if r is None:
            raise requests.ConnectionError(f"no route for {url}")
        if isinstance(r, Exception):
            raise r
        return r

    def close(self):
        pass


class FakeSecrets:
    def __init__(self, values=None):
        self.values = values or {}
        self.requested = []

    def resolve(self, name):
        self.requested.append(name)
        return self.values[name]


# --- Settings / store on a temporary SQLite file per test ---
@pytest.fixture
def tmp_db_url(tmp_path):
    return f"sqlite:///{tmp_path / 'spacebits.db'}"


@pytest.fixture
def env(monkeypatch, tmp_db_url):
    values = {
        "BUCKET_NAME": "test-bucket",
        "STORE_BACKEND": "sql",
        "DATABASE_URL": tmp_db_url,
    }
    for k, v in values.items():
        monkeypatch.setenv(k, v)
    return values


@pytest.fixture
def settings(env):
    return load_settings(dict(env))


@pytest.fixture
def store(settings):
    engine = make_engine(settings.database_url)
    Base.metadata.create_all(bind=engine)
    yield SqlSnapshotStore(settings.bucket_name, make_session_factory(engine))
    engine.dispose()


@pytest.fixture
def http():
    return FakeSession()


@pytest.fixture
def secrets(settings):
    return FakeSecrets({settings.key_location: NASA_KEY})


@pytest.fixture
def client(env, http, secrets):
    """App with real settings/store from env, fake upstreams, and a fixed clock."""
    app.dependency_overrides[get_http_session] = lambda: http
    app.dependency_overrides[get_secret_resolver] = lambda: secrets
    app.dependency_overrides[get_clock] = lambda: (lambda: FIXED_NOW)
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


# --- Upstream payloads ---
def make_neo(neo_id="123", name="Foo"):
    return {
        "links": {"self": f"http://api.nasa.gov/neo/rest/v1/neo/{neo_id}"},
        "id": neo_id,
        "neo_reference_id": neo_id,
        "name": name,
        "nasa_jpl_url": f"https://ssd.jpl.nasa.gov/tools/sbdb_lookup.html#/?sstr={neo_id}",
        "absolute_magnitude_h": 22.1,
        "estimated_diameter": {
            "kilometers": {"estimated_diameter_min": 0.1010543415, "estimated_diameter_max": 0.2259643771},
            "meters": {"estimated_diameter_min": 101.054341542, "estimated_diameter_max": 225.9643771094},
            "miles": {"estimated_diameter_min": 0.0627922373, "estimated_diameter_max": 0.140407711},
            "feet": {"estimated_diameter_min": 331.5431259047, "estimated_diameter_max": 741.3529669956},
        },
        "is_potentially_hazardous_asteroid": False,
        "close_approach_data": [
            {
                "close_approach_date": "2024-01-01",
                "close_approach_date_full": "2024-Jan-01 03:12",
                "epoch_date_close_approach": 1704078720000,
                "relative_velocity": {
                    "kilometers_per_second": "12.4938293467",
                    "kilometers_per_hour": "44977.7856481064",
                    "miles_per_hour": "27947.0919302181",
                },
                "miss_distance": {
                    "astronomical": "0.3651612813",
                    "lunar": "142.0477384257",
                    "kilometers": "54627816.857",
                    "miles": "33943876.4813045598",
                },
                "orbiting_body": "Earth",
            }
        ],
        "is_sentry_object": False,
    }


def make_neo_feed(by_date=None):
    by_date = by_date if by_date is not None else {"2024-01-01": [make_neo()]}
    return {
        "links": {
            "next": "http://api.nasa.gov/neo/rest/v1/feed?start_date=2024-01-02&end_date=2024-01-02",
            "prev": "http://api.nasa.gov/neo/rest/v1/feed?start_date=2023-12-31&end_date=2023-12-31",
            "self": "http://api.nasa.gov/neo/rest/v1/feed?start_date=2024-01-01&end_date=2024-01-01",
        },
        "element_count": sum(len(v) for v in by_date.values()),
        "near_earth_objects": by_date,
    }


def make_launch(launch_id=1, **overrides):
    launch = {
        "id": launch_id,
        "cospar_id": None,
        "sort_date": "1717243200",
        "name": "Starlink Group 10-1",
        "provider": {"id": 1, "name": "SpaceX", "slug": "spacex"},
        "vehicle": {"id": 1, "name": "Falcon 9", "company_id": 1, "slug": "falcon-9"},
        "pad": {
            "id": 2,
            "name": "SLC-40",
            "location": {
                "id": 61,
                "name": "Cape Canaveral SFS",
                "state": "FL",
                "statename": "Florida",
                "country": "United States",
                "slug": "cape-canaveral-sfs",
            },
        },
        "missions": [{"id": 9, "name": "Starlink Group 10-1", "description": None}],
        "mission_description": None,
        "launch_description": "A SpaceX Falcon 9 rocket will launch Starlink Group 10-1.",
        "win_open": "2024-06-01T12:00Z",
        "t0": None,
        "win_close": "2024-06-01T16:00Z",
        "est_date": {"month": None, "day": None, "year": None, "quarter": None},
        "date_str": "Jun 01",
        "tags": [{"id": 9, "text": "Starlink"}],
        "slug": "starlink-group-10-1",
        "weather_summary": "Clear",
        "weather_temp": 79.5,
        "weather_condition": "Clear",
        "weather_wind_mph": 8.1,
        "weather_icon": "wi-day-sunny",
        "weather_updated": "2024-05-31T20:00:00+00:00",
        "quicktext": "Falcon 9 - Starlink Group 10-1",
        "media": [],
        "result": -1,
        "suborbital": False,
        "modified": "2024-05-31T20:10:51+00:00",
    }
    launch.update(overrides)
    return launch


def make_launch_feed(launches=None):
    launches = launches if launches is not None else [make_launch()]
    return {
        "errors": [],
        "valid_auth": False,
        "count": len(launches),
        "limit": 5,
        "total": 180,
        "last_page": 36,
        "result": launches,
    }


ROSTER_HTML = """
<html><body>
  <nav><a href="/people/">People</a></nav>
  <div class="hds-content-item">
    <a href="/people/sunita-l-williams/"><h3> Sunita L.
        Williams </h3></a>
    <a href="https://www.nasa.gov/people/butch-wilmore/">Barry E. Wilmore</a>
    <a href="/people/sunita-l-williams/">Sunita L. Williams</a>
    <a href="/people/empty-link/"></a>
    <a href="/missions/artemis/">Artemis</a>
    <a href="https://example.com/people/not-an-astronaut/">Spam Person</a>
  </div>
</body></html>
"""


@pytest.fixture
def neo_feed():
    return make_neo_feed()


@pytest.fixture
def people_payload():
    return {"message": "success", "people": [{"name": "Jane", "craft": "ISS"}], "number": 1}


@pytest.fixture
def launch_feed():
    return make_launch_feed()


@pytest.fixture
def roster_html():
    return ROSTER_HTML


# --- Factories, for tests that need variations ---
@pytest.fixture
def neo_factory():
    return make_neo


@pytest.fixture
def feed_factory():
    return make_neo_feed


@pytest.fixture
def launch_factory():
    return make_launch
