from datetime import datetime, timezone

import pytest

from spacebits.errors import SnapshotNotFoundError, UpstreamStatusError
from spacebits.pipeline import read_snapshot, refresh_snapshot
from spacebits.schemas import NearEarthObjectSnapshot, PeopleInSpaceSnapshot

FIXED_NOW = datetime(2024, 6, 1, 12, 0, 0, tzinfo=timezone.utc)


def test_refresh_people_writes_snapshot(http, settings, store):
    http.add(settings.api_url("people_in_space"), json={"people": [{"name": "Jane", "craft": "ISS"}], "number": 1})
    refresh_snapshot("people_in_space", session=http, settings=settings, store=store, clock=lambda: FIXED_NOW)

    got = store.get("people_in_space.json", PeopleInSpaceSnapshot)
    assert got.model_dump(by_alias=True) == {
        "update_time": "2024-06-01 12:00:00 +0000",
        "people": [{"name": "Jane", "craft": "ISS"}],
    }


def test_refresh_neo_end_to_end(http, settings, store, secrets, neo_feed):
    http.add(settings.api_url("near_earth_objects"), json=neo_feed)
    snap = refresh_snapshot("near_earth_objects", session=http, settings=settings, store=store,
                            secrets=secrets, clock=lambda: FIXED_NOW)

    stored = read_snapshot("near_earth_objects", settings=settings, store=store)
    assert isinstance(stored, NearEarthObjectSnapshot)
    assert stored == snap
    assert stored.element_count == 1
    assert [o.id for o in stored.near_earth_objects] == ["123"]


def test_upstream_429_writes_nothing(http, settings, store):
    http.add(settings.api_url("people_in_space"), status_code=429)
    with pytest.raises(UpstreamStatusError) as ei:
        refresh_snapshot("people_in_space", session=http, settings=settings, store=store)
    assert ei.value.status_code == 429
    with pytest.raises(SnapshotNotFoundError):
        store.get("people_in_space.json", PeopleInSpaceSnapshot)


def test_failed_refresh_keeps_previous_snapshot(http, settings, store, people_payload):
    url = settings.api_url("people_in_space")
    http.add(url, json=people_payload)
    first = refresh_snapshot("people_in_space", session=http, settings=settings, store=store,
                             clock=lambda: FIXED_NOW)

    http.add(url, status_code=503)
    with pytest.raises(UpstreamStatusError):
        refresh_snapshot("people_in_space", session=http, settings=settings, store=store)
    assert store.get("people_in_space.json", PeopleInSpaceSnapshot) == first


def test_read_never_written(settings, store):
    with pytest.raises(SnapshotNotFoundError):
        read_snapshot("upcoming_launches", settings=settings, store=store)
