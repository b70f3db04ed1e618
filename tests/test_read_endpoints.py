from datetime import datetime, timezone

from spacebits.models import SnapshotObject


def _seed(store, key, body: bytes):
    with store.Session() as db, db.begin():
        db.merge(SnapshotObject(bucket=store.bucket, key=key, body=body,
                                updated_at=datetime.now(timezone.utc)))


def test_read_people_has_cors_headers(client, store):
    _seed(store, "people_in_space.json",
          b'{"update_time": "2024-06-01 12:00:00 +0000", "people": [{"name": "Jane", "craft": "ISS"}]}')
    r = client.get("/people-in-space")
    assert r.status_code == 200
    assert r.headers["access-control-allow-origin"] == "*"
    assert r.headers["access-control-allow-methods"] == "GET"
    assert "access-control-allow-headers" in r.headers


def test_read_people_from_older_blob(client, store):
    _seed(store, "people_in_space.json",
          b'{"updatedTime": "2023-03-01 08:00:00 +0000", "people": [{"name": "Frank", "craft": "Soyuz MS-22"}]}')
    r = client.get("/people-in-space")
    assert r.status_code == 200
    assert r.json()["update_time"] == "2023-03-01 08:00:00 +0000"


def test_read_near_earth_objects_envelope(client, http, neo_feed):
    http.add("https://api.nasa.gov/neo/rest/v1/feed", json=neo_feed)
    assert client.post("/near-earth-objects/refresh").status_code == 200

    r = client.get("/near-earth-objects")
    assert r.status_code == 200
    body = r.json()
    assert body["updated_date_time"] == "2024-06-01 12:00:00 +0000"
    assert body["data"]["element_count"] == 1
    neo = body["data"]["near_earth_objects"][0]
    assert neo["id"] == "123"
    assert neo["close_approach_data"][0]["miss_distance"]["kilometers"] == "54627816.857"
    assert neo["links"]["self"].endswith("/neo/123")


def test_read_upcoming_launches_envelope(client, http, launch_feed):
    http.add("https://fdo.rocketlaunch.live/json/launches/next/5", json=launch_feed)
    assert client.post("/upcoming-launches/refresh").status_code == 200

    body = client.get("/upcoming-launches").json()
    assert body["date"] == "2024-06-01 12:00:00 +0000"
    launches = body["launches"]
    assert launches["valid"] is False
    assert launches["total"] == 180
    assert launches["launches"][0]["provider"]["name"] == "SpaceX"
    assert launches["launches"][0]["window"]["opens"] == "2024-06-01T12:00Z"


def test_read_never_written_is_404(client):
    for path in ("/people-in-space", "/near-earth-objects", "/upcoming-launches", "/astronauts"):
        r = client.get(path)
        assert r.status_code == 404, path
        assert r.json()["error"] == "snapshot_not_found"
        assert r.headers["access-control-allow-origin"] == "*"


def test_read_corrupt_blob_is_500(client, store):
    _seed(store, "launches.json", b"not json at all")
    r = client.get("/upcoming-launches")
    assert r.status_code == 500
    assert r.json()["error"] == "deserialization_error"


def test_healthz(client):
    r = client.get("/healthz")
    assert r.status_code == 200
    assert r.json()["backend"] == "sql"
    assert r.json()["bucket"] == "test-bucket"
