from fastapi import APIRouter, Depends, Response
import requests

from spacebits.deps import get_clock, get_http_session, get_secret_resolver, get_settings, get_store
from spacebits.pipeline import Clock, refresh_snapshot
from spacebits.repositories import SnapshotStore
from spacebits.settings import Settings
from spacebits.sources import SecretResolver

# --------------------------------------------------------------------
# Router setup
# --------------------------------------------------------------------
# Write path: fetch upstream -> normalize -> overwrite the stored snapshot.
# Success is an empty 200; failures are raised and mapped in main.py.
router = APIRouter(prefix="", tags=["ingest"])


@router.post("/people-in-space/refresh")
def refresh_people_in_space(
    session: requests.Session = Depends(get_http_session),
    settings: Settings = Depends(get_settings),
    store: SnapshotStore = Depends(get_store),
    clock: Clock = Depends(get_clock),
):
    """Snapshot the open-notify roster of people currently in space."""
    refresh_snapshot("people_in_space", session=session, settings=settings, store=store, clock=clock)
    return Response(status_code=200)


@router.post("/near-earth-objects/refresh")
def refresh_near_earth_objects(
    session: requests.Session = Depends(get_http_session),
    settings: Settings = Depends(get_settings),
    store: SnapshotStore = Depends(get_store),
    secrets: SecretResolver = Depends(get_secret_resolver),
    clock: Clock = Depends(get_clock),
):
    """
    Snapshot today's NASA NeoWs feed.
    The API key is read from the parameter store at KEY_LOCATION before the fetch.
    """
    refresh_snapshot(
        "near_earth_objects",
        session=session, settings=settings, store=store, secrets=secrets, clock=clock,
    )
    return Response(status_code=200)


@router.post("/upcoming-launches/refresh")
def refresh_upcoming_launches(
    session: requests.Session = Depends(get_http_session),
    settings: Settings = Depends(get_settings),
    store: SnapshotStore = Depends(get_store),
    clock: Clock = Depends(get_clock),
):
    refresh_snapshot("upcoming_launches", session=session, settings=settings, store=store, clock=clock)
    return Response(status_code=200)


@router.post("/astronauts/refresh")
def refresh_astronauts(
    session: requests.Session = Depends(get_http_session),
    settings: Settings = Depends(get_settings),
    store: SnapshotStore = Depends(get_store),
    clock: Clock = Depends(get_clock),
):
    """Scrape the NASA astronauts page into a name/profile-link roster."""
    refresh_snapshot("astronauts", session=session, settings=settings, store=store, clock=clock)
    return Response(status_code=200)
