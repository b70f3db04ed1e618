from typing import Any, Dict
from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from spacebits.deps import get_settings, get_store
from spacebits.pipeline import read_snapshot
from spacebits.repositories import SnapshotStore
from spacebits.schemas import Snapshot
from spacebits.settings import Settings

router = APIRouter(prefix="", tags=["read"])

# Browser clients call these directly.
CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET",
    "Access-Control-Allow-Headers": "*",
}

# -------------------------------------------------------------------
# Helpers
# -------------------------------------------------------------------
def _dump(s: Snapshot) -> Dict[str, Any]:
    """Canonical field names, JSON-ready values."""
    return s.model_dump(mode="json", by_alias=True)

def _respond(body: Dict[str, Any]) -> JSONResponse:
    return JSONResponse(content=body, headers=CORS_HEADERS)

# -------------------------------------------------------------------
# Snapshot endpoints
# -------------------------------------------------------------------
@router.get("/people-in-space")
def get_people_in_space(
    settings: Settings = Depends(get_settings),
    store: SnapshotStore = Depends(get_store),
) -> JSONResponse:
    """The stored people-in-space snapshot, as written."""
    snap = read_snapshot("people_in_space", settings=settings, store=store)
    return _respond(_dump(snap))

@router.get("/near-earth-objects")
def get_near_earth_objects(
    settings: Settings = Depends(get_settings),
    store: SnapshotStore = Depends(get_store),
) -> JSONResponse:
    """
    The stored near-earth-object snapshot wrapped as
      {"data": <snapshot>, "updated_date_time": <capture time>}
    """
    snap = read_snapshot("near_earth_objects", settings=settings, store=store)
    return _respond({"data": _dump(snap), "updated_date_time": snap.updated_date_time})

@router.get("/upcoming-launches")
def get_upcoming_launches(
    settings: Settings = Depends(get_settings),
    store: SnapshotStore = Depends(get_store),
) -> JSONResponse:
    """{"launches": <snapshot>, "date": <capture time>}"""
    snap = read_snapshot("upcoming_launches", settings=settings, store=store)
    return _respond({"launches": _dump(snap), "date": snap.updated_date_time})

@router.get("/astronauts")
def get_astronauts(
    settings: Settings = Depends(get_settings),
    store: SnapshotStore = Depends(get_store),
) -> JSONResponse:
    snap = read_snapshot("astronauts", settings=settings, store=store)
    return _respond(_dump(snap))
