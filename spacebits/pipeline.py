"""
The two paths every dataset goes through.

  write: source adapter -> normalizer -> store.put
  read:  store.get -> canonical model (already normalized, so no normalizer)

Stages run strictly in order; an exception from any stage propagates and the
later stages never run (a failed fetch never produces a write).
"""
import logging
from datetime import datetime, timezone
from typing import Callable, Optional

import requests

from spacebits.normalizers import Dataset, get_normalizer
from spacebits.repositories import SnapshotStore
from spacebits.schemas import SNAPSHOT_MODELS, Snapshot
from spacebits.settings import Settings
from spacebits.sources import SecretResolver, fetch_raw

log = logging.getLogger(__name__)

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def refresh_snapshot(
    dataset: Dataset,
    *,
    session: requests.Session,
    settings: Settings,
    store: SnapshotStore,
    secrets: Optional[SecretResolver] = None,
    clock: Clock = utc_now,
) -> Snapshot:
    key = settings.file_name(dataset)
    log.info("refresh %s: fetching", dataset)
    raw = fetch_raw(dataset, session, settings, secrets)

    snapshot = get_normalizer(dataset).normalize(raw, clock())

    log.info("refresh %s: writing %s/%s", dataset, store.bucket, key)
    store.put(key, snapshot)
    return snapshot


def read_snapshot(dataset: Dataset, *, settings: Settings, store: SnapshotStore) -> Snapshot:
    try:
        model = SNAPSHOT_MODELS[dataset]
    except KeyError:
        raise ValueError(f"unknown dataset: {dataset!r}") from None
    return store.get(settings.file_name(dataset), model)
