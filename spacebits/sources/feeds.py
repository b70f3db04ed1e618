"""
Source adapters: one outbound request per dataset, parsed into a raw document.

No retries. Any failure (transport, non-200, schema) is raised to the caller
and ends the invocation.
"""
import logging
from datetime import date
from typing import Optional

import requests

from spacebits.errors import SecretResolutionError
from spacebits.schemas import (
    RawAstronautRosterPage,
    RawDocument,
    RawLaunchFeed,
    RawNearEarthObjectFeed,
    RawPeopleInSpace,
)
from spacebits.schemas.parsing import parse_document
from spacebits.settings import Settings
from .http import fetch_json, fetch_text
from .secrets import SecretResolver

log = logging.getLogger(__name__)


def fetch_people_in_space(session: requests.Session, settings: Settings) -> RawPeopleInSpace:
    url = settings.api_url("people_in_space")
    log.info("fetching people in space from %s", url)
    data = fetch_json(session, url, timeout=settings.http_timeout)
    raw = parse_document(RawPeopleInSpace, data)
    log.info("people in space: %d people", len(raw.people))
    return raw


def fetch_near_earth_objects(
    session: requests.Session,
    settings: Settings,
    secrets: SecretResolver,
    day: Optional[date] = None,
) -> RawNearEarthObjectFeed:
    """
    Today's NeoWs feed. The API key is resolved from the parameter store first;
    start_date and end_date are both the local-clock date.
    """
    api_key = secrets.resolve(settings.key_location)
    day = day or date.today()
    url = settings.api_url("near_earth_objects")
    params = {"start_date": day.isoformat(), "end_date": day.isoformat(), "api_key": api_key}
    log.info("fetching near-earth objects for %s", day.isoformat())
    data = fetch_json(session, url, params=params, timeout=settings.http_timeout)
    raw = parse_document(RawNearEarthObjectFeed, data)
    log.info("near-earth objects: element_count=%d dates=%s",
             raw.element_count, sorted(raw.near_earth_objects))
    return raw


def fetch_upcoming_launches(session: requests.Session, settings: Settings) -> RawLaunchFeed:
    url = settings.api_url("upcoming_launches")
    log.info("fetching upcoming launches from %s", url)
    data = fetch_json(session, url, timeout=settings.http_timeout)
    raw = parse_document(RawLaunchFeed, data)
    log.info("upcoming launches: %d of %d", len(raw.launches), raw.total)
    return raw


def fetch_astronaut_roster(session: requests.Session, settings: Settings) -> RawAstronautRosterPage:
    url = settings.api_url("astronauts")
    log.info("fetching astronaut roster page %s", url)
    html = fetch_text(session, url, timeout=settings.http_timeout)
    return RawAstronautRosterPage(url=url, html=html)


def fetch_raw(
    dataset: str,
    session: requests.Session,
    settings: Settings,
    secrets: Optional[SecretResolver] = None,
) -> RawDocument:
    if dataset == "people_in_space":
        return fetch_people_in_space(session, settings)
    if dataset == "near_earth_objects":
        if secrets is None:
            raise SecretResolutionError("near_earth_objects needs a secret resolver for the API key")
        return fetch_near_earth_objects(session, settings, secrets)
    if dataset == "upcoming_launches":
        return fetch_upcoming_launches(session, settings)
    if dataset == "astronauts":
        return fetch_astronaut_roster(session, settings)
    raise ValueError(f"unknown dataset: {dataset!r}")
