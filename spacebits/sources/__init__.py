from .feeds import (
    fetch_astronaut_roster,
    fetch_near_earth_objects,
    fetch_people_in_space,
    fetch_raw,
    fetch_upcoming_launches,
)
from .http import fetch_json, fetch_text, new_session
from .secrets import SecretResolver, SsmSecretResolver

__all__ = [
    "fetch_astronaut_roster",
    "fetch_near_earth_objects",
    "fetch_people_in_space",
    "fetch_raw",
    "fetch_upcoming_launches",
    "fetch_json",
    "fetch_text",
    "new_session",
    "SecretResolver",
    "SsmSecretResolver",
]
