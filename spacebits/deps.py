# spacebits/deps.py
# FastAPI dependencies. Everything here is built once in the app lifespan
# (see main.py) and read back from app.state per request.
import requests
from fastapi import Request

from spacebits.pipeline import Clock, utc_now
from spacebits.repositories import SnapshotStore
from spacebits.settings import Settings
from spacebits.sources import SecretResolver, SsmSecretResolver

def get_settings(request: Request) -> Settings:
    return request.app.state.settings

def get_store(request: Request) -> SnapshotStore:
    return request.app.state.store

def get_http_session(request: Request) -> requests.Session:
    return request.app.state.http

def get_secret_resolver(request: Request) -> SecretResolver:
    # Created on first use: only the near-earth-object refresh needs SSM.
    state = request.app.state
    if getattr(state, "secrets", None) is None:
        state.secrets = SsmSecretResolver(region_name=state.settings.aws_region)
    return state.secrets

def get_clock() -> Clock:
    return utc_now
