# spacebits/settings.py
import logging
import os
from typing import Literal, Mapping, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict

from .errors import ConfigurationError

log = logging.getLogger(__name__)

# Upstream endpoints
PEOPLE_IN_SPACE_API_URL = "http://api.open-notify.org/astros.json"
NEAR_EARTH_OBJECTS_API_URL = "https://api.nasa.gov/neo/rest/v1/feed"
UPCOMING_LAUNCHES_API_URL = "https://fdo.rocketlaunch.live/json/launches/next/5"
ASTRONAUTS_PAGE_URL = "https://www.nasa.gov/astronauts"

DEFAULT_KEY_LOCATION = "/space_cloud/keys/nasa_api_key"
DEFAULT_DATABASE_URL = "sqlite:///./spacebits.sqlite3"

# dataset name -> (object key env var, default object key)
FILE_NAME_VARS = {
    "people_in_space": ("PEOPLE_IN_SPACE_FILE_NAME", "people_in_space.json"),
    "near_earth_objects": ("NEAR_EARTH_OBJECTS_FILE_NAME", "near_earth_objects.json"),
    "upcoming_launches": ("UPCOMING_LAUNCHES_FILE_NAME", "launches.json"),
    "astronauts": ("ASTRONAUTS_FILE_NAME", "astronauts.json"),
}

# dataset name -> (upstream url env var, default url)
API_URL_VARS = {
    "people_in_space": ("PEOPLE_IN_SPACE_API_URL", PEOPLE_IN_SPACE_API_URL),
    "near_earth_objects": ("NEAR_EARTH_OBJECTS_API_URL", NEAR_EARTH_OBJECTS_API_URL),
    "upcoming_launches": ("UPCOMING_LAUNCHES_API_URL", UPCOMING_LAUNCHES_API_URL),
    "astronauts": ("ASTRONAUTS_PAGE_URL", ASTRONAUTS_PAGE_URL),
}


class Settings(BaseModel):
    """Process-wide configuration, loaded once at startup and passed around."""
    model_config = ConfigDict(frozen=True)

    bucket_name: str
    key_location: str = DEFAULT_KEY_LOCATION
    file_names: dict[str, str]
    api_urls: dict[str, str]
    store_backend: Literal["s3", "sql"] = "s3"
    database_url: str = DEFAULT_DATABASE_URL
    aws_region: Optional[str] = None
    http_timeout: float = 30.0
    log_level: str = "INFO"

    def file_name(self, dataset: str) -> str:
        try:
            return self.file_names[dataset]
        except KeyError:
            raise ConfigurationError(f"no object key configured for dataset {dataset!r}") from None

    def api_url(self, dataset: str) -> str:
        try:
            return self.api_urls[dataset]
        except KeyError:
            raise ConfigurationError(f"no upstream url configured for dataset {dataset!r}") from None


def _get(env: Mapping[str, str], name: str, default: Optional[str] = None) -> Optional[str]:
    v = env.get(name)
    if v is None or not v.strip():
        return default
    return v.strip()


def load_settings(env: Optional[Mapping[str, str]] = None) -> Settings:
    """
    Build Settings from the environment (and a local .env, if present).
    Raises ConfigurationError when BUCKET_NAME is absent or a value is malformed.
    """
    if env is None:
        load_dotenv()
        env = os.environ

    if _get(env, "FILE_NAME"):
        log.warning("FILE_NAME is ignored; set the per-dataset *_FILE_NAME variables instead")

    bucket = _get(env, "BUCKET_NAME")
    if not bucket:
        raise ConfigurationError("BUCKET_NAME must be set")

    backend = (_get(env, "STORE_BACKEND", "s3") or "s3").lower()
    if backend not in ("s3", "sql"):
        raise ConfigurationError(f"STORE_BACKEND must be 's3' or 'sql', got {backend!r}")

    raw_timeout = _get(env, "HTTP_TIMEOUT_SECONDS", "30")
    try:
        timeout = float(raw_timeout)
    except ValueError:
        raise ConfigurationError(f"HTTP_TIMEOUT_SECONDS must be a number, got {raw_timeout!r}") from None
    if timeout <= 0:
        raise ConfigurationError("HTTP_TIMEOUT_SECONDS must be positive")

    return Settings(
        bucket_name=bucket,
        key_location=_get(env, "KEY_LOCATION", DEFAULT_KEY_LOCATION),
        file_names={ds: _get(env, var, default) for ds, (var, default) in FILE_NAME_VARS.items()},
        api_urls={ds: _get(env, var, default) for ds, (var, default) in API_URL_VARS.items()},
        store_backend=backend,
        database_url=_get(env, "DATABASE_URL", DEFAULT_DATABASE_URL),
        aws_region=_get(env, "AWS_REGION"),
        http_timeout=timeout,
        log_level=_get(env, "LOG_LEVEL", "INFO"),
    )
