from contextlib import asynccontextmanager
import logging
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from spacebits.errors import (
    DeserializationError,
    NetworkError,
    SecretResolutionError,
    SnapshotNotFoundError,
    SpaceBitsError,
    UpstreamStatusError,
)
from spacebits.repositories import build_store
from spacebits.routers.ingest import router as ingest_router
from spacebits.routers.read import CORS_HEADERS, router as read_router
from spacebits.settings import load_settings
from spacebits.setup_logging import setup_logging
from spacebits.sources import new_session

# --------------------------------------------------------------------
# App bootstrap
# --------------------------------------------------------------------
setup_logging() # Init Logging; level comes from Settings in lifespan
log = logging.getLogger(__name__)

# --------------------------------------------------------------------
# FastAPI application with lifespan hook
# --------------------------------------------------------------------
@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Runs once at startup and once at shutdown.
    Configuration is read here, once, and the store and HTTP session built
    from it are shared by every request. A missing BUCKET_NAME stops startup.
    """
    settings = load_settings()
    setup_logging(settings.log_level)
    app.state.settings = settings
    app.state.store = build_store(settings)
    app.state.http = new_session()
    app.state.secrets = None  # built on first use, see deps.get_secret_resolver
    log.info("spacebits ready: backend=%s bucket=%s", settings.store_backend, settings.bucket_name)

    yield

    app.state.http.close()

# Create the FastAPI app instance
app = FastAPI(title="SpaceBits snapshots", lifespan=lifespan)

# --------------------------------------------------------------------
# Error mapping
# --------------------------------------------------------------------
def _status_for(exc: SpaceBitsError, request: Request) -> int:
    if isinstance(exc, SnapshotNotFoundError):
        return 404
    if isinstance(exc, (UpstreamStatusError, NetworkError, SecretResolutionError)):
        return 502
    if isinstance(exc, DeserializationError):
        # on a read the bad bytes are ours; on a write they came from upstream
        return 500 if request.method == "GET" else 502
    return 500

@app.exception_handler(SpaceBitsError)
async def spacebits_error_handler(request: Request, exc: SpaceBitsError):
    status = _status_for(exc, request)
    if status >= 500:
        log.error("%s %s failed: %s: %s", request.method, request.url.path, exc.kind, exc)
    else:
        log.warning("%s %s: %s", request.method, request.url.path, exc)
    headers = CORS_HEADERS if request.method == "GET" else None
    return JSONResponse(
        status_code=status,
        content={"ok": False, "error": exc.kind, "detail": str(exc)},
        headers=headers,
    )

# --------------------------------------------------------------------
# Routes
# --------------------------------------------------------------------
@app.get("/healthz")
def health():
    """
    Simple health probe for monitoring.
    Returns:
      - ok: static True if the app is alive
      - backend: configured blob store backend
      - bucket: configured bucket
    """
    settings = getattr(app.state, "settings", None)
    return {
        "ok": True,
        "service": "spacebits",
        "version": 1,
        "backend": settings.store_backend if settings else None,
        "bucket": settings.bucket_name if settings else None,
    }

# Register API routers:
app.include_router(ingest_router)
app.include_router(read_router)
