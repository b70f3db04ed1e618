"""
Error kinds raised by the snapshot pipeline.

Every failure is raised at the seam where it happens (source, normalizer,
store, settings) and translated to an HTTP response exactly once, by the
exception handler registered in `spacebits.main`.
"""


class SpaceBitsError(Exception):
    kind = "error"


class ConfigurationError(SpaceBitsError):
    """A required environment variable is missing or malformed."""
    kind = "configuration_error"


class NetworkError(SpaceBitsError):
    """The outbound call failed before a response arrived (DNS, refused, timeout)."""
    kind = "network_error"


class UpstreamStatusError(SpaceBitsError):
    kind = "upstream_status_error"

    def __init__(self, status_code: int, url: str = ""):
        self.status_code = status_code
        self.url = url
        super().__init__(f"upstream returned HTTP {status_code} for {url or 'request'}")


class DeserializationError(SpaceBitsError):
    """Payload was not JSON, not UTF-8, or did not match the expected schema."""
    kind = "deserialization_error"


class SecretResolutionError(SpaceBitsError):
    kind = "secret_resolution_error"


class StoreReadError(SpaceBitsError):
    kind = "store_read_error"


class SnapshotNotFoundError(StoreReadError):
    kind = "snapshot_not_found"

    def __init__(self, bucket: str, key: str):
        self.bucket = bucket
        self.key = key
        super().__init__(f"no snapshot at {bucket}/{key}")


class StoreWriteError(SpaceBitsError):
    kind = "store_write_error"
