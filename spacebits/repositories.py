import logging
from datetime import datetime, timezone
from typing import Optional, Protocol, TypeVar

import boto3
from botocore.exceptions import BotoCoreError, ClientError
from sqlalchemy.exc import SQLAlchemyError

from spacebits.db import Base, make_engine, make_session_factory
from spacebits.errors import SnapshotNotFoundError, StoreReadError, StoreWriteError
from spacebits.models import SnapshotObject
from spacebits.schemas import Snapshot
from spacebits.schemas.parsing import parse_json_bytes
from spacebits.settings import Settings

log = logging.getLogger(__name__)

S = TypeVar("S", bound=Snapshot)

# S3 reports a missing object under any of these codes depending on the call
_NOT_FOUND_CODES = {"NoSuchKey", "404", "NotFound"}


class SnapshotStore(Protocol):
    bucket: str

    def put(self, key: str, snapshot: Snapshot) -> None:
        """Overwrite the object at `key` with the snapshot's JSON (last writer wins)."""
        ...

    def get(self, key: str, model: type[S]) -> S:
        """Read the whole object at `key` and validate it as `model`."""
        ...


def encode_snapshot(snapshot: Snapshot) -> bytes:
    return snapshot.model_dump_json(by_alias=True).encode("utf-8")


class S3SnapshotStore:
    def __init__(self, bucket: str, client=None, region_name: Optional[str] = None):
        self.bucket = bucket
        self.client = client or boto3.client("s3", region_name=region_name)

    def put(self, key: str, snapshot: Snapshot) -> None:
        body = encode_snapshot(snapshot)
        try:
            self.client.put_object(
                Bucket=self.bucket, Key=key, Body=body, ContentType="application/json"
            )
        except (ClientError, BotoCoreError) as e:
            log.exception("snapshot write failed: bucket=%s key=%s", self.bucket, key)
            raise StoreWriteError(f"could not write {self.bucket}/{key}: {e}") from e
        log.info("snapshot written: bucket=%s key=%s bytes=%d", self.bucket, key, len(body))

    def get(self, key: str, model: type[S]) -> S:
        try:
            resp = self.client.get_object(Bucket=self.bucket, Key=key)
            body = resp["Body"].read()
        except ClientError as e:
            code = e.response.get("Error", {}).get("Code", "")
            if code in _NOT_FOUND_CODES:
                raise SnapshotNotFoundError(self.bucket, key) from e
            raise StoreReadError(f"could not read {self.bucket}/{key}: {e}") from e
        except (BotoCoreError, OSError) as e:
            raise StoreReadError(f"could not read {self.bucket}/{key}: {e}") from e
        log.info("snapshot read: bucket=%s key=%s bytes=%d", self.bucket, key, len(body))
        return parse_json_bytes(model, body)


class SqlSnapshotStore:
    """
    Blob store on a single SQL table, keyed by (bucket, key).
    Used for local runs and tests; same semantics as the S3 store.
    """
    def __init__(self, bucket: str, session_factory):
        self.bucket = bucket
        self.Session = session_factory

    def put(self, key: str, snapshot: Snapshot) -> None:
        body = encode_snapshot(snapshot)
        try:
            with self.Session() as db, db.begin():
                row = db.get(SnapshotObject, (self.bucket, key))
                if row is None:
                    row = SnapshotObject(bucket=self.bucket, key=key)
                row.body       = body
                row.updated_at = datetime.now(timezone.utc)
                db.merge(row)
        except SQLAlchemyError as e:
            log.exception("snapshot write failed: bucket=%s key=%s", self.bucket, key)
            raise StoreWriteError(f"could not write {self.bucket}/{key}: {e}") from e
        log.info("snapshot written: bucket=%s key=%s bytes=%d", self.bucket, key, len(body))

    def get(self, key: str, model: type[S]) -> S:
        try:
            with self.Session() as db:
                row = db.get(SnapshotObject, (self.bucket, key))
                body = bytes(row.body) if row is not None else None
        except SQLAlchemyError as e:
            raise StoreReadError(f"could not read {self.bucket}/{key}: {e}") from e
        if body is None:
            raise SnapshotNotFoundError(self.bucket, key)
        log.info("snapshot read: bucket=%s key=%s bytes=%d", self.bucket, key, len(body))
        return parse_json_bytes(model, body)


def build_store(settings: Settings) -> SnapshotStore:
    """Store for the configured backend. The SQL backend creates its table if missing."""
    if settings.store_backend == "sql":
        engine = make_engine(settings.database_url)
        Base.metadata.create_all(bind=engine)
        return SqlSnapshotStore(settings.bucket_name, make_session_factory(engine))
    return S3SnapshotStore(settings.bucket_name, region_name=settings.aws_region)
