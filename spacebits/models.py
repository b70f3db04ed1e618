from sqlalchemy import Column, String, LargeBinary, DateTime
from .db import Base

# -----------------------------
# ORM model for the local blob store (one row per bucket/key)
# -----------------------------
class SnapshotObject(Base):
    __tablename__ = "snapshot_objects"
    bucket     = Column(String, primary_key=True)
    key        = Column(String, primary_key=True)
    body       = Column(LargeBinary, nullable=False)             # UTF-8 JSON bytes
    updated_at = Column(DateTime(timezone=True), nullable=False)

    def __repr__(self):
        return f"<SnapshotObject(bucket={self.bucket}, key={self.key}, bytes={len(self.body or b'')})>"
