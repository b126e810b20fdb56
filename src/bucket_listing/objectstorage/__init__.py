"""Object storage snapshot sources for S3-compatible services."""

from .clients import S3ClientConfig, S3ClientManager
from .snapshot import S3SnapshotReader, read_s3_entries

__all__ = [
    "S3ClientConfig",
    "S3ClientManager",
    "S3SnapshotReader",
    "read_s3_entries",
]
