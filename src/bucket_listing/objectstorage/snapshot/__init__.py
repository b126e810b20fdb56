"""Snapshot readers for S3 buckets."""

from .bucket_contents import S3SnapshotReader, read_s3_entries

__all__ = ["S3SnapshotReader", "read_s3_entries"]
