"""Flat snapshots of S3 bucket contents.

The snapshot is read without a delimiter, so every object under the path is
returned with its full key. Collapsing into common prefixes is left to
``bucket_listing.listing``.
"""

from datetime import datetime, timezone
from typing import Any, Optional

from bucket_listing.core import get_logger
from bucket_listing.core.exceptions import CommandExecutionError, ValidationError
from bucket_listing.listing.models import Entry, Owner
from bucket_listing.objectstorage.clients import S3ClientConfig, S3ClientManager

logger = get_logger(__name__)

DEFAULT_STORAGE_CLASS = "STANDARD"


class S3SnapshotReader:
    """Reads every object under an S3 path into a list of entries."""

    def __init__(self, config: S3ClientConfig):
        """Initialize S3 snapshot reader.

        Args:
            config: S3 client configuration
        """
        self.client_manager = S3ClientManager(config)
        logger.info("S3 snapshot reader initialized")

    def read_entries(self, s3_path: str) -> list[Entry]:
        """Read a flat snapshot of the objects under an S3 path.

        For objects ``s3://bucket/data/2023/a.csv`` and ``s3://bucket/data/b.csv``
        reading ``s3://bucket/data/`` returns entries keyed ``data/2023/a.csv``
        and ``data/b.csv``: keys are never shortened or grouped. The path prefix
        is therefore not a listing prefix; pass it to ``list_entries`` as well
        to list below it.

        Args:
            s3_path: S3 path in format s3://bucket or s3://bucket/prefix

        Returns:
            Entries in the order S3 returned them (ascending key order)

        Raises:
            CommandExecutionError: If S3 operations fail
            ValidationError: If path format is invalid
        """
        logger.info("Reading S3 bucket snapshot", s3_path=s3_path)

        try:
            bucket, prefix = S3ClientManager.parse_s3_path(s3_path)
            client = self.client_manager.client

            entries = []

            paginator = client.get_paginator("list_objects_v2")
            page_iterator = paginator.paginate(
                Bucket=bucket, Prefix=prefix, FetchOwner=True
            )

            for page in page_iterator:
                for obj in page.get("Contents", []):
                    entries.append(_to_entry(obj))

            logger.info(
                "S3 bucket snapshot read",
                bucket=bucket,
                prefix=prefix,
                entry_count=len(entries),
            )
            return entries

        except ValidationError:
            raise
        except Exception as e:
            error_msg = f"Failed to read S3 bucket snapshot for '{s3_path}': {e}"
            logger.error(error_msg, error=str(e))
            raise CommandExecutionError(error_msg)


def _to_entry(obj: dict[str, Any]) -> Entry:
    """Convert one ``Contents`` item of a list_objects_v2 page."""
    return Entry(
        key=obj["Key"],
        last_modified=_format_timestamp(obj.get("LastModified")),
        etag=obj.get("ETag", ""),
        size=str(obj.get("Size", 0)),
        storage_class=obj.get("StorageClass") or DEFAULT_STORAGE_CLASS,
        owner=_to_owner(obj.get("Owner")),
    )


def _to_owner(owner: Optional[dict[str, str]]) -> Owner:
    """Convert an S3 owner; canonical IDs are hex strings."""
    if not owner:
        return Owner(id=0, display_name="")

    try:
        owner_id = int(owner.get("ID", ""), 16)
    except ValueError:
        owner_id = 0
    return Owner(id=owner_id, display_name=owner.get("DisplayName", ""))


def _format_timestamp(value: Optional[datetime]) -> str:
    """Format an S3 timestamp as ISO-8601 UTC with millisecond precision."""
    if value is None:
        return ""
    moment = value.astimezone(timezone.utc)
    return moment.strftime("%Y-%m-%dT%H:%M:%S.") + f"{moment.microsecond // 1000:03d}Z"


def read_s3_entries(
    s3_path: str,
    access_key_id: Optional[str] = None,
    secret_access_key: Optional[str] = None,
    session_token: Optional[str] = None,
    region_name: str = "us-east-1",
    endpoint_url: Optional[str] = None,
    aws_profile: Optional[str] = None,
) -> list[Entry]:
    """Convenience function to read an S3 bucket snapshot.

    Args:
        s3_path: S3 path in format s3://bucket or s3://bucket/prefix
        access_key_id: AWS access key ID
        secret_access_key: AWS secret access key
        session_token: AWS session token for temporary credentials
        region_name: AWS region name
        endpoint_url: Custom S3 endpoint URL
        aws_profile: AWS CLI profile name

    Returns:
        Flat list of entries under the path
    """
    config = S3ClientConfig(
        access_key_id=access_key_id,
        secret_access_key=secret_access_key,
        session_token=session_token,
        region_name=region_name,
        endpoint_url=endpoint_url,
        aws_profile=aws_profile,
    )

    reader = S3SnapshotReader(config)
    return reader.read_entries(s3_path)
