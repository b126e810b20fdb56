"""Unified listing operations across file-backed and S3 buckets."""

from typing import Optional

from bucket_listing.core import get_logger
from bucket_listing.core.exceptions import ValidationError
from bucket_listing.filesystem import list_local_entries, list_remote_entries
from bucket_listing.listing import Entry, ListingResult, list_entries
from bucket_listing.objectstorage.snapshot import read_s3_entries
from bucket_listing.schemas import (
    S3StorageConfig,
    SSHStorageConfig,
    StorageConfig,
)

logger = get_logger(__name__)


def load_entries(
    path: str,
    config: StorageConfig,
    timeout: int = 300,
) -> list[Entry]:
    """
    Read a flat snapshot of a bucket.

    Args:
        path: Bucket location (directory, or s3://bucket[/prefix])
        config: Storage configuration (LocalStorageConfig, SSHStorageConfig,
            or S3StorageConfig)
        timeout: Command timeout in seconds (file-backed buckets only)

    Returns:
        Entries with full, unfiltered keys
    """
    if isinstance(config, S3StorageConfig):
        return read_s3_entries(
            s3_path=path,
            access_key_id=config.access_key_id,
            secret_access_key=config.secret_access_key,
            session_token=config.session_token,
            region_name=config.region_name or "us-east-1",
            endpoint_url=config.endpoint_url,
            aws_profile=config.aws_profile,
        )

    elif isinstance(config, SSHStorageConfig):
        return list_remote_entries(
            hostname=config.hostname,
            username=config.username,
            ssh_key=config.ssh_key_path,
            path=path,
            timeout=timeout,
            port=config.port,
        )

    else:  # LocalStorageConfig
        return list_local_entries(path, timeout)


def list_storage_contents(
    path: str,
    config: StorageConfig,
    prefix: Optional[str] = None,
    delimiter: Optional[str] = None,
    timeout: int = 300,
) -> ListingResult:
    """
    List a bucket with prefix and delimiter semantics.

    Args:
        path: Bucket location (directory, or s3://bucket[/prefix])
        config: Storage configuration (LocalStorageConfig, SSHStorageConfig,
            or S3StorageConfig)
        prefix: Only keys starting with this prefix are listed
        delimiter: Keys sharing a segment up to this delimiter are collapsed
        timeout: Command timeout in seconds (file-backed buckets only)

    Returns:
        ListingResult with common prefixes and remaining entries

    Raises:
        ValidationError: If the snapshot cannot be read
    """
    logger.info(
        "Listing storage contents",
        path=path,
        storage_type=config.type,
        prefix=prefix,
        delimiter=delimiter,
    )

    try:
        entries = load_entries(path, config, timeout)
    except Exception as e:
        error_msg = f"Failed to list storage contents '{path}': {e}"
        logger.error(error_msg, error=str(e))
        raise ValidationError(error_msg)

    return list_entries(entries, prefix=prefix, delimiter=delimiter)
