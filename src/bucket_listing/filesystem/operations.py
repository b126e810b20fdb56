"""Snapshot operations for file-backed buckets.

A file-backed bucket is a directory: every regular file below it is an
object whose key is the file path relative to the bucket root, with ``/`` as
separator. This module reads such a bucket into a flat list of entries, either
locally or on a remote system accessed via SSH.
"""

import os
import shlex
import subprocess
from datetime import datetime, timezone

from bucket_listing.core import get_logger
from bucket_listing.core.exceptions import CommandExecutionError, ValidationError
from bucket_listing.listing.models import Entry, Owner

logger = get_logger(__name__)

STORAGE_CLASS = "STANDARD"

# NUL-terminated records: key, size, mtime, uid, user
_FIND_FORMAT = "%P\\t%s\\t%T@\\t%U\\t%u\\0"


def _snapshot_command(path: str) -> str:
    """Build the find command that prints one record per regular file."""
    return f"find {shlex.quote(path)} -type f -printf '{_FIND_FORMAT}'"


def _validate_ssh_key(ssh_key: str) -> None:
    """Validate SSH key file exists and is readable.

    Args:
        ssh_key: Path to SSH private key file

    Raises:
        ValidationError: If SSH key file is invalid
    """
    if not os.path.isfile(ssh_key) or not os.access(ssh_key, os.R_OK):
        logger.error("SSH key validation failed", ssh_key=ssh_key)
        raise ValidationError(f"SSH key file {ssh_key} is missing or unreadable")


def _execute_local_command(
    command: str, timeout: int
) -> subprocess.CompletedProcess[str]:
    """Execute a command locally.

    Args:
        command: Shell command to execute
        timeout: Command timeout in seconds

    Returns:
        CompletedProcess result from subprocess.run
    """
    return subprocess.run(
        command,
        shell=True,
        capture_output=True,
        text=True,
        encoding="utf-8",
        errors="surrogateescape",
        timeout=timeout,
    )


def _execute_ssh_command(
    hostname: str,
    username: str,
    ssh_key: str,
    remote_command: str,
    timeout: int,
    port: int = 22,
) -> subprocess.CompletedProcess[str]:
    """Execute a command on remote host via SSH.

    Args:
        hostname: Remote host to connect to
        username: SSH username
        ssh_key: Path to SSH private key file
        remote_command: Command to execute on remote host
        timeout: Command timeout in seconds
        port: SSH port

    Returns:
        CompletedProcess result from subprocess.run
    """
    _validate_ssh_key(ssh_key)

    ssh_cmd = [
        "ssh",
        "-i",
        ssh_key,
        "-p",
        str(port),
        "-o",
        "ConnectTimeout=30",
        "-o",
        "BatchMode=yes",
        f"{username}@{hostname}",
        remote_command,
    ]

    return subprocess.run(
        ssh_cmd,
        capture_output=True,
        text=True,
        encoding="utf-8",
        errors="surrogateescape",
        timeout=timeout,
    )


def list_local_entries(path: str, timeout: int = 300) -> list[Entry]:
    """Read a local file-backed bucket into a flat snapshot.

    Args:
        path: Bucket root directory
        timeout: Command timeout in seconds

    Returns:
        One entry per regular file below the bucket root

    Raises:
        CommandExecutionError: If command execution fails
    """
    logger.info("Reading local bucket snapshot", path=path)

    try:
        result = _execute_local_command(_snapshot_command(path), timeout)
        return _parse_snapshot_output(result)
    except CommandExecutionError:
        raise
    except subprocess.TimeoutExpired:
        error_msg = f"Command timed out after {timeout} seconds"
        logger.error(error_msg, path=path, timeout=timeout)
        raise CommandExecutionError(error_msg)
    except Exception as e:
        error_msg = f"Failed to read local bucket '{path}': {e}"
        logger.error(error_msg, error=str(e))
        raise CommandExecutionError(error_msg)


def list_remote_entries(
    hostname: str,
    username: str,
    ssh_key: str,
    path: str,
    timeout: int = 300,
    port: int = 22,
) -> list[Entry]:
    """Read a remote file-backed bucket into a flat snapshot.

    Args:
        hostname: Remote host to connect to
        username: SSH username
        ssh_key: Path to SSH private key file
        path: Remote bucket root directory
        timeout: Command timeout in seconds
        port: SSH port

    Returns:
        One entry per regular file below the bucket root

    Raises:
        ValidationError: If the SSH key file is invalid
        CommandExecutionError: If command execution fails
    """
    logger.info(
        "Reading remote bucket snapshot",
        hostname=hostname,
        username=username,
        path=path,
    )

    try:
        result = _execute_ssh_command(
            hostname, username, ssh_key, _snapshot_command(path), timeout, port
        )
        return _parse_snapshot_output(result)
    except (CommandExecutionError, ValidationError):
        raise
    except subprocess.TimeoutExpired:
        error_msg = f"Command timed out after {timeout} seconds"
        logger.error(error_msg, hostname=hostname, path=path, timeout=timeout)
        raise CommandExecutionError(error_msg)
    except Exception as e:
        error_msg = f"Failed to read remote bucket '{hostname}:{path}': {e}"
        logger.error(error_msg, error=str(e))
        raise CommandExecutionError(error_msg)


def _parse_snapshot_output(result: subprocess.CompletedProcess[str]) -> list[Entry]:
    """Parse find output into entries.

    Args:
        result: CompletedProcess from subprocess.run

    Files whose names are not valid UTF-8 are skipped with a warning.

    Returns:
        Entries in the order find printed them

    Raises:
        CommandExecutionError: If command failed or a record is malformed
    """
    if result.returncode != 0:
        error_msg = f"Command failed: {result.stderr.strip()}"
        logger.error(error_msg, returncode=result.returncode)
        raise CommandExecutionError(error_msg)

    entries = []
    for record in result.stdout.split("\0"):
        if not record:
            continue
        if not _is_utf8(record):
            logger.warning("Skipping file with undecodable name", record=ascii(record))
            continue
        entries.append(_parse_record(record))

    logger.info("Bucket snapshot parsed", entry_count=len(entries))
    return entries


def _is_utf8(record: str) -> bool:
    # Undecodable bytes come through as lone surrogates
    try:
        record.encode("utf-8")
    except UnicodeEncodeError:
        return False
    return True


def _parse_record(record: str) -> Entry:
    """Turn one ``key\\tsize\\tmtime\\tuid\\tuser`` record into an entry."""
    # Keys may themselves contain tabs, so split from the right
    fields = record.rsplit("\t", 4)
    if len(fields) != 5 or not fields[0]:
        error_msg = f"Unexpected snapshot record: {record!r}"
        logger.error(error_msg)
        raise CommandExecutionError(error_msg)

    key, size, mtime, uid, user = fields
    try:
        size_bytes = int(size)
        modified = float(mtime)
        owner = Owner(id=int(uid), display_name=user)
    except ValueError as e:
        error_msg = f"Failed to parse snapshot record {record!r}: {e}"
        logger.error(error_msg, error=str(e))
        raise CommandExecutionError(error_msg)

    return Entry(
        key=key,
        last_modified=_format_timestamp(modified),
        etag=f'"{int(modified):x}-{size_bytes:x}"',
        size=str(size_bytes),
        storage_class=STORAGE_CLASS,
        owner=owner,
    )


def _format_timestamp(epoch_seconds: float) -> str:
    """Format an epoch timestamp as ISO-8601 UTC with millisecond precision."""
    moment = datetime.fromtimestamp(epoch_seconds, tz=timezone.utc)
    return moment.strftime("%Y-%m-%dT%H:%M:%S.") + f"{moment.microsecond // 1000:03d}Z"
