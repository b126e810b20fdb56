"""Shared CLI parameter definitions.

Each alias is an ``Annotated`` type carrying its ``typer.Option`` so command
signatures stay short and option names and help text stay consistent:

    @app.command()
    def my_command(
        hostname: SSHHostnameOption = None,
        region_name: AWSRegionOption = "us-east-1",
    ):
        ...

Parameter Categories:
    - Listing parameters: prefix, delimiter, output format
    - SSH parameters: for file-backed buckets on remote hosts
    - AWS parameters: for S3 buckets
"""

from enum import Enum
from typing import Annotated, Optional

import typer


class StorageType(str, Enum):
    """Bucket backends selectable from the CLI."""

    local = "local"
    ssh = "ssh"
    s3 = "s3"


class OutputFormat(str, Enum):
    """Output formats of the list command."""

    text = "text"
    json = "json"


# Listing parameters
StorageTypeOption = Annotated[
    StorageType,
    typer.Option(
        "--storage-type",
        "-t",
        help="Storage type: local, ssh, or s3",
        case_sensitive=False,
    ),
]

PrefixOption = Annotated[
    Optional[str],
    typer.Option("--prefix", "-p", help="Only list keys starting with this prefix"),
]

DelimiterOption = Annotated[
    Optional[str],
    typer.Option(
        "--delimiter", "-d", help="Collapse keys sharing a segment up to this string"
    ),
]

OutputOption = Annotated[
    OutputFormat,
    typer.Option("--output", "-o", help="Output format: text or json"),
]

TimeoutOption = Annotated[
    Optional[int],
    typer.Option("--timeout", help="Command timeout in seconds"),
]

# SSH parameters
SSHHostnameOption = Annotated[
    Optional[str],
    typer.Option("--hostname", help="SSH hostname (for remote buckets)"),
]

SSHUsernameOption = Annotated[
    Optional[str],
    typer.Option("--username", help="SSH username (for remote buckets)"),
]

SSHKeyOption = Annotated[
    Optional[str],
    typer.Option("--ssh-key", help="Path to SSH private key (for remote buckets)"),
]

# AWS parameters
AWSAccessKeyOption = Annotated[
    Optional[str],
    typer.Option("--access-key-id", help="AWS access key ID (for S3 paths)"),
]

AWSSecretKeyOption = Annotated[
    Optional[str],
    typer.Option("--secret-access-key", help="AWS secret access key (for S3 paths)"),
]

AWSSessionTokenOption = Annotated[
    Optional[str],
    typer.Option("--session-token", help="AWS session token (for S3 paths)"),
]

AWSRegionOption = Annotated[
    str, typer.Option("--region", help="AWS region name (for S3 paths)")
]

AWSEndpointURLOption = Annotated[
    Optional[str], typer.Option("--endpoint-url", help="Custom S3 endpoint URL")
]

AWSProfileOption = Annotated[
    Optional[str],
    typer.Option("--aws-profile", help="AWS CLI profile name (for S3 paths)"),
]
