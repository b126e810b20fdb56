"""Command-line interface for bucket-listing.

Commands:
    - list: List a bucket with prefix and delimiter semantics

Storage type must be explicitly specified using --storage-type flag.
Only relevant parameters for each storage type are used.
"""

from typing import Annotated, Optional

import typer

from . import __version__
from .cli_params import (
    AWSAccessKeyOption,
    AWSEndpointURLOption,
    AWSProfileOption,
    AWSRegionOption,
    AWSSecretKeyOption,
    AWSSessionTokenOption,
    DelimiterOption,
    OutputFormat,
    OutputOption,
    PrefixOption,
    SSHHostnameOption,
    SSHKeyOption,
    SSHUsernameOption,
    StorageType,
    StorageTypeOption,
    TimeoutOption,
)
from .core import settings
from .listing import ListingResult
from .schemas import (
    ListBucketResponse,
    LocalStorageConfig,
    S3StorageConfig,
    SSHStorageConfig,
)
from .unified import list_storage_contents

app = typer.Typer(
    name="bucket-listing",
    help="Object-storage style listings of flat key namespaces.",
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Display version information."""
    if value:
        typer.echo(f"bucket-listing {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        Optional[bool],
        typer.Option("--version", callback=version_callback, help="Show version."),
    ] = None,
) -> None:
    """
    Bucket-Listing: prefix and delimiter listings for local, SSH, and S3 buckets.
    """
    pass


def _create_storage_config(
    storage_type: StorageType,
    hostname: Optional[str] = None,
    username: Optional[str] = None,
    ssh_key: Optional[str] = None,
    access_key_id: Optional[str] = None,
    secret_access_key: Optional[str] = None,
    session_token: Optional[str] = None,
    region_name: Optional[str] = None,
    endpoint_url: Optional[str] = None,
    aws_profile: Optional[str] = None,
):
    """Create appropriate storage configuration based on storage type."""
    if storage_type == "ssh":
        if not all([hostname, username, ssh_key]):
            raise ValueError(
                "SSH storage requires --hostname, --username, and --ssh-key"
            )

        assert hostname is not None
        assert username is not None
        assert ssh_key is not None

        return SSHStorageConfig(
            hostname=hostname,
            username=username,
            ssh_key_path=ssh_key,
        )

    elif storage_type == "s3":
        return S3StorageConfig(
            access_key_id=access_key_id,
            secret_access_key=secret_access_key,
            session_token=session_token,
            region_name=region_name,
            endpoint_url=endpoint_url,
            aws_profile=aws_profile,
        )

    elif storage_type == "local":
        return LocalStorageConfig()

    else:
        raise ValueError(
            f"Invalid storage type: {storage_type}. Must be 'local', 'ssh', or 's3'"
        )


def _echo_text(result: ListingResult) -> None:
    """Print common prefixes, then keys, one per line."""
    common_prefixes = sorted(result.common_prefixes)
    keys = sorted(result.keys)

    if not common_prefixes and not keys:
        typer.echo("No keys found.")
        return

    for common_prefix in common_prefixes:
        typer.echo(f"PRE {common_prefix}")
    for key in keys:
        typer.echo(key)


@app.command("list")
def list_cmd(
    path: Annotated[
        str,
        typer.Argument(
            help="Bucket directory (keys are relative to it) or "
            "s3://bucket\\[/prefix] (the prefix only narrows the read, keys stay "
            "absolute)"
        ),
    ],
    storage_type: StorageTypeOption,
    prefix: PrefixOption = None,
    delimiter: DelimiterOption = None,
    output: OutputOption = OutputFormat.text,
    # SSH options
    hostname: SSHHostnameOption = None,
    username: SSHUsernameOption = None,
    ssh_key: SSHKeyOption = None,
    # S3 options
    access_key_id: AWSAccessKeyOption = None,
    secret_access_key: AWSSecretKeyOption = None,
    session_token: AWSSessionTokenOption = None,
    region_name: AWSRegionOption = "us-east-1",
    endpoint_url: AWSEndpointURLOption = None,
    aws_profile: AWSProfileOption = None,
    # Common options
    timeout: TimeoutOption = None,
) -> None:
    """
    List a bucket, collapsing keys into common prefixes at the delimiter.

    For a directory, keys are file paths relative to that directory. For S3,
    keys are always full object keys: a prefix in the s3:// path only limits
    what is read, so pass the same value as --prefix to list below it.

    Examples:
        Local: bucket-listing list /srv/buckets/photos --storage-type local \
               --delimiter /
        SSH: bucket-listing list /srv/buckets/photos --storage-type ssh \
             --hostname server.com --username user --ssh-key ~/.ssh/id_rsa \
             --prefix 2024/ --delimiter /
        S3: bucket-listing list s3://bucket --storage-type s3 \
            --aws-profile myprofile --prefix data/ --delimiter / --output json
        S3 below a prefix: bucket-listing list s3://bucket/data/ \
            --storage-type s3 --prefix data/ --delimiter /
    """
    try:
        config = _create_storage_config(
            storage_type=storage_type,
            hostname=hostname,
            username=username,
            ssh_key=ssh_key,
            access_key_id=access_key_id,
            secret_access_key=secret_access_key,
            session_token=session_token,
            region_name=region_name,
            endpoint_url=endpoint_url,
            aws_profile=aws_profile,
        )

        result = list_storage_contents(
            path=path,
            config=config,
            prefix=prefix,
            delimiter=delimiter,
            timeout=timeout if timeout is not None else settings.command_timeout,
        )

        if output == OutputFormat.json:
            typer.echo(ListBucketResponse.from_result(result).model_dump_json(indent=2))
        else:
            _echo_text(result)

    except Exception as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)


if __name__ == "__main__":
    app()
