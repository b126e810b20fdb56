"""Storage configuration and response schemas for bucket-listing."""

from typing import Literal, Optional, Union

from pydantic import BaseModel, Field

from .listing.models import Entry, ListingResult, Owner


class LocalStorageConfig(BaseModel):
    """Configuration for a file-backed bucket on the local filesystem."""
    type: Literal["local"] = "local"


class SSHStorageConfig(BaseModel):
    """Configuration for a file-backed bucket on a remote host."""
    type: Literal["ssh"] = "ssh"
    hostname: str = Field(..., description="SSH server hostname")
    username: str = Field(..., description="SSH username")
    ssh_key_path: str = Field(..., description="Path to SSH private key file")
    port: int = Field(default=22, description="SSH port")


class S3StorageConfig(BaseModel):
    """Configuration for S3 object storage."""
    type: Literal["s3"] = "s3"
    access_key_id: str | None = Field(default=None, description="AWS access key ID")
    secret_access_key: str | None = Field(
        default=None, description="AWS secret access key"
    )
    session_token: str | None = Field(default=None, description="AWS session token")
    region_name: str | None = Field(default=None, description="AWS region")
    endpoint_url: str | None = Field(default=None, description="Custom S3 endpoint URL")
    aws_profile: str | None = Field(default=None, description="AWS profile name")


# Discriminated union for storage configurations
StorageConfig = Union[LocalStorageConfig, SSHStorageConfig, S3StorageConfig]


class OwnerResponse(BaseModel):
    """Owner element of a list-bucket response."""
    id: int
    display_name: str

    @classmethod
    def from_owner(cls, owner: Owner) -> "OwnerResponse":
        return cls(id=owner.id, display_name=owner.display_name)


class EntryResponse(BaseModel):
    """Contents element of a list-bucket response."""
    key: str
    last_modified: str
    etag: str
    size: str
    storage_class: str
    owner: OwnerResponse

    @classmethod
    def from_entry(cls, entry: Entry) -> "EntryResponse":
        return cls(
            key=entry.key,
            last_modified=entry.last_modified,
            etag=entry.etag,
            size=entry.size,
            storage_class=entry.storage_class,
            owner=OwnerResponse.from_owner(entry.owner),
        )


class ListBucketResponse(BaseModel):
    """List-bucket response with deterministic ordering for output."""
    prefix: Optional[str] = None
    delimiter: Optional[str] = None
    common_prefixes: list[str] = Field(default_factory=list)
    contents: list[EntryResponse] = Field(default_factory=list)

    @classmethod
    def from_result(cls, result: ListingResult) -> "ListBucketResponse":
        """Build a response from a listing result, sorted by key."""
        return cls(
            prefix=result.prefix,
            delimiter=result.delimiter,
            common_prefixes=sorted(result.common_prefixes),
            contents=[
                EntryResponse.from_entry(entry)
                for entry in sorted(result.entries, key=lambda e: e.key)
            ],
        )
