"""boto3 client creation for S3 snapshot reads."""

from .s3_client import S3ClientConfig, S3ClientManager

__all__ = ["S3ClientConfig", "S3ClientManager"]
