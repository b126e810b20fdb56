"""Configuration management for bucket-listing."""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings with environment variable support."""

    log_level: str = "INFO"
    log_format: str = "json"  # json, console
    otel_enabled: bool = False
    otel_service_name: str = "bucket-listing"
    command_timeout: int = 300

    model_config = {
        "env_prefix": "BUCKET_LISTING_",
        "case_sensitive": False,
    }


settings = Settings()
