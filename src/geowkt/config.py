"""Configuration management using Pydantic settings."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Parser settings loaded from WKT_* environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="WKT_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Reject numeric runs such as "1--2" instead of reading them as NaN
    strict_numbers: bool = False

    # Level for the CLI's stderr sink
    log_level: str = "WARNING"

    # Output format for the CLI when --format is not given ("geojson" or "wkt")
    default_export_format: str = "geojson"


settings = Settings()
