from typing import Optional
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import field_validator


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore"
    )

    PROJECT_NAME: str = "Influencer Orders"
    VERSION: str = "0.1.0"

    DEBUG: bool = False  # Forces DEBUG logging regardless of LOG_LEVEL

    # Export settings
    ARTIFACT_ROOT: str = "/tmp"  # Directory the order CSVs are written to
    CSV_DATE_FORMAT: str = "%m/%d/%Y %H:%M"
    CSV_TIMEZONE: str = "UTC"

    # Orders
    ORDER_NUMBER_PREFIX: str = "#IN"
    DEFAULT_SHIPMENT_METHOD: str = "GROUND"

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_DIR: Optional[str] = None  # Console only when unset

    @field_validator("LOG_LEVEL", mode="before")
    @classmethod
    def upper_log_level(cls, v: str) -> str:
        if isinstance(v, str):
            return v.strip().upper()
        return v


settings = Settings()
