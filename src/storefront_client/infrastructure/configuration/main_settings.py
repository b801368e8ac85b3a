from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class StorefrontSettings(BaseSettings):
    """
    Settings for the storefront API client.
    Values come from STOREFRONT_* environment variables or a local .env file.
    """
    api_base_url: str = Field(default="http://localhost:5000/api", description="Storefront REST API root")
    request_timeout: float = Field(default=10.0, gt=0)

    # Client-side storage
    storage_dir: Path = Path("./runtime_data")
    storage_file: str = "client_storage.json"

    # Navigation and display
    login_path: str = "/login"
    placeholder_image: str = "/images/products/headphones.png"
    shipping_cost: float = Field(default=10.0, ge=0)
    offers_discount_threshold: float = Field(default=20.0, ge=0, le=100)

    # Logging, applied by build_container(configure_logs=True)
    log_level: str = "INFO"
    log_format: Literal["auto", "json", "console"] = "auto"

    @field_validator("api_base_url")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")

    @field_validator("log_level")
    @classmethod
    def _known_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"Unknown log level: {value}")
        return level

    @property
    def storage_path(self) -> Path:
        return self.storage_dir / self.storage_file

    @property
    def refresh_url(self) -> str:
        return f"{self.api_base_url}/auth/refresh"

    model_config = SettingsConfigDict(
        env_prefix="STOREFRONT_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore"
    )
