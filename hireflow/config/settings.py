"""
HireFlow Configuration Module

Environment-based configuration with fail-fast validation.
All settings are loaded from environment variables with sensible defaults.
"""

from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings with validation."""

    model_config = SettingsConfigDict(
        env_prefix="HIREFLOW_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Environment
    env: Literal["development", "production"] = Field(
        default="development",
        description="Application environment",
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO",
        description="Logging level",
    )
    data_dir: Path = Field(
        default=Path("./data"),
        description="Directory for runtime data (db, token key)",
    )

    # Storage
    db_busy_timeout: float = Field(
        default=5.0,
        gt=0,
        description="Seconds a connection waits on a locked database",
    )

    # Notifications
    notifications_enabled: bool = Field(
        default=False,
        description="Send real email; when off, notifications are only logged",
    )
    notification_sender: str = Field(
        default="no-reply@hireflow.local",
        description="From address used for candidate notifications",
    )
    notification_timeout: float = Field(
        default=10.0,
        gt=0,
        description="Seconds to wait for the dispatcher before reporting failure",
    )
    smtp_host: str = Field(default="localhost", description="SMTP server host")
    smtp_port: int = Field(default=587, ge=1, le=65535, description="SMTP server port")
    smtp_username: str = Field(default="", description="SMTP login (empty skips auth)")
    smtp_password: str = Field(default="", description="SMTP password")
    smtp_use_tls: bool = Field(default=True, description="Upgrade the SMTP session with STARTTLS")

    # Queries
    applicants_page_size: int = Field(
        default=0,
        ge=0,
        description="Default page size for applicant listings (0 = unlimited)",
    )

    # Identity
    token_max_age: int = Field(
        default=86400,
        ge=0,
        description="Bearer token lifetime in seconds (0 disables expiry)",
    )

    @field_validator("data_dir", mode="before")
    @classmethod
    def ensure_path(cls, v: str | Path) -> Path:
        """Convert string to Path."""
        return Path(v)

    def ensure_data_dir(self) -> None:
        """Create data directory if it doesn't exist."""
        self.data_dir.mkdir(parents=True, exist_ok=True)

    @property
    def database_path(self) -> Path:
        """Path to SQLite database."""
        return self.data_dir / "hireflow.db"

    @property
    def token_key_path(self) -> Path:
        """Path to the bearer token signing key."""
        return self.data_dir / ".key"


def get_settings() -> Settings:
    """
    Get validated settings instance.

    Raises:
        ValidationError: If required settings are missing or invalid.
    """
    settings = Settings()
    settings.ensure_data_dir()
    return settings
