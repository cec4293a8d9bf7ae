"""Configuration management for URL shortener."""

from typing import Any, Dict, Optional
from pydantic_settings import BaseSettings
from pydantic import Field, field_validator


class Config(BaseSettings):
    """Application configuration."""

    # Admin credentials
    admin_username: str = Field(
        default="admin",
        description="Username for the admin UI and API (HTTP basic auth)"
    )

    admin_password: Optional[str] = Field(
        default=None,
        description="Password for the admin UI and API. Admin access is refused while unset."
    )

    admin_realm: str = Field(
        default="URL Shortener Admin",
        description="Realm sent in the WWW-Authenticate challenge"
    )

    # Redirect settings
    root_redirect_url: str = Field(
        default="https://tpg.rohanodwyer.com",
        description="Permanent (301) redirect target for the root path"
    )

    # Key-value store settings
    store_backend: str = Field(
        default="memory",
        description="Key-value store backend: 'memory' or 'redis'"
    )

    redis_url: str = Field(
        default="redis://localhost:6379/0",
        description="Redis connection URL (used when store_backend is 'redis')"
    )

    key_prefix: str = Field(
        default="redirect:",
        description="Namespace prepended to every short key in the store"
    )

    store_timeout_seconds: float = Field(
        default=5.0,
        gt=0,
        description="Socket connect/read timeout for the store client"
    )

    # Server settings
    host: str = Field(
        default="0.0.0.0",
        description="Host to bind to"
    )

    port: int = Field(
        default=9200,
        description="Port to listen on"
    )

    # Logging settings
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)"
    )

    log_file: Optional[str] = Field(
        default=None,
        description="Log file path (logs to stdout if not specified)"
    )

    log_json: bool = Field(
        default=False,
        description="Use JSON format for logs"
    )

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
        "extra": "ignore",  # Ignore extra environment variables
    }

    @field_validator("store_backend")
    @classmethod
    def validate_store_backend(cls, v: str) -> str:
        """Normalize and check the store backend name."""
        backend = v.strip().lower()
        if backend not in ("memory", "redis"):
            raise ValueError("store_backend must be 'memory' or 'redis'")
        return backend

    @field_validator("admin_username", "admin_password")
    @classmethod
    def validate_admin_credentials(cls, v: Optional[str], info) -> Optional[str]:
        """Basic-auth credentials are decoded as ASCII, so only ASCII can ever match."""
        if v is None:
            return v
        if not v.isascii():
            raise ValueError(f"{info.field_name} must contain only ASCII characters")
        if info.field_name == "admin_username" and ":" in v:
            raise ValueError("admin_username cannot contain ':'")
        return v

    def model_dump_safe(self) -> Dict[str, Any]:
        """Dump configuration for logging with secrets masked."""
        data = self.model_dump()
        if data.get("admin_password"):
            data["admin_password"] = "***"
        return data


def load_config() -> Config:
    """Load configuration from environment."""
    return Config()
