"""
Configuration module for PayMongo SDK.
"""

import os
from typing import Optional

from dotenv import find_dotenv, load_dotenv
from pydantic import BaseModel, Field, ValidationError, field_validator, model_validator

from .exceptions import ConfigurationError

DEFAULT_BASE_URL = "https://api.paymongo.com/v1"


class ClientConfig(BaseModel):
    """
    SDK client configuration

    Supports environment variables through :meth:`from_env`:
    - PAYMONGO_SECRET_KEY (or SECRET_KEY): secret key, ``sk_...``
    - PAYMONGO_PUBLIC_KEY (or PUBLIC_KEY): public key, ``pk_...``
    - PAYMONGO_BASE_URL: API base URL (default: https://api.paymongo.com/v1)
    """

    secret_key: Optional[str] = Field(None, description="PayMongo secret key (sk_...)")
    public_key: Optional[str] = Field(None, description="PayMongo public key (pk_...)")
    base_url: str = Field(DEFAULT_BASE_URL, description="API base URL")
    timeout_connect: float = Field(5.0, description="Connection timeout in seconds")
    timeout_read: float = Field(30.0, description="Read timeout in seconds")
    verify_ssl: bool = Field(True, description="Verify SSL certificates")
    debug: bool = Field(False, description="Enable debug logging")

    @field_validator("secret_key")
    @classmethod
    def validate_secret_key(cls, v):
        if v and not v.startswith("sk_"):
            raise ValueError("Secret key must start with 'sk_'")
        return v

    @field_validator("public_key")
    @classmethod
    def validate_public_key(cls, v):
        if v and not v.startswith("pk_"):
            raise ValueError("Public key must start with 'pk_'")
        return v

    @field_validator("timeout_connect", "timeout_read")
    @classmethod
    def validate_timeout(cls, v):
        if v <= 0:
            raise ValueError("Timeouts must be positive")
        return v

    @model_validator(mode="after")
    def require_a_key(self):
        if not self.secret_key and not self.public_key:
            raise ValueError("Either secret_key or public_key is required")
        return self

    @classmethod
    def from_env(cls, env_file: Optional[str] = None, **overrides) -> "ClientConfig":
        """
        Build configuration from environment variables

        Values already present in the process environment win over the
        ``.env`` file.

        Args:
            env_file: Path to a .env file. When omitted, the nearest .env
                found walking up from the working directory is used.
            **overrides: Explicit field values taking precedence over env

        Returns:
            ClientConfig
        """
        path = env_file or find_dotenv(usecwd=True)
        if path:
            load_dotenv(path)

        values = {
            "secret_key": os.getenv("PAYMONGO_SECRET_KEY") or os.getenv("SECRET_KEY"),
            "public_key": os.getenv("PAYMONGO_PUBLIC_KEY") or os.getenv("PUBLIC_KEY"),
            "base_url": os.getenv("PAYMONGO_BASE_URL") or DEFAULT_BASE_URL,
        }
        values.update({k: v for k, v in overrides.items() if v is not None})
        try:
            return cls(**values)
        except ValidationError as e:
            raise ConfigurationError(str(e)) from e

    def __repr__(self) -> str:
        return (
            f"ClientConfig(base_url={self.base_url!r}, "
            f"secret_key={'***REDACTED***' if self.secret_key else None}, "
            f"public_key={'***REDACTED***' if self.public_key else None})"
        )

    __str__ = __repr__
