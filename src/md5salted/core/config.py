"""Settings for the salted MD5 encryptor.

Values are read from ``MD5SALTED_*`` environment variables. The defaults
match what existing legacy hashes were produced with, so most hosts never
need to set anything.
"""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class HashingConfig(BaseSettings):
    """Pydantic settings container for the encryptor."""

    model_config = SettingsConfigDict(env_prefix="MD5SALTED_")

    default_factor: int = Field(
        default=1,
        ge=1,
        description="Iteration factor used when the host has none configured.",
    )
    log_level: str = Field(
        default="INFO",
        min_length=1,
        description="Root log level applied by configure_logging().",
    )

    @classmethod
    def build_default(cls) -> "HashingConfig":
        """Construct configuration from the environment and defaults."""

        return cls()


__all__ = ["HashingConfig"]
