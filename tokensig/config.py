"""Configuration management with Pydantic settings."""

from pathlib import Path
from typing import Literal

from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

from tokensig.utils.crypto import load_or_create_signing_key

DigestBackend = Literal["hashlib", "cryptography"]


class Settings(BaseSettings):
    """tokensig configuration settings.

    Precedence: CLI flag > environment variable > .env file > defaults.
    """

    model_config = SettingsConfigDict(
        env_prefix="TOKENSIG_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    key: SecretStr | None = Field(
        default=None,
        description="Shared private key used to derive tokens",
    )

    key_path: Path | None = Field(
        default=None,
        description="Key file to read (created with a random key when missing)",
    )

    algorithm: str = Field(
        default="sha256",
        description="Digest algorithm name (case-insensitive)",
    )

    validity_period: int = Field(
        default=120,
        ge=0,
        description="Maximum age in seconds of a request timestamp",
    )

    digest_backend: DigestBackend = Field(
        default="hashlib",
        description="Digest provider: hashlib or cryptography",
    )

    def get_signing_key(self) -> str:
        """Return the configured key, preferring an inline key over a key file.

        Returns an empty string when neither is configured; signing calls then
        report the missing key.
        """
        if self.key is not None:
            return self.key.get_secret_value()
        if self.key_path is not None:
            return load_or_create_signing_key(self.key_path.expanduser())
        return ""


# Global settings instance
_settings: Settings | None = None


def get_settings() -> Settings:
    """Get or create the global settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def set_settings(settings: Settings) -> None:
    """Set the global settings instance (useful for testing)."""
    global _settings
    _settings = settings
