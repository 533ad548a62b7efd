"""Configuration management with Pydantic and XDG base directory support."""

import os
from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from gmsign.utils.crypto import DEFAULT_SIGNER_ID, check_signer_id


def get_xdg_config_home() -> Path:
    """Get XDG_CONFIG_HOME directory, defaulting to ~/.config."""
    xdg_config = os.getenv("XDG_CONFIG_HOME")
    if xdg_config:
        return Path(xdg_config)
    return Path.home() / ".config"


ContainerName = Literal["gbt35275", "digital"]
LogLevel = Literal["debug", "info", "warning", "error", "critical"]


class Settings(BaseSettings):
    """gmsign configuration settings.

    Precedence: CLI flag > environment variable > config file > defaults.
    """

    model_config = SettingsConfigDict(
        env_prefix="GMSIGN_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Directories
    config_dir: Path | None = Field(
        default=None,
        description="Override config directory (defaults to XDG_CONFIG_HOME/gmsign)",
    )

    # Signing identity
    certificate_path: Path | None = Field(
        default=None,
        description="SM2 signing certificate, PEM or DER (defaults to config_dir/signing.crt)",
    )

    private_key_path: Path | None = Field(
        default=None,
        description="SM2 private key, PKCS#8/SEC1 PEM or DER or hex (defaults to config_dir/signing.key)",
    )

    signer_id: str = Field(
        default=DEFAULT_SIGNER_ID.decode("ascii"),
        min_length=1,
        description="SM2 signer identity hashed into Z (GB/T 35276 default)",
    )

    # Signing behaviour
    container: ContainerName = Field(
        default="gbt35275",
        description="Signature container: gbt35275 (SignedData) or digital (bare SM2 value)",
    )

    wrap_content_info: bool = Field(
        default=False,
        description="Wrap GB/T 35275 SignedData in a signedData ContentInfo",
    )

    read_chunk_size: int = Field(
        default=65536,
        ge=1,
        description="Chunk size used when reading data to sign",
    )

    log_level: LogLevel = Field(
        default="warning",
        description="Logging level for the CLI",
    )

    @field_validator("signer_id")
    @classmethod
    def _signer_id_fits_entl(cls, value: str) -> str:
        check_signer_id(value.encode("utf-8"))
        return value

    def get_config_dir(self) -> Path:
        """Get the config directory, creating if necessary."""
        if self.config_dir:
            config_dir = self.config_dir
        else:
            config_dir = get_xdg_config_home() / "gmsign"

        config_dir.mkdir(parents=True, exist_ok=True)
        return config_dir

    def get_certificate_path(self) -> Path:
        """Return the signing certificate location."""
        if self.certificate_path is not None:
            return self.certificate_path
        return self.get_config_dir() / "signing.crt"

    def get_private_key_path(self) -> Path:
        """Return the signing private key location."""
        if self.private_key_path is not None:
            return self.private_key_path
        return self.get_config_dir() / "signing.key"

    def get_signer_id(self) -> bytes:
        """Return the SM2 signer identity as bytes."""
        return self.signer_id.encode("utf-8")


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
