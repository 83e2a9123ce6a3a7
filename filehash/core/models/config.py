"""
Configuration models.

Provides Pydantic models for filehash configuration with validation.
"""

from __future__ import annotations

from pathlib import Path
from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

# Type aliases
HashAlgorithm = Literal["md5", "sha1", "sha224", "sha256", "sha384", "sha512", "blake3"]
ExtraHashAlgorithm = Literal["blake3"]
LogLevel = Literal["debug", "info", "warning", "error"]

DEFAULT_BUFFER_SIZE = 128 * 1024
MAX_BUFFER_SIZE = 64 * 1024 * 1024
DEFAULT_LOG_FILE = Path.home() / ".filehash" / "filehash.log"


class ConfigBaseModel(BaseModel):
    """Base model for config sections.

    Values arrive as TOML scalars or environment strings, so types are
    coerced; unknown keys in a section are ignored.
    """

    model_config = ConfigDict(
        validate_assignment=True,
        extra="ignore",
        use_enum_values=True,
    )


class HashConfig(ConfigBaseModel):
    """Hash algorithm configuration section."""

    default: HashAlgorithm = "sha1"
    buffer_size: Annotated[int, Field(ge=1, le=MAX_BUFFER_SIZE)] = DEFAULT_BUFFER_SIZE
    extra_algorithms: list[ExtraHashAlgorithm] = Field(default_factory=list)

    @field_validator("extra_algorithms", mode="before")
    @classmethod
    def parse_comma_separated(cls, v: Any) -> list[str]:
        """Parse comma-separated string to list."""
        if isinstance(v, str):
            return [x.strip() for x in v.split(",") if x.strip()]
        return v if v else []


class LoggingConfig(ConfigBaseModel):
    """Logging configuration section."""

    level: LogLevel = "warning"
    console: bool = False
    file: bool = True
    path: Path = DEFAULT_LOG_FILE

    @field_validator("path")
    @classmethod
    def expand_home(cls, v: Path) -> Path:
        return v.expanduser()


class RealIPConfig(ConfigBaseModel):
    """Public address discovery configuration section."""

    ipv4_url: Annotated[str, Field(max_length=2048)] = "http://ifconfig.me"
    timeout: Annotated[float, Field(gt=0)] = 20.0

    @field_validator("ipv4_url", mode="before")
    @classmethod
    def validate_url(cls, v: str) -> str:
        """Validate the lookup service URL."""
        if not isinstance(v, str) or not v.startswith(("http://", "https://")):
            raise ValueError("IPv4 lookup URL must start with http:// or https://")
        return v


class FilehashConfig(ConfigBaseModel):
    """Complete filehash configuration.

    It can be loaded from TOML files or constructed programmatically.
    """

    hash: HashConfig = Field(default_factory=HashConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    realip: RealIPConfig = Field(default_factory=RealIPConfig)

    def get(self, key: str, default: Any = None) -> Any:
        """Get config value by dot-notation key.

        Args:
            key: Dot-notation key (e.g., 'hash.buffer_size')
            default: Default value if key not found

        Returns:
            Config value or default
        """
        obj: Any = self
        for part in key.split("."):
            if isinstance(obj, BaseModel) and part in type(obj).model_fields:
                obj = getattr(obj, part)
            else:
                return default
        return obj

    def to_dict(self) -> dict[str, Any]:
        """Convert to a plain nested dictionary."""
        return self.model_dump()
