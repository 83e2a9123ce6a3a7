"""
filehash settings.

Values come, highest priority first, from constructor arguments,
FILEHASH_<SECTION>__<KEY> environment variables, one TOML config file and
the model defaults. The config file is either .filehash/config.toml or the
[tool.filehash] table of a pyproject.toml, whichever is found first walking
up from the start directory.
"""

from __future__ import annotations

from contextvars import ContextVar
from pathlib import Path
from typing import Any

try:
    import tomllib
except ImportError:
    import tomli as tomllib

from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    PyprojectTomlConfigSettingsSource,
    SettingsConfigDict,
    TomlConfigSettingsSource,
)

from .di import get_logger
from .models.config import HashConfig, LoggingConfig, RealIPConfig

CONFIG_DIR_NAME = ".filehash"
CONFIG_FILE_NAME = "config.toml"
PYPROJECT_TABLE = ("tool", "filehash")

# Config file for the FilehashSettings being built by load_settings()
_active_config_file: ContextVar[Path | None] = ContextVar("filehash_config_file", default=None)


def _read_toml(path: Path) -> dict[str, Any]:
    with open(path, "rb") as f:
        return tomllib.load(f)


def _has_filehash_table(pyproject: Path) -> bool:
    try:
        data = _read_toml(pyproject)
    except (tomllib.TOMLDecodeError, OSError) as e:
        get_logger().debug("Skipping unreadable %s: %s", pyproject, e)
        return False
    return "filehash" in data.get("tool", {})


def find_config_file(start_dir: str | None = None) -> Path | None:
    """Return the nearest config file at or above start_dir (default: cwd)."""
    start = Path(start_dir) if start_dir else Path.cwd()
    for directory in (start, *start.parents):
        candidate = directory / CONFIG_DIR_NAME / CONFIG_FILE_NAME
        if candidate.is_file():
            return candidate
        pyproject = directory / "pyproject.toml"
        if pyproject.is_file() and _has_filehash_table(pyproject):
            return pyproject
    return None


class FilehashSettings(BaseSettings):
    """Merged filehash configuration: [hash], [logging] and [realip]."""

    model_config = SettingsConfigDict(
        env_prefix="FILEHASH_",
        env_nested_delimiter="__",
        extra="ignore",
        pyproject_toml_table_header=PYPROJECT_TABLE,
    )

    hash: HashConfig = HashConfig()
    logging: LoggingConfig = LoggingConfig()
    realip: RealIPConfig = RealIPConfig()

    _config_file: str | None = None
    _config_error: str | None = None

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Read init values and the environment, plus the file chosen by load_settings()."""
        path = _active_config_file.get()
        if path is None:
            return init_settings, env_settings
        if path.name == "pyproject.toml":
            file_settings: PydanticBaseSettingsSource = PyprojectTomlConfigSettingsSource(
                settings_cls, toml_file=path
            )
        else:
            file_settings = TomlConfigSettingsSource(settings_cls, toml_file=path)
        return init_settings, env_settings, file_settings

    @property
    def config_file(self) -> str | None:
        """Path of the config file the settings were read from, if any."""
        return self._config_file

    @property
    def config_error(self) -> str | None:
        """Why a config file that was found got skipped, if it did."""
        return self._config_error

    def to_dict(self) -> dict[str, Any]:
        """Sections as plain dicts, plus the config file path or error when set."""
        result: dict[str, Any] = self.model_dump(include={"hash", "logging", "realip"})
        if self._config_file:
            result["_config_file"] = self._config_file
        if self._config_error:
            result["_config_error"] = self._config_error
        return result


def load_settings(config_path: Path | None = None, start_dir: str | None = None) -> FilehashSettings:
    """
    Load settings from the environment and a config file.

    A config file that cannot be read or parsed is skipped with a warning
    and reported through FilehashSettings.config_error; values that parse
    but fail validation raise pydantic's ValidationError.

    Args:
        config_path: Explicit config file (skips the directory search)
        start_dir: Directory to search upward from (default: cwd)
    """
    path = config_path if config_path is not None else find_config_file(start_dir)
    error: str | None = None
    if path is not None:
        try:
            _read_toml(path)
        except tomllib.TOMLDecodeError as e:
            error = f"Failed to parse config file: {e}"
        except OSError as e:
            error = f"Failed to read config file: {e}"
        if error is not None:
            get_logger().warning("Ignoring config file %s: %s", path, error)
            path = None

    token = _active_config_file.set(path)
    try:
        settings = FilehashSettings()
    finally:
        _active_config_file.reset(token)

    settings._config_file = str(path) if path is not None else None
    settings._config_error = error
    return settings
