"""Configuration loading and lookup for filehash."""

from pathlib import Path
from typing import Any

from .core.exceptions import ConfigValidationError
from .core.models.config import DEFAULT_BUFFER_SIZE, DEFAULT_LOG_FILE
from .core.settings import find_config_file, load_settings

# Algorithms registered in every default registry
DEFAULT_HASH_ALGORITHMS = ("md5", "sha1", "sha224", "sha256", "sha384", "sha512")

# Algorithms that can be switched on with hash.extra_algorithms
EXTRA_HASH_ALGORITHMS = ("blake3",)

VALID_HASH_ALGORITHMS = set(DEFAULT_HASH_ALGORITHMS) | set(EXTRA_HASH_ALGORITHMS)

# Config keys shown by `filehash config`
CONFIGURABLE_KEYS = {
    "hash.default": {
        "type": str,
        "default": "sha1",
        "description": "Algorithm used when none is given (md5, sha1, sha224, sha256, ...)",
    },
    "hash.buffer_size": {
        "type": int,
        "default": DEFAULT_BUFFER_SIZE,
        "description": "Bytes transferred from the source per read",
    },
    "hash.extra_algorithms": {
        "type": list,
        "default": [],
        "description": "Optional algorithms to register besides the defaults (blake3)",
    },
    "logging.level": {
        "type": str,
        "default": "warning",
        "description": "Log level (debug, info, warning, error)",
    },
    "logging.console": {
        "type": bool,
        "default": False,
        "description": "Output debug logs to stderr",
    },
    "logging.file": {
        "type": bool,
        "default": True,
        "description": "Write logs to the file named by logging.path",
    },
    "logging.path": {
        "type": Path,
        "default": DEFAULT_LOG_FILE,
        "description": "Rotating log file (default ~/.filehash/filehash.log)",
    },
    "realip.ipv4_url": {
        "type": str,
        "default": "http://ifconfig.me",
        "description": "Service answering with the caller's public IPv4 address",
    },
    "realip.timeout": {
        "type": float,
        "default": 20.0,
        "description": "Timeout in seconds for the public address lookup",
    },
}


def _get_nested(d: dict, key: str, default=None):
    """Get a nested key like 'hash.buffer_size'."""
    for part in key.split("."):
        if isinstance(d, dict) and part in d:
            d = d[part]
        else:
            return default
    return d


def load_config(config_path: Path | None = None, start_dir: str | None = None) -> dict:
    """
    Load configuration from file and environment.

    Args:
        config_path: Explicit path to config file
        start_dir: Directory to start searching from (if config_path not given)

    Returns:
        Configuration dict with defaults applied
    """
    settings = load_settings(config_path=config_path, start_dir=start_dir)
    return settings.to_dict()


def config_get(key: str, start_dir: str | None = None) -> Any:
    """Get a config value by dotted key.

    Raises:
        ConfigValidationError: If the key is not a known configuration key
    """
    if key not in CONFIGURABLE_KEYS:
        raise ConfigValidationError(
            f"Unknown config key: {key}. Valid keys: {', '.join(CONFIGURABLE_KEYS)}",
            key=key,
        )
    config = load_config(start_dir=start_dir)
    return _get_nested(config, key, CONFIGURABLE_KEYS[key]["default"])


def config_list() -> dict:
    """List all configurable keys with descriptions."""
    return CONFIGURABLE_KEYS


__all__ = [
    "CONFIGURABLE_KEYS",
    "DEFAULT_HASH_ALGORITHMS",
    "EXTRA_HASH_ALGORITHMS",
    "VALID_HASH_ALGORITHMS",
    "config_get",
    "config_list",
    "find_config_file",
    "load_config",
]
