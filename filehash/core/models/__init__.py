"""
Pydantic models for filehash.

Configuration sections, validated with Pydantic v2.
"""

from .config import (
    ConfigBaseModel,
    FilehashConfig,
    HashConfig,
    LoggingConfig,
    RealIPConfig,
)

__all__ = [
    "ConfigBaseModel",
    "FilehashConfig",
    "HashConfig",
    "LoggingConfig",
    "RealIPConfig",
]
