"""
Core infrastructure for filehash.

This module provides:
- ServiceContainer: DI container using dependency-injector
- Application bootstrap for initialization
- Protocol definitions for service interfaces
- Custom exception hierarchy
"""

from .bootstrap import bootstrap, is_initialized, reset
from .container import ServiceContainer, get_container
from .exceptions import (
    AlgorithmNotSupportedError,
    ConfigFileError,
    ConfigValidationError,
    FilehashConfigError,
    FilehashException,
    FilehashHashingError,
    FilehashValidationError,
    InvalidRangeError,
    IPNotFoundError,
    RealIPError,
    RealIPRequestError,
    RegistryFrozenError,
    SourceReadError,
    UnknownAddressFamilyError,
)

__all__ = [
    "AlgorithmNotSupportedError",
    "ConfigFileError",
    "ConfigValidationError",
    "FilehashConfigError",
    "FilehashException",
    "FilehashHashingError",
    "FilehashValidationError",
    "IPNotFoundError",
    "InvalidRangeError",
    "RealIPError",
    "RealIPRequestError",
    "RegistryFrozenError",
    "ServiceContainer",
    "SourceReadError",
    "UnknownAddressFamilyError",
    "bootstrap",
    "get_container",
    "is_initialized",
    "reset",
]
