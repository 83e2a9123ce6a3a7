"""
Click command implementations for filehash CLI.

Each module corresponds to a filehash command (e.g., hash.py implements
'filehash hash'). Commands are registered with the main CLI group via the
register_commands() function in filehash.cli.
"""

from .algorithms import algorithms
from .config import config
from .hash import hash_cmd
from .realip import realip

COMMANDS = [
    algorithms,
    config,
    hash_cmd,
    realip,
]

__all__ = ["COMMANDS"]
