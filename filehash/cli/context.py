"""
Click context extension for filehash CLI.

Provides FilehashContext dataclass that holds filehash-specific data
passed through the Click command chain via ctx.obj.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

from ..core.bootstrap import bootstrap

if TYPE_CHECKING:
    from ..core.container import ServiceContainer
    from ..core.settings import FilehashSettings
    from ..hashing.hasher import Hasher
    from ..services.interrupt import ShutdownHooks


@dataclass
class FilehashContext:
    """Extended context passed through Click command chain.

    Attributes:
        cwd: Current working directory
        container: Bootstrapped service container
    """

    cwd: Path
    container: ServiceContainer

    @classmethod
    def create(cls, cwd: Path | None = None, config_path: Path | None = None) -> FilehashContext:
        """Bootstrap services and create a context for the current environment.

        Args:
            cwd: Working directory override (defaults to Path.cwd())
            config_path: Explicit config file (defaults to searching from cwd)
        """
        if cwd is None:
            cwd = Path.cwd()
        container = bootstrap(config_path=config_path, start_dir=str(cwd))
        return cls(cwd=cwd, container=container)

    @property
    def settings(self) -> FilehashSettings:
        from ..core.settings import FilehashSettings

        return self.container.resolve(FilehashSettings)

    @property
    def hasher(self) -> Hasher:
        from ..hashing.hasher import Hasher

        return self.container.resolve(Hasher)

    @property
    def shutdown_hooks(self) -> ShutdownHooks:
        from ..services.interrupt import ShutdownHooks

        return self.container.resolve(ShutdownHooks)
