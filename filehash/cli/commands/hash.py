"""
Native Click implementation of the hash command.

Usage: filehash hash [-a ALGORITHM] [--begin N] [--end N] PATH...
"""

from __future__ import annotations

from pathlib import Path

import click

from ...hashing.ranges import make_range
from ...hashing.sources import FileSource
from ..context import FilehashContext
from ..decorators import handle_errors

_HOOK_NAME = "filehash-cli-hash"


@click.command("hash")
@click.argument(
    "paths",
    nargs=-1,
    required=True,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@click.option("-a", "--algorithm", default=None, help="Algorithm name (default: hash.default).")
@click.option("--begin", type=click.IntRange(min=0), default=0, show_default=True, help="First byte offset.")
@click.option("--end", type=click.IntRange(min=0), default=None, help="Offset after the last byte (default: end of file).")
@click.pass_obj
@handle_errors
def hash_cmd(
    ctx: FilehashContext,
    paths: tuple[Path, ...],
    algorithm: str | None,
    begin: int,
    end: int | None,
) -> None:
    """Print the digest of a byte range of each file.

    \b
    Examples:

        filehash hash disk.img                      # sha1 of the whole file

        filehash hash -a sha256 --end 4096 disk.img # first 4 KiB
    """
    name = algorithm or ctx.settings.hash.default
    byte_range = make_range(begin, end)
    hasher = ctx.hasher
    strategy = hasher.lookup(name)

    hooks = ctx.shutdown_hooks
    hooks.add(_HOOK_NAME, lambda: click.echo("Interrupted: digest not computed", err=True))
    try:
        for path in paths:
            with FileSource(path) as source:
                digest = hasher.compute(strategy, source, byte_range)
            click.echo(f"{digest.hex()}  {path}")
    finally:
        hooks.remove(_HOOK_NAME)
        if not hooks.names():
            hooks.restore()
