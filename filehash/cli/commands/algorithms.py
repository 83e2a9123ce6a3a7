"""
Native Click implementation of the algorithms command.

Usage: filehash algorithms
"""

import click

from ..context import FilehashContext
from ..decorators import handle_errors


@click.command("algorithms")
@click.pass_obj
@handle_errors
def algorithms(ctx: FilehashContext) -> None:
    """List registered hash algorithms and their digest sizes."""
    registry = ctx.hasher.registry
    for name in registry:
        strategy = registry.lookup(name)
        click.echo(f"{name:<8} {strategy.digest_size * 8} bits")
