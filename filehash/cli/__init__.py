"""
Click-based CLI for filehash.

Usage:
    from filehash.cli import cli
    cli()  # Invokes the CLI
"""

from __future__ import annotations

from pathlib import Path

import click

from .. import __version__
from .context import FilehashContext


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="filehash")
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="Config file to use instead of searching from the working directory.",
)
@click.pass_context
def cli(ctx: click.Context, config_path: Path | None) -> None:
    """filehash - digests over byte ranges of files

    \b
    Commands:
        filehash hash <file>   Print the digest of (part of) a file
        filehash algorithms    List supported algorithms
        filehash realip        Show this host's public addresses
        filehash config        View configuration
    """
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())
        ctx.exit(0)
    elif ctx.obj is None:
        ctx.obj = FilehashContext.create(config_path=config_path)


def register_commands() -> None:
    """Register all CLI commands with the main group."""
    from .commands import COMMANDS

    for cmd in COMMANDS:
        cli.add_command(cmd)


register_commands()


__all__ = [
    "FilehashContext",
    "cli",
    "register_commands",
]
