"""
Native Click implementation of the config command.

Usage: filehash config [list|get] [key]
"""

import click

from ...config import config_get, config_list
from ..decorators import handle_errors


@click.group("config", invoke_without_command=True)
@click.pass_context
def config(ctx: click.Context) -> None:
    """View configuration.

    Config is read from .filehash/config.toml, [tool.filehash] in
    pyproject.toml and FILEHASH_* environment variables.

    \b
    Examples:

        filehash config list              # List all options

        filehash config get hash.default  # Get a value
    """
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


@config.command("list")
def config_list_cmd() -> None:
    """List all config options."""
    click.echo("Available config options:")
    click.echo("")

    for key, info in config_list().items():
        click.echo(f"  {key}")
        click.echo(f"    {info['description']}")
        click.echo(f"    Default: {info['default']}")
        click.echo("")


@config.command("get")
@click.argument("key")
@handle_errors
def config_get_cmd(key: str) -> None:
    """Get a config value.

    Arguments:

        KEY    The config key to get (e.g. hash.buffer_size)
    """
    value = config_get(key)
    if value is None:
        click.echo(f"{key}: (not set)")
    else:
        click.echo(f"{key}: {value}")
