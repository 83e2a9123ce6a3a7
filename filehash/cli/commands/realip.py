"""
Native Click implementation of the realip command.

Usage: filehash realip [-6] [--timeout SECONDS]
"""

import socket

import click

from ...services.realip import get_real_ip
from ..context import FilehashContext
from ..decorators import handle_errors


@click.command("realip")
@click.option("-6", "--ipv6", is_flag=True, help="Global IPv6 addresses instead of the public IPv4 one.")
@click.option("--timeout", type=click.FloatRange(min=0, min_open=True), default=None, help="Lookup timeout in seconds.")
@click.pass_obj
@handle_errors
def realip(ctx: FilehashContext, ipv6: bool, timeout: float | None) -> None:
    """Print the addresses this host is reachable at."""
    family = socket.AF_INET6 if ipv6 else socket.AF_INET
    for address in get_real_ip(family, timeout=timeout, config=ctx.settings.realip):
        click.echo(address)
