"""
Click decorators for filehash CLI commands.

- handle_errors: Turns FilehashException into a one-line error and the
  exception's suggested exit code
"""

from __future__ import annotations

import functools
from collections.abc import Callable
from typing import Any, TypeVar

import click

from ..core.exceptions import FilehashException

F = TypeVar("F", bound=Callable[..., Any])


def handle_errors(f: F) -> F:
    """Decorator reporting library errors without a traceback.

    Usage:
        @click.command()
        @click.pass_obj
        @handle_errors
        def algorithms(ctx: FilehashContext):
            ...
    """

    @functools.wraps(f)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return f(*args, **kwargs)
        except FilehashException as e:
            click.echo(f"Error: {e}", err=True)
            raise SystemExit(e.exit_code) from e

    return wrapper  # type: ignore[return-value]
