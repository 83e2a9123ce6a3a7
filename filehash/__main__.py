"""Run the filehash CLI: ``python -m filehash`` or the ``filehash`` script."""

from __future__ import annotations

from collections.abc import Sequence


def main(argv: Sequence[str] | None = None) -> None:
    from .cli import cli

    cli(args=list(argv) if argv is not None else None, prog_name="filehash")


if __name__ == "__main__":
    main()
