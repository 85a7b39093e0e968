"""Command line interface for rekey."""

from __future__ import annotations

import click

from rekey.cli.rewrite import rewrite
from rekey.cli.validate import validate


@click.group()
@click.version_option(package_name="rekey")
def main() -> None:
    """Rename a top-level key in JSON request bodies."""


main.add_command(validate)
main.add_command(rewrite)

__all__ = ["main", "rewrite", "validate"]
