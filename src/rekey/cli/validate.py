"""Configuration validation command."""

from __future__ import annotations

import sys

import click

from rekey.config.loader import ConfigLoader
from rekey.config.validator import ConfigValidator
from rekey.exceptions import ConfigurationError


@click.command()
@click.argument("config_file", type=click.Path(dir_okay=False))
@click.option("--strict", is_flag=True, help="Treat warnings as errors.")
def validate(config_file: str, strict: bool) -> None:
    """Validate a rekey configuration file."""
    try:
        config = ConfigLoader().load_from_file(config_file)
    except ConfigurationError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    errors, warnings = ConfigValidator().validate(config)

    for warning in warnings:
        click.echo(f"Warning: {warning}")
    for error in errors:
        click.echo(f"Error: {error}")

    if errors or (strict and warnings):
        click.echo("Configuration is invalid")
        sys.exit(1)

    rename = config.rename
    click.echo(f"Configuration is valid ({config.name}: {rename.old_key!r} -> {rename.new_key!r})")
