"""Apply the key rename to a body offline."""

from __future__ import annotations

import sys
from dataclasses import replace
from typing import BinaryIO

import click

from rekey.config.loader import ConfigLoader
from rekey.config.models import RekeyConfig
from rekey.config.validator import ConfigValidator
from rekey.core import rewrite_body
from rekey.exceptions import ConfigurationError


@click.command()
@click.argument("input_file", type=click.File("rb"), default="-")
@click.option(
    "--config",
    "config_file",
    type=click.Path(dir_okay=False),
    help="Configuration file providing the keys.",
)
@click.option("--old-key", help="Key to rename (overrides the config file).")
@click.option("--new-key", help="New key name (overrides the config file).")
@click.option("-v", "--verbose", is_flag=True, help="Report the outcome on stderr.")
def rewrite(
    input_file: BinaryIO,
    config_file: str | None,
    old_key: str | None,
    new_key: str | None,
    verbose: bool,
) -> None:
    """Rename a top-level key in the JSON body read from INPUT_FILE.

    The result is written to stdout. Bodies that cannot be rewritten (invalid
    JSON, non-object documents, missing key) are written unchanged.
    """
    config = RekeyConfig()
    try:
        if config_file:
            config = ConfigLoader().load_from_file(config_file)

        rename = config.rename
        if old_key is not None:
            rename = replace(rename, old_key=old_key)
        if new_key is not None:
            rename = replace(rename, new_key=new_key)
        ConfigValidator().check(replace(config, rename=rename))
    except ConfigurationError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    if not rename.enabled:
        click.echo(
            "Warning: old key and new key must be non-empty and different, "
            "body left unchanged",
            err=True,
        )

    body = input_file.read()
    result = rewrite_body(body, rename) if rename.enabled else None

    output = click.get_binary_stream("stdout")
    output.write(result.body if result else body)
    output.flush()

    if verbose and result:
        click.echo(f"{result.outcome.value}: {len(body)} -> {len(result.body)} bytes", err=True)
