"""CLI command: objtasks json -- build a registered type from JSON."""

from __future__ import annotations

import json
import sys

import click

from objtasks.config import ObjtasksConfig
from objtasks.errors import UnknownFactoryError
from objtasks.jsonio import from_json, to_json


@click.command("json")
@click.argument("tag")
@click.argument("text")
@click.pass_obj
def json_command(config: ObjtasksConfig | None, tag: str, text: str) -> None:
    """Construct the type registered as TAG from TEXT and echo it as JSON.

    Values are passed to the constructor positionally, in key order.
    """
    config = config or ObjtasksConfig()
    try:
        obj = from_json(tag, text)
    except json.JSONDecodeError as exc:
        click.echo(f"Parse error: {exc}", err=True)
        sys.exit(1)
    except UnknownFactoryError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)
    except TypeError as exc:
        # Wrong number of values for the constructor.
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    click.echo(to_json(obj, config.json))
