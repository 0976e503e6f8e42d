# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

"""``envedit show`` command."""

from __future__ import annotations

import json
import sys

import click
from rich.console import Console
from rich.table import Table
from rich.text import Text

from envedit.cli import HAS_YAML, _env_path, _mask, _read_pairs, cli
from envedit.updater import format_value

if HAS_YAML:
    import yaml


@cli.command("show")
@click.option(
    "--format", "fmt",
    type=click.Choice(["table", "dotenv", "json", "yaml"]),
    default="table",
    help="Output format: table (default, masked values), dotenv (KEY=value), json, yaml.",
)
@click.option("--reveal", is_flag=True, help="Show values unmasked in the table.")
@click.pass_context
def show(ctx: click.Context, fmt: str, reveal: bool) -> None:
    """Print every key in the .env file.

    Multi-line values are printed quoted in dotenv format, the same way
    ``envedit set`` writes them.
    """
    pairs = _read_pairs(ctx)

    if fmt == "json":
        click.echo(json.dumps(pairs, indent=2))
    elif fmt == "yaml":
        if not HAS_YAML:
            raise click.ClickException("PyYAML is not installed. Install with: pip install pyyaml")
        click.echo(yaml.dump(pairs, default_flow_style=False, sort_keys=True), nl=False)
    elif fmt == "dotenv":
        for key, value in sorted(pairs.items()):
            click.echo(f"{key}={format_value(value)}")
    else:
        masked = ctx.obj["config"].mask and not reveal
        table = Table(title=str(_env_path(ctx)))
        table.add_column("Key", style="cyan")
        table.add_column("Value (masked)" if masked else "Value", style="dim" if masked else "white")
        if not pairs:
            table.add_row("(empty)", "(empty)")
        for key, value in sorted(pairs.items()):
            table.add_row(Text(key), Text(_mask(value) if masked else value))
        Console(file=sys.stdout, highlight=False).print(table)
