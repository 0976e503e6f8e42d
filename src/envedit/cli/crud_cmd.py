# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

"""``envedit get`` and ``envedit set`` commands."""

from __future__ import annotations

import click

from envedit.cli import _env_path, _read_pairs, cli, console
from envedit.updater import update_env_file


@cli.command()
@click.argument("key")
@click.pass_context
def get(ctx: click.Context, key: str) -> None:
    """Get a single value."""
    value = _read_pairs(ctx).get(key)
    if value is None:
        raise click.ClickException(f"Key '{key}' not found.")
    click.echo(value)


def _split_assignment(ctx: click.Context, param: click.Parameter, values: tuple[str, ...]) -> dict[str, str]:
    updates: dict[str, str] = {}
    for item in values:
        key, sep, value = item.partition("=")
        if not sep or not key:
            raise click.BadParameter(f"Expected KEY=VALUE, got {item!r}", ctx=ctx, param=param)
        updates[key] = value
    return updates


@cli.command("set")
@click.argument("assignments", nargs=-1, required=True, callback=_split_assignment)
@click.option("--create", is_flag=True, help="Create the file if it does not exist.")
@click.pass_context
def set_keys(ctx: click.Context, assignments: dict[str, str], create: bool) -> None:
    """Set one or more KEY=VALUE pairs, rewriting existing lines in place.

    Keys missing from the file are appended at the end.
    """
    path = _env_path(ctx)
    if create and not path.exists():
        path.parent.mkdir(parents=True, exist_ok=True)
        path.touch()
    try:
        update_env_file(path, assignments)
    except OSError as e:
        raise click.ClickException(f"Cannot update {path}: {e.strerror or e}")
    for key in assignments:
        console.print(f"[green]Set {key}[/green]")
