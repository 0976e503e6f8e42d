# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Envedit CLI -- inspect and patch .env files from the shell.

The CLI is split into per-command modules under this package.  The ``cli``
click group and shared helpers (``console``, ``_read_pairs``, ``_mask``)
live here so every command module can import them.
"""

from __future__ import annotations

import logging
from pathlib import Path

import click
from rich.console import Console
from rich.logging import RichHandler

from envedit import __version__
from envedit.config import load_config
from envedit.env_file import parse_env_file

try:
    import yaml
    HAS_YAML = True
except ImportError:
    HAS_YAML = False

console = Console(stderr=True)


# ---------------------------------------------------------------------------
# Shared helpers
# ---------------------------------------------------------------------------

def _env_path(ctx: click.Context) -> Path:
    return ctx.obj["path"]


def _read_pairs(ctx: click.Context) -> dict[str, str]:
    """Parse the current env file, turning OS errors into click errors."""
    path = _env_path(ctx)
    try:
        return parse_env_file(path)
    except OSError as e:
        raise click.ClickException(f"Cannot read {path}: {e.strerror or e}")


def _mask(value: str) -> str:
    if len(value) <= 6:
        return "****"
    return value[:3] + "****" + value[-3:]


def _setup_logging(verbose: bool) -> None:
    if not verbose:
        return
    logging.basicConfig(
        level=logging.DEBUG,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


# ---------------------------------------------------------------------------
# Top-level click group
# ---------------------------------------------------------------------------

@click.group()
@click.option(
    "--file", "-f", "path", default=None,
    help="Path to the .env file (default: ENVEDIT_FILE, config env_file, else .env).",
)
@click.option("--verbose", "-v", is_flag=True, help="Verbose output.")
@click.version_option(__version__)
@click.pass_context
def cli(ctx: click.Context, path: str | None, verbose: bool) -> None:
    """Inspect and update .env files in place."""
    _setup_logging(verbose)
    try:
        cfg = load_config()
    except ValueError as e:  # TOMLDecodeError subclasses ValueError
        raise click.ClickException(f"Invalid config file: {e}")
    ctx.ensure_object(dict)
    ctx.obj["config"] = cfg
    ctx.obj["path"] = Path(path) if path is not None else cfg.env_file
    ctx.obj["verbose"] = verbose


# ---------------------------------------------------------------------------
# Register all command modules (import triggers @cli.command registration)
# ---------------------------------------------------------------------------

from envedit.cli import (  # noqa: E402, F401
    show_cmd,
    crud_cmd,
)
