# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

"""SDK for loading .env values into the environment (python-dotenv style)."""

from __future__ import annotations

import os
from pathlib import Path

from envedit.config import load_config
from envedit.env_file import parse_env_file


def _resolve_path(path: str | Path | None) -> Path:
    """Resolve the env file from args, then ENVEDIT_FILE / config (same as CLI)."""
    if path is not None:
        return Path(path)
    return load_config().env_file


def dotenv_values(path: str | Path | None = None) -> dict[str, str]:
    """Return the file's values as a dict without modifying os.environ.

    Parameters
    ----------
    path : str or Path, optional
        File to read. Defaults to ``ENVEDIT_FILE``, then ``env_file`` from
        ``.envedit.toml``, then ``.env``.

    Returns
    -------
    dict[str, str]
        Mapping of variable name to value.
    """
    return parse_env_file(_resolve_path(path))


def load_dotenv(path: str | Path | None = None, override: bool = True) -> bool:
    """Load the file's values into os.environ (python-dotenv compatible API).

    Parameters
    ----------
    path : str or Path, optional
        File to read, resolved as in :func:`dotenv_values`.
    override : bool, default True
        If True, overwrite existing keys in os.environ. If False, only set
        keys that are not already set (matches python-dotenv semantics).

    Returns
    -------
    bool
        True if at least one variable was set, False otherwise.

    Examples
    --------
    >>> from envedit import load_dotenv
    >>> load_dotenv(".env.local")
    True
    >>> load_dotenv(override=False)  # do not overwrite existing env vars
    False
    """
    count = 0
    for key, value in dotenv_values(path).items():
        if key in os.environ and not override:
            continue
        os.environ[key] = value
        count += 1
    return count > 0
