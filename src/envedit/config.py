# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

""".envedit.toml configuration loading.

Searches upward from cwd for ``.envedit.toml``.  ``ENVEDIT_FILE`` in the
environment overrides the configured env file.
"""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Any

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

CONFIG_NAME = ".envedit.toml"
DEFAULT_ENV_FILE = ".env"


@dataclass
class EnveditConfig:
    """Resolved configuration for the current invocation."""

    env_file: Path = Path(DEFAULT_ENV_FILE)
    mask: bool = True
    config_path: Path | None = None


def find_config_file(start: Path | None = None) -> Path | None:
    """Walk upward from *start* (default cwd) looking for ``.envedit.toml``."""
    cur = (start or Path.cwd()).resolve()
    while True:
        candidate = cur / CONFIG_NAME
        if candidate.is_file():
            return candidate
        if cur.parent == cur:
            return None
        cur = cur.parent


def load_config(path: Path | None = None) -> EnveditConfig:
    """Load and return config.  Returns defaults if no file found."""
    if path is None:
        path = find_config_file()

    cfg = EnveditConfig()
    if path is not None:
        raw: dict[str, Any] = tomllib.loads(path.read_text(encoding="utf-8"))
        section = raw.get("envedit", {})
        env_file = Path(section.get("env_file", DEFAULT_ENV_FILE))
        if not env_file.is_absolute():
            env_file = path.parent / env_file
        cfg = EnveditConfig(
            env_file=env_file,
            mask=bool(section.get("mask", True)),
            config_path=path,
        )

    override = os.environ.get("ENVEDIT_FILE")
    if override:
        cfg.env_file = Path(override)
    return cfg
