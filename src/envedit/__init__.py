# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Envedit -- read and patch .env files in place."""

from envedit.env_file import parse_env, parse_env_file
from envedit.sdk import dotenv_values, load_dotenv
from envedit.updater import update_env, update_env_file

__all__ = [
    "__version__",
    "parse_env",
    "parse_env_file",
    "update_env",
    "update_env_file",
    "load_dotenv",
    "dotenv_values",
]
__version__ = "0.1.0"
