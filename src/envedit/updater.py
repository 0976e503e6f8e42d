# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Rewrite assignments in existing .env text.

Each key is located with the same line scanner the parser uses, so text that
merely looks like ``KEY=`` inside another key's quoted value is never touched.
For the last assignment whose line starts with ``KEY=``:

  1. a quoted multi-line value has its whole span replaced
  2. a single-line value has its line replaced
  3. with no such assignment, ``KEY=value`` is appended on a new line

Values containing a newline are written wrapped in double quotes. Nothing is
escaped, so these do not read back intact:

  - a value with a line ending in ``"``
  - a value starting with a newline (the first line is a lone ``"``)
  - any key appended after an unterminated quoted value, which swallows it
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path

from envedit.env_file import Assignment, iter_assignments

logger = logging.getLogger(__name__)


def format_value(value: object) -> str:
    """Format a value for writing: double-quote it if it spans lines."""
    if isinstance(value, str):
        if "\n" in value:
            return f'"{value}"'
        return value
    return str(value)


def _find_assignment(content: str, key: str) -> Assignment | None:
    """Return the last assignment whose first line starts with ``key=``.

    The last one wins because that is the value the parser reports.
    """
    prefix = f"{key}="
    lines = content.split("\n")
    found: Assignment | None = None
    for assignment in iter_assignments(content):
        if lines[assignment.start].startswith(prefix):
            found = assignment
    return found


def update_key(content: str, key: str, value: object) -> str:
    """Return *content* with *key* set to *value*."""
    line = f"{key}={format_value(value)}"
    found = _find_assignment(content, key)
    if found is None:
        logger.debug("Appending %s", key)
        return f"{content}\n{line}"

    lines = content.split("\n")
    # CRLF files keep their line ending on the rewritten line.
    if lines[found.end].endswith("\r"):
        line += "\r"
    logger.debug("Replacing %s at lines %d-%d", key, found.start + 1, found.end + 1)
    lines[found.start:found.end + 1] = [line]
    return "\n".join(lines)


def update_env(content: str, updates: Mapping[str, object]) -> str:
    """Apply every entry of *updates* to *content* and return the new text."""
    for key, value in updates.items():
        content = update_key(content, key, value)
    return content


def update_env_file(path: str | Path, updates: Mapping[str, object]) -> None:
    """Read *path*, apply *updates*, and write the result back in full.

    Not locked: two processes updating the same file concurrently can lose
    each other's changes.
    """
    p = Path(path)
    content = update_env(p.read_text(encoding="utf-8"), updates)
    logger.debug("Writing %d update(s) to %s", len(updates), p)
    p.write_text(content, encoding="utf-8")
