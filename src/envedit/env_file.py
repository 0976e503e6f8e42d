# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Parse .env files into key-value dicts.

Handles:
  - blank lines and whole-line ``#`` comments
  - single- and double-quoted values (quotes stripped)
  - quoted values spanning several lines
  - values with ``=`` in them (only first ``=`` splits)

Lines without ``=`` are skipped, and a quoted value still open at end of
input is kept as read so far.
"""

from __future__ import annotations

import enum
import logging
from collections.abc import Iterator
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)

QUOTES = ('"', "'")


class ScanState(enum.Enum):
    SINGLE = "single"
    MULTILINE = "multiline"


@dataclass(frozen=True)
class Assignment:
    """One ``KEY=VALUE`` assignment and the lines it occupies (inclusive)."""

    key: str
    value: str
    start: int
    end: int
    quote: str | None = None
    closed: bool = True

    @property
    def multiline(self) -> bool:
        return self.quote is not None


@dataclass(frozen=True)
class _Pending:
    key: str
    value: str
    quote: str
    start: int


def _unquote(raw: str) -> str:
    """Strip one pair of matching surrounding quotes."""
    value = raw.strip()
    if len(value) >= 2 and value[0] == value[-1] and value[0] in QUOTES:
        return value[1:-1]
    return value


def _step(
    state: ScanState,
    pending: _Pending | None,
    index: int,
    line: str,
) -> tuple[ScanState, _Pending | None, Assignment | None]:
    """Advance the scanner by one line."""
    if state is ScanState.MULTILINE:
        assert pending is not None
        value = pending.value + "\n" + line
        if line.rstrip().endswith(pending.quote):
            done = Assignment(pending.key, value[:-1], pending.start, index, pending.quote)
            return ScanState.SINGLE, None, done
        return state, _Pending(pending.key, value, pending.quote, pending.start), None

    stripped = line.strip()
    if not stripped or stripped.startswith("#"):
        return state, None, None
    key, sep, raw = stripped.partition("=")
    if not sep:
        return state, None, None
    key = key.strip()

    lead = raw.lstrip()
    if lead[:1] in QUOTES and not lead.endswith(lead[0]):
        return ScanState.MULTILINE, _Pending(key, lead[1:], lead[0], index), None
    return state, None, Assignment(key, _unquote(raw), index, index)


def iter_assignments(content: str) -> Iterator[Assignment]:
    """Yield every assignment in *content* in file order."""
    state = ScanState.SINGLE
    pending: _Pending | None = None
    lines = content.split("\n")
    for index, line in enumerate(lines):
        state, pending, assignment = _step(state, pending, index, line)
        if assignment is not None:
            yield assignment

    if state is ScanState.MULTILINE and pending is not None:
        logger.debug("Unterminated quoted value for %r starting at line %d", pending.key, pending.start + 1)
        yield Assignment(
            pending.key, pending.value, pending.start, len(lines) - 1,
            pending.quote, closed=False,
        )


def parse_env(content: str) -> dict[str, str]:
    """Parse .env text into key=value pairs. Later keys overwrite earlier ones."""
    result: dict[str, str] = {}
    for assignment in iter_assignments(content):
        result[assignment.key] = assignment.value
    return result


def parse_env_file(path: str | Path) -> dict[str, str]:
    """Read a .env file and return its key-value pairs."""
    logger.debug("Reading %s", path)
    return parse_env(Path(path).read_text(encoding="utf-8"))
