# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Allow ``python -m envedit``; also the ``envedit`` console script."""

from __future__ import annotations

from envedit.cli import cli


def main() -> None:
    cli(prog_name="envedit")


if __name__ == "__main__":
    main()
