# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""statuscheck CLI."""

import argparse

from ..config import load_probe_settings
from ..errors import ProgramError
from ..log import setup_logging
from ..session import Session
from ..terminal import Program
from ..version import __version__


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="statuscheck",
        description="Check the HTTP status of https://charm.sh and show the result (Ctrl+C to quit)",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "--log-level",
        default=None,
        help="Logging level (DEBUG, INFO, WARNING, ...); defaults to STATUSCHECK_LOG_LEVEL or WARNING",
    )
    parser.add_argument(
        "--log-file",
        default=None,
        help="Write log records to this file instead of stderr; defaults to STATUSCHECK_LOG_FILE",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.log_level, args.log_file)

    session = Session(load_probe_settings())
    try:
        Program(session).run()
    except ProgramError as exc:
        print(f"Error: {exc}")
        return 1

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
