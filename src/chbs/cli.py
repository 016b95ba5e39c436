"""CLI entry point for scoring a single password."""

from __future__ import annotations

import argparse
from collections.abc import Sequence

from . import __version__
from .metrics import score


def _parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Parse CLI arguments."""
    parser = argparse.ArgumentParser(
        prog="chbs",
        description="Checks a password's strength and outputs a score",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("password", help="Password to score")
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> None:
    """Score the password given on the command line."""
    args = _parse_args(argv)
    print(f"The password passed is: {args.password}")
    print(f"The score is: {score(args.password)}")


if __name__ == "__main__":
    main()
