"""
Command line options for the battery-notify daemon.
"""

import argparse
from typing import Optional, Sequence

from . import __version__
from .watcher import DEFAULT_CRITICAL, DEFAULT_LOW, Thresholds

DESCRIPTION = "Desktop notifications for low battery levels (UPower)."


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="battery-notify",
        description=DESCRIPTION,
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )

    parser.add_argument(
        "-c", "--critical",
        type=float,
        default=DEFAULT_CRITICAL,
        help="Threshold for critical battery level."
    )

    parser.add_argument(
        "-l", "--low",
        type=float,
        default=DEFAULT_LOW,
        help="Threshold for low battery level."
    )

    parser.add_argument(
        "-v", "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    # Positional arguments are not accepted; they only trigger the usage text
    parser.add_argument("extra", nargs="*", help=argparse.SUPPRESS)

    return parser


def parse_args(argv: Optional[Sequence[str]] = None):
    """
    Parse argv into (parser, namespace).

    namespace.thresholds holds the validated Thresholds; an invalid pair
    ends in a usage error.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.extra:
        args.thresholds = None
        return parser, args

    try:
        args.thresholds = Thresholds(critical=args.critical, low=args.low)
    except ValueError as e:
        parser.error(str(e))
    return parser, args
