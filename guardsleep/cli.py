"""Answer the two guard sleep questions for a shift log.

Usage:
    guardsleep input.txt
    GUARDSLEEP_INPUT=input.txt python -m guardsleep --verbose
"""

import argparse
import logging
import sys

from .aggregate import total_minutes
from .constants import PATH_INPUT
from .parsing import entries_to_frame, read_log
from .report import format_report
from .sleeps import reconstruct_sleeps
from .strategies import most_frequent_minute, sleepiest_guard

logger = logging.getLogger(__name__)


def _build_parser():
    parser = argparse.ArgumentParser(
        prog="guardsleep",
        description="Find the sleepiest guard and minute in a shift log.",
    )
    parser.add_argument(
        "path",
        nargs="?",
        default=PATH_INPUT,
        help="Shift log file (default: $GUARDSLEEP_INPUT)",
    )
    parser.add_argument(
        "--verbose", action="store_true", help="Log progress to stderr"
    )
    return parser


def main(argv=None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    if args.path is None:
        parser.print_usage(sys.stderr)
        print("Error: expected exactly one log file path", file=sys.stderr)
        return 2

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        entries = read_log(args.path)
        sleeps = reconstruct_sleeps(entries)
        part1 = sleepiest_guard(sleeps)
        part2 = most_frequent_minute(sleeps)
    except (OSError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if logger.isEnabledFor(logging.INFO):
        kinds = entries_to_frame(entries)["kind"].value_counts()
        logger.info(f"Events per kind:\n{kinds.to_string()}")
        asleep = total_minutes(sleeps)
        logger.info(f"Minutes asleep per guard:\n{asleep.to_string()}")

    print(format_report(part1, part2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
