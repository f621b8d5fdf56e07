"""
Example usage:
    python -m rangesum sample.csv --rect 1 1 3 2 --method all

Reads a matrix from a header-less CSV file and prints the sum of the
rectangle (startx, starty) -> (endx, endy) with each requested method.
"""

import argparse
import logging
import sys

from rangesum import METHODS
from rangesum.errors import RangeSumError
from rangesum.setup_logging import setup_logging

logger = logging.getLogger(__name__)

# Labels used when printing results
METHOD_LABELS = {
    "rowsum": "RowSum",
    "allsum": "Allsum",
}


def parse_arguments(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="rangesum",
        description="Sum the elements of a rectangle of an integer matrix read from a CSV file.",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument("csv", nargs="?", default="sample.csv", help="Path to the input CSV file (no header row).")
    parser.add_argument(
        "--rect",
        type=int,
        nargs=4,
        default=[1, 1, 3, 2],
        metavar=("STARTX", "STARTY", "ENDX", "ENDY"),
        help="Inclusive rectangle to sum, x is the column and y the row, both zero-based.",
    )
    parser.add_argument(
        "--method",
        choices=[*METHODS, "all"],
        default="all",
        help="Range-sum method to use.",
    )
    parser.add_argument("--delimiter", type=str, default=",", help="Field separator of the CSV file.")
    parser.add_argument("--log-file", type=str, default=None, help="Also write the log to this file.")
    parser.add_argument("--verbose", action="store_true", help="Print debug messages to the console.")
    return parser.parse_args(argv)


def run(path, rect, methods, delimiter=","):
    """Build each requested matrix from ``path``, query ``rect`` and print the results."""
    for i, name in enumerate(methods):
        if i:
            print("---------------------")
        m = METHODS[name].from_csv(path, delimiter=delimiter)
        s = m.sum(*rect)
        print(f"[{METHOD_LABELS[name]} method] Sum: {s}")


def main(argv=None):
    args = parse_arguments(argv)
    setup_logging(log_file_path=args.log_file, console_level=logging.DEBUG if args.verbose else logging.INFO)

    methods = list(METHODS) if args.method == "all" else [args.method]
    try:
        run(args.csv, args.rect, methods, delimiter=args.delimiter)
    except RangeSumError as e:
        logger.error("%s: %s", type(e).__name__, e)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
