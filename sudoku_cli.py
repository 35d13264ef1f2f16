import argparse
import logging
import sys

from sudoku_config import load_config, setup_logging
from sudoku_core import InvalidInput, validate, solve
from sudoku_text import parse_grid, read_rows, format_grid

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_BAD_INPUT = 2
EXIT_INVALID = 3
EXIT_UNSOLVABLE = 4


def build_parser():
    parser = argparse.ArgumentParser(
        prog="sudoku-solve",
        description="Solve a 9x9 sudoku by backtracking.",
    )
    parser.add_argument("file", nargs="?", help="puzzle file, nine rows of nine cells")
    parser.add_argument("-g", "--grid", help="puzzle as an 81-character string (0 or . for empty)")
    parser.add_argument("-q", "--quiet", action="store_true", help="print only the solved grid")
    return parser


def load_grid(args):
    if args.grid:
        return parse_grid(args.grid)
    if args.file:
        with open(args.file, encoding="utf-8") as f:
            return parse_grid(f.read())
    print("enter rows line by line. use numbers for known cells, zero or dot for missing cells.")
    return read_rows(sys.stdin, prompt=lambda text: print(text, end="", flush=True))


def main(argv=None):
    args = build_parser().parse_args(argv)
    setup_logging(load_config().log_level)

    try:
        grid = load_grid(args)
    except (InvalidInput, OSError, UnicodeDecodeError) as e:
        logger.debug("input rejected: %s", e)
        print(f"error: unable to input grid ({e})")
        return EXIT_BAD_INPUT

    if not args.quiet:
        print("\nvalidating puzzle... ", end="")
    if not validate(grid):
        print("invalid!")
        return EXIT_INVALID

    if not args.quiet:
        print("valid.\n\nsolving following puzzle:")
        print(format_grid(grid))

    if not solve(grid):
        print("\nunfortunately, your puzzle is unsolvable")
        return EXIT_UNSOLVABLE

    if not args.quiet:
        print("\npuzzle solved:")
    print(format_grid(grid))
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
