"""
Command-line runner for the WordBrain solver.

Usage:
    python -m wordbrain ALABH LFLLO ERMSU BNLAS UMAEE --lengths 8 3 5 4 5
    python -m wordbrain --puzzle puzzles/sample.yaml --dictionary words.txt --workers 4

Use '.' or '_' for empty cells in a row. Rows go before --lengths.
"""
import argparse
import logging
import sys

from wordbrain.dictionary import load_dictionary
from wordbrain.errors import PuzzleError
from wordbrain.metrics import StageTimer
from wordbrain.puzzle import Puzzle
from wordbrain.settings import settings
from wordbrain.solver import Solver

logger = logging.getLogger("wordbrain")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="wordbrain",
        description="Find every way to clear a falling-letters word grid",
    )
    parser.add_argument("rows", nargs="*",
                        help="Grid rows, top to bottom (omit when using --puzzle)")
    parser.add_argument("--lengths", "-l", type=int, nargs="+",
                        help="Word lengths to find, in order")
    parser.add_argument("--puzzle", "-p",
                        help="YAML puzzle file with 'rows' and 'lengths'")
    parser.add_argument("--dictionary", "-d", default=str(settings.DICTIONARY_PATH),
                        help=f"Word list, one word per line (default: {settings.DICTIONARY_PATH})")
    parser.add_argument("--workers", "-w", type=int, default=settings.WORKERS,
                        help=f"Worker processes for the search (default: {settings.WORKERS})")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Log search progress")
    return parser


def load_puzzle(args) -> Puzzle:
    if args.puzzle:
        if args.rows:
            raise PuzzleError("Give either --puzzle or rows, not both")
        return Puzzle.from_file(args.puzzle)
    if not args.lengths:
        raise PuzzleError("--lengths is required when rows are given")
    return Puzzle.parse(args.rows, args.lengths)


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    level = logging.DEBUG if args.verbose or settings.DEBUG else logging.WARNING
    logging.basicConfig(level=level, format="%(asctime)s %(name)s %(levelname)s %(message)s")

    timer = StageTimer()
    try:
        with timer.stage("load"):
            puzzle = load_puzzle(args)
            dictionary = load_dictionary(args.dictionary)
    except (PuzzleError, FileNotFoundError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(puzzle.grid)

    solver = Solver(dictionary, puzzle.grid, puzzle.lengths)
    with timer.stage("solve"):
        solutions = solver.solve(workers=args.workers)

    print(f"Solutions: {len(solutions)}")
    for solution in solutions:
        print(solution)

    if len(solutions) < settings.ALL_WORDS_DISPLAY_THRESHOLD:
        all_words = solver.all_words()
        print(f"All words found: {len(all_words)}")
        for word in all_words:
            print(f"  {word}")

    logger.info("Timings: %s", timer.summary())
    return 0


if __name__ == "__main__":
    sys.exit(main())
