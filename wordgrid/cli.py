"""Command-line entry point: solve a random board, or run the HTTP server."""

import argparse
import logging
import random
import sys
from pathlib import Path

from wordgrid.settings import settings

logger = logging.getLogger("wordgrid")


def board_size(value: str) -> int:
    try:
        size = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"board size must be an integer, got {value!r}")
    if not 1 <= size <= settings.MAX_BOARD_SIZE:
        raise argparse.ArgumentTypeError(f"board size must be between 1 and {settings.MAX_BOARD_SIZE}, got {size}")
    return size


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="wordgrid",
        description="Find every dictionary word traceable on a random letter grid.",
    )
    parser.add_argument(
        "size",
        nargs="?",
        type=board_size,
        default=settings.BOARD_SIZE,
        help=f"Width and height of the board (1-{settings.MAX_BOARD_SIZE}, default {settings.BOARD_SIZE}).",
    )
    parser.add_argument(
        "--dictionary",
        type=str,
        default=str(settings.DICTIONARY_PATH),
        help=(
            "Path to dictionary file with one word per line. The bundled default is a "
            "small sample of short common words; pass a full word list for real games."
        ),
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Explicitly set the random seed for board generation.",
    )
    parser.add_argument(
        "--board",
        type=str,
        default=None,
        help='Solve this board instead of a random one, rows separated by "/", e.g. "cat/xxx/xxx".',
    )
    parser.add_argument(
        "--max-results",
        type=int,
        default=0,
        help="Only list the N longest words (0 lists all of them).",
    )
    parser.add_argument(
        "--serve",
        action="store_true",
        help="Run the HTTP API instead of solving a single board.",
    )
    parser.add_argument("--host", type=str, default=settings.HOST)
    parser.add_argument("--port", type=int, default=settings.PORT)
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=settings.LOG_LEVEL, format="%(asctime)s %(name)s %(levelname)s %(message)s")

    if args.serve:
        import uvicorn
        from wordgrid.server import app

        settings.DICTIONARY_PATH = Path(args.dictionary)
        uvicorn.run(app, host=args.host, port=args.port)
        return 0

    from wordgrid.board import Grid, random_board
    from wordgrid.metrics import StageTimer
    from wordgrid.report import format_board, format_stats
    from wordgrid.solver import solve
    from wordgrid.trie import load_trie

    if args.board is not None:
        try:
            grid = Grid.from_string(args.board)
        except ValueError as e:
            parser.error(str(e))
    else:
        grid = None

    timer = StageTimer()
    try:
        with timer.stage("load_dictionary"):
            trie = load_trie(args.dictionary)
    except OSError as e:
        logger.error("Could not load dictionary %s: %s", args.dictionary, e)
        return 1
    print(f"#Words in dictionary: {trie.num_words()}")

    if grid is None:
        grid = random_board(args.size, random.Random(args.seed))
        print(format_board(grid))
    else:
        print(format_board(grid, title=f"Board {grid.size}x{grid.size}:"))

    with timer.stage("search"):
        words, _ = solve(grid, trie, args.max_results)
    print(f"Search took {timer.elapsed('search'):.1f}ms.")
    print(format_stats(words))
    return 0


if __name__ == "__main__":
    sys.exit(main())
