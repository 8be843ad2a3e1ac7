"""
Solve a Boggle board read from stdin.

Usage:
    python -m scripts.solve_board < game.txt
    python -m scripts.gengame 4 4 --words dictionary.txt | python -m scripts.solve_board

Input is the width, the height, one line per board row, then one dictionary
word per line. Every word found on the board is printed on its own line, in
the order it was discovered.
"""
import argparse
import logging
import sys
from pathlib import Path

# Ensure project root is on path
PROJECT_ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from boggle_solver.settings import settings
from boggle_solver.game_io import USAGE, BoardInputError, format_words, parse_game_input
from boggle_solver.metrics import StageTimer
from boggle_solver.solver import BoardSearch

logger = logging.getLogger("boggle")


def main(argv=None, stdin=None, stdout=None):
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout

    parser = argparse.ArgumentParser(
        description="Find every dictionary word on a Boggle board",
        epilog=USAGE,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--strict-adjacency", action="store_true", default=settings.STRICT_ADJACENCY,
                        help="Do not treat the ends of neighbouring rows as adjacent")
    parser.add_argument("--timings", action="store_true",
                        help="Log per-stage timings to stderr")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if settings.DEBUG else (logging.INFO if args.timings else logging.WARNING),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    timer = StageTimer()
    with timer.stage("read"):
        text = stdin.read()

    try:
        with timer.stage("parse"):
            game = parse_game_input(text, settings.MAX_BOARD_CELLS, settings.MIN_WORD_LENGTH)
    except BoardInputError as e:
        print(e, file=stdout)
        print(USAGE, file=stdout)
        return 1

    with timer.stage("trie_build"):
        search = BoardSearch(
            game.width, game.height, game.board, game.dictionary,
            min_length=settings.MIN_WORD_LENGTH,
            strict_adjacency=args.strict_adjacency,
        )

    with timer.stage("solve"):
        words = search.solve()

    stdout.write(format_words(words))
    logger.info("Found %d words in %.1fms", len(words), timer.total_ms)
    return 0


if __name__ == "__main__":
    sys.exit(main())
