"""
Print a random game for scripts.solve_board.

Usage:
    python -m scripts.gengame [width=5] [height=5] [--words PATH] [--seed N]
"""
import argparse
import sys
from pathlib import Path

# Ensure project root is on path
PROJECT_ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from boggle_solver.settings import settings
from boggle_solver.generator import generate_game_input


def main(argv=None, stdout=None):
    stdout = stdout or sys.stdout

    parser = argparse.ArgumentParser(description="Outputs random input for scripts.solve_board")
    parser.add_argument("width", type=int, nargs="?", default=settings.DEFAULT_WIDTH,
                        help=f"Board width (default: {settings.DEFAULT_WIDTH})")
    parser.add_argument("height", type=int, nargs="?", default=settings.DEFAULT_HEIGHT,
                        help=f"Board height (default: {settings.DEFAULT_HEIGHT})")
    parser.add_argument("--words", type=str, default=str(settings.DICTIONARY_PATH),
                        help="Word list appended after the board, one word per line")
    parser.add_argument("--seed", type=int, default=None,
                        help="Random seed for a reproducible board")
    args = parser.parse_args(argv)

    if args.width <= 0 or args.height <= 0:
        print(f"Error: width and height must be positive, got {args.width}x{args.height}", file=sys.stderr)
        return 1

    words_path = Path(args.words)
    if not words_path.exists():
        print(f"Error: {words_path} does not exist", file=sys.stderr)
        return 1

    with open(words_path, "r", encoding="utf-8") as f:
        words = [line.strip() for line in f if line.strip()]

    stdout.write(generate_game_input(args.width, args.height, words, args.seed))
    return 0


if __name__ == "__main__":
    sys.exit(main())
