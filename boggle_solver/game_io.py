"""Text framing for a game: board size, board rows and dictionary on one stream."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field

from boggle_solver.solver import MIN_WORD_LENGTH

logger = logging.getLogger("boggle")

USAGE = """\
Reads board details from stdin.

First line: width of the board (M)
Second line: height of the board (N)
Next N lines: board
All other lines: words in dictionary

Ex.

5
5
wnfta
ulweo
eatde
hknar
theet
the
be
to
of
and
"""


class BoardInputError(ValueError):
    """Game input that cannot be turned into a board."""


@dataclass
class GameInput:
    width: int
    height: int
    board: list[str]
    dictionary: list[str] = field(default_factory=list)


def _parse_dimension(raw: str, name: str) -> int:
    try:
        value = int(raw.strip())
    except ValueError:
        raise BoardInputError(f"The first two lines must be width and height, got {name}={raw.strip()!r}") from None
    if value <= 0:
        raise BoardInputError(f"Board {name} must be positive, got {value}")
    return value


def parse_board(width: int, height: int, rows: list[str], max_cells: int | None = None) -> list[str]:
    """Validate board rows against the dimensions and flatten them row-major."""
    if width <= 0 or height <= 0:
        raise BoardInputError(f"Board dimensions must be positive, got {width}x{height}")
    if max_cells is not None and width * height > max_cells:
        raise BoardInputError(f"Board {width}x{height} exceeds the {max_cells} cell limit")
    if len(rows) != height:
        raise BoardInputError(f"Invalid input: expected {height} board rows, got {len(rows)}")
    for n, row in enumerate(rows):
        if len(row) != width:
            raise BoardInputError(
                f"Invalid input: Board rows should be the same size (row {n} has {len(row)} cells, expected {width})"
            )
    return [letter for row in rows for letter in row]


def parse_game_input(text: str, max_cells: int | None = None, min_length: int = MIN_WORD_LENGTH) -> GameInput:
    lines = text.splitlines()
    if len(lines) < 2:
        raise BoardInputError("The first two lines must be width and height")

    width = _parse_dimension(lines[0], "width")
    height = _parse_dimension(lines[1], "height")

    rows = lines[2:2 + height]
    if len(rows) < height:
        raise BoardInputError(f"Invalid input: expected {height} board rows, got {len(rows)}")
    board = parse_board(width, height, rows, max_cells)

    dictionary = []
    for line in lines[2 + height:]:
        word = line.strip()
        if len(word) >= min_length:
            dictionary.append(word)

    logger.info("Parsed %dx%d board with %d dictionary words", width, height, len(dictionary))
    return GameInput(width, height, board, dictionary)


def format_words(words) -> str:
    return "".join(f"{w}\n" for w in words)
