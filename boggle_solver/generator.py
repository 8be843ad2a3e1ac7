from __future__ import annotations

import numpy as np

ALPHABET = "abcdefghijklmnopqrstuvwxyz"


def random_board(width: int, height: int, rng: np.random.Generator | None = None) -> list[str]:
    """Uniformly random lowercase rows, one string per board row."""
    if rng is None:
        rng = np.random.default_rng()
    letters = np.array(list(ALPHABET))
    grid = letters[rng.integers(0, len(ALPHABET), size=(height, width))]
    return ["".join(row) for row in grid]


def generate_game_input(width: int, height: int, words: list[str], seed: int | None = None) -> str:
    """Build a complete game input: size lines, random board, then the word list."""
    rng = np.random.default_rng(seed)
    lines = [str(width), str(height), *random_board(width, height, rng), *words]
    return "\n".join(lines) + "\n"
