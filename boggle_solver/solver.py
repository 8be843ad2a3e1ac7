from __future__ import annotations

import logging
from typing import Iterable, Sequence

from boggle_solver.metrics import SearchStats

logger = logging.getLogger("boggle")

MIN_WORD_LENGTH = 3


class TrieNode:
    __slots__ = ("letter", "children", "is_terminal")

    def __init__(self, letter: str):
        self.letter = letter
        self.children: dict[str, TrieNode] = {}
        self.is_terminal: bool = False

    def child(self, letter: str) -> TrieNode | None:
        return self.children.get(letter)

    def children_list(self) -> list[str]:
        """Child letters, for printing."""
        return list(self.children)


class Trie:
    def __init__(self, words: Iterable[str] = ()):
        self.root = TrieNode("root")
        self._size = 0
        for w in words:
            self.insert(w)

    def __len__(self) -> int:
        return self._size

    def insert(self, word: str):
        node = self.root
        for ch in word.lower():
            if ch not in node.children:
                node.children[ch] = TrieNode(ch)
            node = node.children[ch]
        if not node.is_terminal:
            node.is_terminal = True
            self._size += 1

    def find(self, prefix: str) -> TrieNode | None:
        node = self.root
        for ch in prefix.lower():
            node = node.children.get(ch)
            if node is None:
                return None
        return node

    def contains_prefix(self, word: str) -> bool:
        return self.find(word) is not None

    def contains_word(self, word: str) -> bool:
        node = self.find(word)
        return node is not None and node.is_terminal


def load_trie(path: str, min_length: int = MIN_WORD_LENGTH) -> Trie:
    trie = Trie()
    with open(path, "r", encoding="utf-8") as f:
        for line in f:
            word = line.strip()
            if len(word) >= min_length:
                trie.insert(word)
    logger.info("Loaded %d words from %s", len(trie), path)
    return trie


class BoardSearch:
    """Backtracking word search over a flat, row-major letter grid.

    Every cell starts a depth-first walk; a branch is abandoned as soon as the
    letters so far are not a prefix of any dictionary word. Words shorter than
    ``min_length`` are never reported and each word is reported once, in the
    order it was first reached.

    Adjacency is computed from linear index offsets and only bounded by the
    board size, so the last cell of a row touches the first cells of the next
    row. Pass ``strict_adjacency=True`` to keep neighbours within one row and
    one column of the cell.
    """

    def __init__(
        self,
        width: int,
        height: int,
        board: Sequence[str],
        dictionary: Iterable[str] | None = None,
        trie: Trie | None = None,
        min_length: int = MIN_WORD_LENGTH,
        strict_adjacency: bool = False,
    ):
        self.width = width
        self.height = height
        self.board = tuple(board)
        self.trie = trie if trie is not None else Trie(dictionary or ())
        self.min_length = min_length
        self.strict_adjacency = strict_adjacency
        self.stats = SearchStats()
        self._neighbors = [self.adjacent(i) for i in range(len(self.board))]

    def is_valid_cell(self, i: int) -> bool:
        return 0 <= i < len(self.board)

    def adjacent(self, i: int) -> list[int]:
        w = self.width
        offsets = (-(w + 1), -w, -(w - 1), -1, 1, w - 1, w, w + 1)
        result: list[int] = []
        for off in offsets:
            j = i + off
            if j == i or j in result or not self.is_valid_cell(j):
                continue
            if self.strict_adjacency and (abs(j % w - i % w) > 1 or abs(j // w - i // w) > 1):
                continue
            result.append(j)
        return result

    def solve(self) -> list[str]:
        return list(self.solve_with_paths())

    def solve_with_paths(self) -> dict[str, list[int]]:
        """Map each word found to the cell path of its first discovery."""
        found: dict[str, list[int]] = {}
        self.stats = SearchStats()

        def emit(word: str, path: list[int]):
            if word in found:
                return
            found[word] = list(path)
            self.stats.words += 1

        def backtrack(word: str, node: TrieNode, cell: int, path: list[int]):
            self.stats.frames += 1
            if len(word) >= self.min_length and node.is_terminal:
                emit(word, path)

            for nxt in self._neighbors[cell]:
                if nxt in path:
                    continue
                letter = self.board[nxt]
                child = node.child(letter.lower())
                if child is None:
                    self.stats.pruned += 1
                    continue
                path.append(nxt)
                backtrack(word + letter, child, nxt, path)
                path.pop()

        for i, letter in enumerate(self.board):
            node = self.trie.root.child(letter.lower())
            if node is None:
                self.stats.pruned += 1
                continue
            backtrack(letter, node, i, [i])

        logger.debug(
            "Searched %dx%d board: %d words, %d frames, %d pruned",
            self.width, self.height, self.stats.words, self.stats.frames, self.stats.pruned,
        )
        return found
