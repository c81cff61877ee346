from __future__ import annotations

from typing import Iterator

from wordgrid.board import Cell, Grid, neighbors
from wordgrid.trie import PrefixTree, TrieNode

# Words of length <= 2 are never reported.
MIN_WORD_LENGTH = 3


def _search(grid: Grid, dictionary: PrefixTree, on_word) -> None:
    """Run the backtracking search, calling ``on_word(word, start)`` for every hit.

    The trie node for the current path travels with it, so each one-letter
    extension is a single child lookup rather than a walk from the root. A
    missing child means the path is not a valid prefix. Frames live on an
    explicit stack, so path length is bounded by the grid, not the
    interpreter's recursion limit.
    """
    size = grid.size
    adjacency = {cell: neighbors(cell, size) for cell in grid.cells()}
    on_path: set[Cell] = set()
    letters: list[str] = []
    stack: list[tuple[Cell, TrieNode, Iterator[Cell]]] = []

    def enter(cell: Cell, node: TrieNode, start: Cell):
        on_path.add(cell)
        letters.append(grid.letter_at(cell))
        if node.is_word and len(letters) >= MIN_WORD_LENGTH:
            on_word("".join(letters), start)
        # prune if no further prefixes
        stack.append((cell, node, iter(adjacency[cell]) if node.children else iter(())))

    for start in grid.cells():
        first = dictionary.root.children.get(grid.letter_at(start))
        if first is None:
            continue
        enter(start, first, start)
        while stack:
            cell, node, pending = stack[-1]
            for nxt in pending:
                if nxt in on_path:
                    continue
                child = node.children.get(grid.letter_at(nxt))
                if child is not None:
                    enter(nxt, child, start)
                    break
            else:
                stack.pop()
                letters.pop()
                on_path.discard(cell)


def find_all_words(grid: Grid, dictionary: PrefixTree) -> set[str]:
    """Return every dictionary word of length >= 3 traceable on ``grid``.

    A word is traceable when its letters follow a path of king-move adjacent
    cells that never revisits a cell. Words reachable along several paths are
    reported once.
    """
    found: set[str] = set()
    _search(grid, dictionary, lambda word, start: found.add(word))
    return found


def solve(grid: Grid, dictionary: PrefixTree, max_results: int = 50) -> tuple[list[str], dict[str, Cell]]:
    """Solve the board and order the words for display.

    Returns (words, positions) where words are sorted longest first, then
    alphabetically, and capped at ``max_results`` (0 disables the cap).
    positions maps each found word to its topmost-leftmost starting cell.
    """
    word_starts: dict[str, Cell] = {}

    def record(word: str, start: Cell):
        # Keep the topmost-leftmost starting position
        if word not in word_starts or start < word_starts[word]:
            word_starts[word] = start

    _search(grid, dictionary, record)

    # Sort: longest first, then alphabetical
    result = sorted(word_starts, key=lambda w: (-len(w), w))
    result = result[:max_results] if max_results > 0 else result
    return result, word_starts
