from __future__ import annotations

import random
import string
from typing import NamedTuple, Sequence


class Cell(NamedTuple):
    row: int
    col: int


_OFFSETS = [(dr, dc) for dr in (-1, 0, 1) for dc in (-1, 0, 1) if not (dr == 0 and dc == 0)]


def neighbors(cell: Cell, size: int) -> list[Cell]:
    """King-move neighbours of ``cell`` inside a ``size`` x ``size`` grid.

    Order is fixed: row-major over the offsets (-1, 0, 1).
    """
    r, c = cell
    adj = []
    for dr, dc in _OFFSETS:
        nr, nc = r + dr, c + dc
        if 0 <= nr < size and 0 <= nc < size:
            adj.append(Cell(nr, nc))
    return adj


class Grid:
    """Immutable square board of single upper-case ASCII letters."""

    __slots__ = ("_rows",)

    def __init__(self, rows: Sequence[Sequence[str]]):
        size = len(rows)
        normalized = []
        for r, row in enumerate(rows):
            if isinstance(row, str):
                row = list(row)
            if len(row) != size:
                raise ValueError(f"Grid must be square: row {r} has {len(row)} cells, expected {size}")
            cells = []
            for c, value in enumerate(row):
                if not isinstance(value, str) or len(value) != 1 or not (value.isascii() and value.isalpha()):
                    raise ValueError(f"Invalid cell {value!r} at ({r}, {c}): expected a single letter A-Z")
                cells.append(value.upper())
            normalized.append(tuple(cells))
        self._rows: tuple[tuple[str, ...], ...] = tuple(normalized)

    @classmethod
    def from_string(cls, text: str) -> Grid:
        """Parse rows separated by newlines, slashes or commas, e.g. ``"cat/xxx/xxx"``."""
        for sep in ("\n", "/", ","):
            text = text.replace(sep, " ")
        return cls([list(row) for row in text.split()])

    @property
    def size(self) -> int:
        return len(self._rows)

    @property
    def rows(self) -> tuple[tuple[str, ...], ...]:
        return self._rows

    def letter_at(self, cell: Cell) -> str:
        return self._rows[cell.row][cell.col]

    def cells(self) -> list[Cell]:
        return [Cell(r, c) for r in range(self.size) for c in range(self.size)]

    def to_lists(self) -> list[list[str]]:
        return [list(row) for row in self._rows]

    def __eq__(self, other) -> bool:
        return isinstance(other, Grid) and self._rows == other._rows

    def __hash__(self) -> int:
        return hash(self._rows)

    def __repr__(self) -> str:
        return "Grid(%r)" % "/".join("".join(row) for row in self._rows)


def random_board(size: int, rng: random.Random | None = None) -> Grid:
    """Generate a ``size`` x ``size`` board of uniformly random letters."""
    if size < 0:
        raise ValueError(f"Board size must be non-negative, got {size}")
    rng = rng or random.Random()
    letters = string.ascii_uppercase
    return Grid([[rng.choice(letters) for _ in range(size)] for _ in range(size)])
