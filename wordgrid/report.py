from collections import defaultdict
from typing import Iterable

from wordgrid.board import Grid


def format_board(grid: Grid, title: str | None = None) -> str:
    n = grid.size
    separator = "  " + "-" * n
    lines = [title if title is not None else f"Random {n}x{n} board:", separator]
    for row in grid.rows:
        lines.append(f"| {''.join(row)} |")
    lines.append(separator)
    return "\n".join(lines)


def group_by_length(words: Iterable[str]) -> dict[int, list[str]]:
    """Bucket words by length; buckets and their contents are sorted."""
    by_length: dict[int, list[str]] = defaultdict(list)
    for w in words:
        by_length[len(w)].append(w)
    return {length: sorted(by_length[length]) for length in sorted(by_length)}


def format_stats(words: Iterable[str]) -> str:
    buckets = group_by_length(words)
    total = sum(len(group) for group in buckets.values())
    lines = [f"Found {total} words."]
    for length, group in buckets.items():
        lines.append(f" - {len(group):2d} words of size {length}: [{', '.join(group)}]")
    return "\n".join(lines)
