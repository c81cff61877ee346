from __future__ import annotations

import logging
import time
from typing import Iterable, Iterator

logger = logging.getLogger("wordgrid")


class TrieNode:
    __slots__ = ("children", "is_word")

    def __init__(self):
        self.children: dict[str, TrieNode] = {}
        self.is_word: bool = False


class PrefixTree:
    """Set of words supporting exact-word and prefix queries.

    Words are case-folded to upper case on the way in and on every query, so
    ``"cat"`` and ``"CAT"`` are the same entry. Anything that is not a string
    (``None`` included) is ignored by ``insert`` and reported as absent by the
    queries.
    """

    def __init__(self):
        self.root = TrieNode()
        self._size = 0

    @classmethod
    def from_words(cls, words: Iterable[str]) -> PrefixTree:
        tree = cls()
        for word in words:
            tree.insert(word)
        return tree

    def insert(self, word: str | None):
        if not isinstance(word, str):
            return
        node = self.root
        for ch in word.upper():
            child = node.children.get(ch)
            if child is None:
                child = node.children[ch] = TrieNode()
            node = child
        if not node.is_word:
            node.is_word = True
            self._size += 1

    def node(self, prefix: str | None) -> TrieNode | None:
        """Return the node spelling ``prefix``, or None if no word starts with it."""
        if not isinstance(prefix, str):
            return None
        node = self.root
        for ch in prefix.upper():
            node = node.children.get(ch)
            if node is None:
                return None
        return node

    def contains_word(self, word: str | None) -> bool:
        node = self.node(word)
        return node is not None and node.is_word

    def is_valid_prefix(self, prefix: str | None) -> bool:
        return self.node(prefix) is not None

    def words(self) -> Iterator[str]:
        """Yield every stored word once, in sorted order."""
        # Explicit stack; recursion depth would otherwise follow word length.
        stack: list[tuple[TrieNode, str]] = [(self.root, "")]
        while stack:
            node, prefix = stack.pop()
            if node.is_word:
                yield prefix
            for ch in sorted(node.children, reverse=True):
                stack.append((node.children[ch], prefix + ch))

    def num_words(self) -> int:
        return self._size

    def num_nodes(self) -> int:
        count = 0
        stack = [self.root]
        while stack:
            node = stack.pop()
            count += 1
            stack.extend(node.children.values())
        return count

    def __contains__(self, word) -> bool:
        return self.contains_word(word)

    def __len__(self) -> int:
        return self.num_words()

    def __repr__(self) -> str:
        return f"PrefixTree(words={self.num_words()}, nodes={self.num_nodes()})"


def is_grid_word(word: str) -> bool:
    """True for non-empty, purely ASCII-alphabetic entries."""
    return bool(word) and word.isascii() and word.isalpha()


def load_trie(path: str, min_length: int = 1) -> PrefixTree:
    """Build a PrefixTree from a file with one word per line.

    Blank lines and entries containing anything but ASCII letters are
    skipped. Raises FileNotFoundError if ``path`` does not exist.
    """
    trie = PrefixTree()
    loaded = skipped = 0
    start = time.perf_counter()
    with open(path, "r", encoding="utf-8") as f:
        for line in f:
            word = line.strip().upper()
            if len(word) >= min_length and is_grid_word(word):
                trie.insert(word)
                loaded += 1
            elif word:
                skipped += 1
    elapsed = (time.perf_counter() - start) * 1000
    logger.info("Loaded %d words from %s in %.1fms (skipped %d)", loaded, path, elapsed, skipped)
    return trie
