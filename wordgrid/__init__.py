"""Find every dictionary word traceable on a square letter grid."""

from wordgrid.board import Cell, Grid, neighbors, random_board
from wordgrid.solver import MIN_WORD_LENGTH, find_all_words, solve
from wordgrid.trie import PrefixTree, load_trie

__version__ = "0.1.0"
