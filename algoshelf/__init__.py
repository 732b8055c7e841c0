"""Classic algorithms: sorting, searching, graphs, trees, number theory, dynamic programming, backtracking, greedy methods, puzzles and a hash table."""

__version__ = "0.1.0"