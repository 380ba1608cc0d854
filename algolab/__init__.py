"""Classic algorithms: searching, recursion, sorting, matrices, greedy, dynamic programming, graphs, N-queens and string matching."""

__version__ = "0.1.0"