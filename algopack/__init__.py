"""Classic algorithms and data structures: sorting, graphs, dynamic programming,
number theory, linked structures, trees, backtracking, the banker's algorithm
and two terminal games."""

__version__ = "0.1.0"