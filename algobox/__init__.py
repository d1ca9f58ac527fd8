"""Classic algorithms and data structures: backtracking, graphs, hashing, number theory, geometry, searching, sorting and a circular queue."""

__version__ = "0.1.0"