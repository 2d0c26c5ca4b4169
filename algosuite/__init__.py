"""Classic algorithms on linked lists, binary trees, grids, graphs, arrays and strings."""

__version__ = "0.1.0"