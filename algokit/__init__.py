"""Classic algorithms on linked lists, trees, graphs, arrays, strings and matrices."""

__version__ = "0.1.0"