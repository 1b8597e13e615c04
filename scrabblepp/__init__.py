"""Scrabble game structures: board, racks, dictionary, player tree, scoring and Graphviz reports."""

__version__ = "0.1.0"