"""Tile game: collect every item on a .ber map, then reach the exit."""

__version__ = "0.1.0"