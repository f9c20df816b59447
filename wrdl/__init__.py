"""wrdl: a terminal-based game of Wordle."""

__version__ = "0.3.0"
