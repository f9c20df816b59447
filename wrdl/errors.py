"""
errors.py

Exceptions raised by the game core. Everything derives from WordleError so
the command line layer can report any of them uniformly.
"""


class WordleError(Exception):
    """Base class for all wrdl errors."""


class DataError(WordleError):
    """A word list is missing, unreadable or malformed."""


class PersistenceError(WordleError):
    """The progress data file could not be read or written."""


class GuessError(WordleError):
    """A guess was rejected. The session is left untouched."""


class InvalidLengthError(GuessError):
    def __init__(self, guess, expected):
        super().__init__(f"Not a valid {expected} letter word. Try again...")
        self.guess = guess
        self.expected = expected


class NotAllowedError(GuessError):
    def __init__(self, guess):
        super().__init__(f"{guess} is not in the word list. Try again...")
        self.guess = guess


class SessionClosedError(WordleError):
    """A guess was submitted after the session already finished."""
