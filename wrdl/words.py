"""
words.py

Handles loading and validating the Wordle word lists.

Two lists are used:
    valid:   ordered list of target words, walked through by the progress pointer
    allowed: set of words accepted as guesses (valid words are always included)

Both are JSON arrays of strings. Case is normalized to uppercase on load.
"""

import json
import logging
import string
from pathlib import Path

from wrdl.errors import DataError


logger = logging.getLogger(__name__)

DATA_DIR = Path(__file__).resolve().parent / "data"
DEFAULT_WORDS_PATH = DATA_DIR / "words.json"
DEFAULT_ALLOWED_GUESSES_PATH = DATA_DIR / "allowed_guesses.json"

LETTERS = frozenset(string.ascii_uppercase)


def load_word_list(path):
    """Load a JSON array of words into a list of uppercase strings."""
    path = Path(path)
    if not path.exists():
        raise DataError(f"word list does not exist: {path}")

    try:
        with open(path, "r", encoding="utf-8") as f:
            raw = json.load(f)
    except OSError as exc:
        raise DataError(f"unable to read word list {path}: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise DataError(f"word list {path} is not valid JSON: {exc}") from exc

    if not isinstance(raw, list):
        raise DataError(f"word list {path} must be a JSON array of strings")

    words = []
    for entry in raw:
        if not isinstance(entry, str):
            raise DataError(f"word list {path} contains a non-string entry: {entry!r}")
        if not entry.isascii():
            raise DataError(f"word list {path} contains a non-ASCII word: {entry!r}")
        word = entry.strip().upper()
        if not word or not set(word) <= LETTERS:
            raise DataError(f"word list {path} contains an invalid word: {entry!r}")
        words.append(word)

    if not words:
        raise DataError(f"word list {path} is empty")

    logger.debug("Loaded %d words from %s", len(words), path)
    return words


def _check_length(words, length, path):
    for word in words:
        if len(word) != length:
            raise DataError(
                f"word list {path} contains {word!r} of length {len(word)}, "
                f"expected {length}"
            )


class WordLists:
    """The ordered target words plus the set of allowed guesses."""

    def __init__(self, valid, allowed):
        self.valid = tuple(valid)
        self.allowed = frozenset(allowed) | frozenset(self.valid)

    @property
    def word_length(self) -> int:
        return len(self.valid[0])

    def is_allowed_guess(self, word: str) -> bool:
        return word.isascii() and word.strip().upper() in self.allowed

    def target_at(self, index: int, wrap: bool = True) -> str:
        """
        Return the target word for a progress pointer.

        With wrap=True (the default) the pointer is taken modulo the list
        length so the game keeps going after the last word. With wrap=False
        running past the end is a DataError.
        """
        if index < 0:
            raise ValueError(f"pointer must be non-negative, got {index}")
        if not wrap and index >= len(self.valid):
            raise DataError("all available words have been used")
        return self.valid[index % len(self.valid)]

    def __len__(self):
        return len(self.valid)


def load(valid_path=None, allowed_path=None) -> WordLists:
    """
    Load both word lists.

    Each path overrides its bundled default independently. The word length
    comes from the first valid word; every word in both lists must match it.
    """
    valid_source = Path(valid_path) if valid_path else DEFAULT_WORDS_PATH
    allowed_source = Path(allowed_path) if allowed_path else DEFAULT_ALLOWED_GUESSES_PATH

    valid = load_word_list(valid_source)
    length = len(valid[0])
    _check_length(valid, length, valid_source)

    allowed = load_word_list(allowed_source)
    _check_length(allowed, length, allowed_source)

    return WordLists(valid, allowed)
