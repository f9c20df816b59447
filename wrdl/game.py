"""
game.py

One round of Wordle: a target, up to max_attempts guesses, and a terminal
status once the target is found or the attempts run out.
"""

from enum import Enum
from typing import List

import numpy as np

from wrdl.errors import InvalidLengthError, NotAllowedError, SessionClosedError
from wrdl.patterns import GuessResult, evaluate, new_keyboard, update_keyboard
from wrdl.words import WordLists


MAX_ATTEMPTS = 6


class SessionStatus(Enum):
    IN_PROGRESS = "in_progress"
    WON = "won"
    LOST = "lost"


class GameSession:
    def __init__(self, target: str, word_lists: WordLists, max_attempts: int = MAX_ATTEMPTS):
        if max_attempts < 1:
            raise ValueError(f"max_attempts must be positive, got {max_attempts}")
        self._target = target.upper()
        self._word_lists = word_lists
        self._max_attempts = max_attempts
        self._history: List[GuessResult] = []
        self._attempts_remaining = max_attempts
        self._status = SessionStatus.IN_PROGRESS
        self._keyboard = new_keyboard()

    @classmethod
    def start(cls, target: str, word_lists: WordLists, max_attempts: int = MAX_ATTEMPTS):
        return cls(target, word_lists, max_attempts)

    @property
    def target(self) -> str:
        return self._target

    @property
    def max_attempts(self) -> int:
        return self._max_attempts

    @property
    def history(self):
        return tuple(self._history)

    @property
    def status(self) -> SessionStatus:
        return self._status

    @property
    def attempts_remaining(self) -> int:
        return self._attempts_remaining

    @property
    def attempts_used(self) -> int:
        return len(self._history)

    @property
    def is_over(self) -> bool:
        return self._status is not SessionStatus.IN_PROGRESS

    @property
    def keyboard(self) -> np.ndarray:
        """Best verdict per letter A..Z so far (-1 for letters not guessed)."""
        view = self._keyboard.view()
        view.flags.writeable = False
        return view

    def submit_guess(self, raw: str) -> GuessResult:
        """
        Score a guess and advance the state machine.

        Rejected guesses raise a GuessError subclass and leave the history,
        attempts and status untouched.
        """
        if self.is_over:
            raise SessionClosedError(f"session already finished ({self._status.value})")

        guess = raw.strip().upper()
        if len(guess) != len(self._target):
            raise InvalidLengthError(guess, len(self._target))
        if not self._word_lists.is_allowed_guess(guess):
            raise NotAllowedError(guess)

        result = evaluate(self._target, guess)
        self._history.append(result)
        self._attempts_remaining -= 1
        update_keyboard(self._keyboard, result)

        if result.is_win:
            self._status = SessionStatus.WON
        elif self._attempts_remaining == 0:
            self._status = SessionStatus.LOST

        return result
