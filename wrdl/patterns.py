"""
patterns.py

Scores guesses against the target word.

Each letter of a guess gets one of three verdicts, ordered so that a larger
value always means more information about that letter:

    0 = absent   (gray)
    1 = present  (yellow)
    2 = correct  (green)

The ordering is what lets the keyboard keep the best verdict per letter.
"""

from collections import Counter
from dataclasses import dataclass
from enum import IntEnum
from typing import Tuple

import numpy as np


class Verdict(IntEnum):
    ABSENT = 0
    PRESENT = 1
    CORRECT = 2


EMOJI = {
    Verdict.CORRECT: "\U0001F7E9",
    Verdict.PRESENT: "\U0001F7E8",
    Verdict.ABSENT: "⬛",
}

ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
UNKNOWN = -1


@dataclass(frozen=True)
class GuessResult:
    word: str
    verdicts: Tuple[Verdict, ...]

    @property
    def is_win(self) -> bool:
        return all(v == Verdict.CORRECT for v in self.verdicts)

    @property
    def emoji(self) -> str:
        return "".join(EMOJI[v] for v in self.verdicts)


def evaluate(target: str, guess: str) -> GuessResult:
    """
    Score a guess against a target of the same length.

    Every target letter can back at most one verdict. Exact positions claim
    their letter first; a misplaced guess letter is only PRESENT while the
    target still has an unclaimed copy of it, left to right. With target
    ALLOW and guess LLAMA the second L is CORRECT, the first L takes the
    remaining L as PRESENT, the first A takes the only A, and the last A is
    ABSENT.
    """
    target = target.upper()
    guess = guess.upper()
    if len(target) != len(guess):
        raise ValueError(f"cannot compare {guess!r} with a {len(target)} letter target")

    verdicts = [Verdict.ABSENT] * len(guess)
    unclaimed = Counter(target)

    for i, letter in enumerate(guess):
        if letter == target[i]:
            verdicts[i] = Verdict.CORRECT
            unclaimed[letter] -= 1

    for i, letter in enumerate(guess):
        if verdicts[i] is Verdict.ABSENT and unclaimed[letter] > 0:
            verdicts[i] = Verdict.PRESENT
            unclaimed[letter] -= 1

    return GuessResult(guess, tuple(verdicts))


def new_keyboard() -> np.ndarray:
    """One slot per letter A..Z, UNKNOWN until the letter has been guessed."""
    return np.full(len(ALPHABET), UNKNOWN, dtype=np.int8)


def update_keyboard(keyboard: np.ndarray, result: GuessResult) -> np.ndarray:
    """
    Fold a guess into the keyboard in place.

    A letter keeps the best verdict it has ever received, so a letter seen
    green stays green even if a later guess shows it gray elsewhere.
    """
    letters = np.frombuffer(result.word.encode("ascii"), dtype=np.uint8) - ord("A")
    verdicts = np.array([int(v) for v in result.verdicts], dtype=np.int8)
    np.maximum.at(keyboard, letters.astype(np.intp), verdicts)
    return keyboard


def share_text(number: int, results, won: bool, max_attempts: int = 6) -> str:
    """Spoiler free result grid, e.g. 'Wordle 12 4/6' followed by emoji rows."""
    score = len(results) if won else "X"
    lines = [f"Wordle {number} {score}/{max_attempts}", ""]
    lines.extend(r.emoji for r in results)
    return "\n".join(lines)
