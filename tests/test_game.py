import pytest

from wrdl.errors import InvalidLengthError, NotAllowedError, SessionClosedError
from wrdl.game import GameSession, SessionStatus
from wrdl.patterns import Verdict


C, A = Verdict.CORRECT, Verdict.ABSENT


def test_start(word_lists):
    session = GameSession.start("crane", word_lists)
    assert session.target == "CRANE"
    assert session.status is SessionStatus.IN_PROGRESS
    assert session.attempts_remaining == 6
    assert session.history == ()
    assert not session.is_over


def test_win_scenario(word_lists):
    session = GameSession.start("CRANE", word_lists, max_attempts=6)

    first = session.submit_guess("SLATE")
    assert first.verdicts == (A, A, C, A, C)
    assert session.status is SessionStatus.IN_PROGRESS
    assert session.attempts_remaining == 5

    second = session.submit_guess("crane")
    assert second.is_win
    assert session.status is SessionStatus.WON
    assert session.attempts_remaining == 4
    assert [r.word for r in session.history] == ["SLATE", "CRANE"]

    with pytest.raises(SessionClosedError):
        session.submit_guess("SLATE")


def test_not_allowed_leaves_state_alone(word_lists):
    session = GameSession.start("CRANE", word_lists)
    session.submit_guess("SLATE")

    with pytest.raises(NotAllowedError):
        session.submit_guess("ZZZZZ")

    assert session.attempts_remaining == 5
    assert len(session.history) == 1
    assert session.status is SessionStatus.IN_PROGRESS


def test_wrong_length_leaves_state_alone(word_lists):
    session = GameSession.start("CRANE", word_lists)
    with pytest.raises(InvalidLengthError) as excinfo:
        session.submit_guess("CRANES")

    assert excinfo.value.expected == 5
    assert session.attempts_remaining == 6
    assert session.history == ()


def test_loss_after_max_attempts(word_lists):
    session = GameSession.start("CRANE", word_lists)
    for guess in ["SLATE", "ALLOW", "THOSE", "LLAMA", "GEESE", "PIANO"]:
        session.submit_guess(guess)

    assert session.status is SessionStatus.LOST
    assert session.attempts_remaining == 0
    assert session.is_over

    with pytest.raises(SessionClosedError):
        session.submit_guess("CRANE")
    assert len(session.history) == 6


def test_win_on_last_attempt(word_lists):
    session = GameSession.start("CRANE", word_lists, max_attempts=2)
    session.submit_guess("SLATE")
    session.submit_guess("CRANE")
    assert session.status is SessionStatus.WON


def test_repeated_guesses_are_allowed(word_lists):
    session = GameSession.start("CRANE", word_lists, max_attempts=3)
    session.submit_guess("SLATE")
    session.submit_guess("SLATE")
    assert session.attempts_used == 2


def test_keyboard_tracks_guesses(word_lists):
    session = GameSession.start("CRANE", word_lists)
    session.submit_guess("SLATE")
    keyboard = session.keyboard
    assert keyboard[ord("A") - ord("A")] == C
    assert keyboard[ord("S") - ord("A")] == A
    assert keyboard[ord("Q") - ord("A")] == -1
    with pytest.raises(ValueError):
        keyboard[0] = 0


def test_invalid_max_attempts(word_lists):
    with pytest.raises(ValueError):
        GameSession.start("CRANE", word_lists, max_attempts=0)
