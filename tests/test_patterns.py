import numpy as np
import pytest

from wrdl.patterns import (
    Verdict,
    evaluate,
    new_keyboard,
    share_text,
    update_keyboard,
)


C, P, A = Verdict.CORRECT, Verdict.PRESENT, Verdict.ABSENT


@pytest.mark.parametrize("word", ["CRANE", "ALLOW", "EERIE", "MAMMA"])
def test_same_word_is_all_correct(word):
    result = evaluate(word, word)
    assert result.verdicts == (C,) * 5
    assert result.is_win


def test_duplicate_guess_letters_limited_by_target():
    # target has two L's, one claimed by the green at position 1
    result = evaluate("ALLOW", "LLAMA")
    assert result.verdicts == (P, C, P, A, A)
    assert not result.is_win


def test_three_repeats_against_single_letter():
    assert evaluate("SPEAK", "EERIE").verdicts == (P, A, A, A, A)


def test_green_claims_letter_before_yellow():
    assert evaluate("CRANE", "EERIE").verdicts == (A, A, P, A, C)
    assert evaluate("CRANE", "GEESE").verdicts == (A, A, A, A, C)


def test_duplicate_target_letters():
    assert evaluate("ABBEY", "BOBBY").verdicts == (P, A, C, A, C)


def test_case_insensitive():
    assert evaluate("crane", "Slate") == evaluate("CRANE", "SLATE")
    assert evaluate("crane", "slate").word == "SLATE"


def test_evaluate_is_deterministic():
    assert evaluate("ALLOW", "LLAMA") == evaluate("ALLOW", "LLAMA")


def test_other_word_lengths():
    assert evaluate("CAT", "TAT").verdicts == (A, C, C)
    assert evaluate("BANANA", "ANANAS").verdicts == (P, P, P, P, P, A)


def test_length_mismatch_rejected():
    with pytest.raises(ValueError):
        evaluate("CRANE", "CRANES")


def test_keyboard_keeps_best_verdict():
    keyboard = new_keyboard()
    assert (keyboard == -1).all()

    update_keyboard(keyboard, evaluate("CRANE", "GEESE"))
    update_keyboard(keyboard, evaluate("CRANE", "SLATE"))

    index = {letter: ord(letter) - ord("A") for letter in "AEGLSTZ"}
    assert keyboard[index["E"]] == C
    assert keyboard[index["A"]] == C
    assert keyboard[index["G"]] == A
    assert keyboard[index["S"]] == A
    assert keyboard[index["Z"]] == -1
    assert keyboard.dtype == np.int8


def test_share_text():
    results = [evaluate("CRANE", "SLATE"), evaluate("CRANE", "CRANE")]
    text = share_text(7, results, won=True)
    assert text.splitlines() == [
        "Wordle 7 2/6",
        "",
        "⬛⬛\U0001F7E9⬛\U0001F7E9",
        "\U0001F7E9" * 5,
    ]


def test_share_text_loss():
    results = [evaluate("CRANE", "ALLOW")]
    assert share_text(1, results, won=False).startswith("Wordle 1 X/6")
    assert evaluate("CRANE", "ALLOW").emoji == "\U0001F7E8⬛⬛⬛⬛"
