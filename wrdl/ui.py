"""
ui.py

Terminal front end built on rich: the guess board, the alphabet overview and
the end of game result with a shareable emoji grid that can be copied to
the clipboard.
"""

import pyperclip
from rich.console import Console
from rich.rule import Rule
from rich.text import Text

from wrdl.errors import GuessError
from wrdl.game import GameSession, SessionStatus
from wrdl.patterns import ALPHABET, UNKNOWN, Verdict, share_text


TILE_STYLES = {
    Verdict.CORRECT: "bold white on green",
    Verdict.PRESENT: "bold black on yellow",
    Verdict.ABSENT: "bold white on grey37",
}

KEY_STYLES = {
    Verdict.CORRECT: "bold green",
    Verdict.PRESENT: "bold yellow",
    Verdict.ABSENT: "bright_black",
}

KEYS_PER_ROW = 9


def render_guess(result) -> Text:
    row = Text()
    for letter, verdict in zip(result.word, result.verdicts):
        row.append(f" {letter} ", style=TILE_STYLES[verdict])
        row.append(" ")
    return row


def render_board(session: GameSession) -> Text:
    board = Text(justify="center")
    for result in session.history:
        board.append_text(render_guess(result))
        board.append("\n")
    blank = " _  " * len(session.target)
    for _ in range(session.attempts_remaining):
        board.append(blank, style="dim")
        board.append("\n")
    board.rstrip()
    return board


def render_keyboard(keyboard) -> Text:
    """Alphabet coloured by the best verdict each letter has received."""
    text = Text(justify="center")
    for index, letter in enumerate(ALPHABET):
        status = int(keyboard[index])
        style = "" if status == UNKNOWN else KEY_STYLES[Verdict(status)]
        text.append(letter, style=style)
        if (index + 1) % KEYS_PER_ROW == 0:
            text.append("\n")
        elif index + 1 < len(ALPHABET):
            text.append(" ")
    return text


def show_session(console: Console, session: GameSession, message=None):
    console.print(Rule(f"Guesses {session.attempts_used}/{session.max_attempts}"))
    console.print(render_board(session))
    console.print(Rule("Alphabet", style="dim"))
    console.print(render_keyboard(session.keyboard))
    if message:
        console.print(Text(message, style="red"), justify="center")


def show_result(console: Console, session: GameSession, number: int):
    if session.status is SessionStatus.WON:
        headline = Text("Correct! The word was ")
    else:
        headline = Text("The correct word was ")
    headline.append(session.target, style="bold green")
    headline.append(".")

    console.print(Rule("Result"))
    console.print(render_board(session))
    console.print()
    console.print(headline, justify="center")
    console.print()
    grid = share_text(
        number,
        session.history,
        session.status is SessionStatus.WON,
        session.max_attempts,
    )
    console.print(grid, justify="center", markup=False)
    return grid


def offer_copy(console: Console, grid: str, read) -> bool:
    """Ask whether to put the result grid on the clipboard. Returns True if copied."""
    try:
        answer = read("Copy result to clipboard? [y/N] ")
    except (EOFError, KeyboardInterrupt):
        console.print()
        return False

    if answer.strip().lower() not in ("y", "yes"):
        return False

    try:
        pyperclip.copy(grid)
    except pyperclip.PyperclipException as exc:
        console.print(Text(f"Could not copy result: {exc}", style="red"))
        return False

    console.print("Result copied to clipboard.", style="dim")
    return True


def play(session: GameSession, console: Console, number: int, read=None):
    """
    Run the interactive loop until the session is won or lost.

    read is the input function and defaults to console.input. EOFError and
    KeyboardInterrupt while guessing are left to the caller; once the game
    is decided they only skip the clipboard offer.
    """
    if read is None:
        read = console.input

    message = None
    while not session.is_over:
        show_session(console, session, message)
        raw = read("Guess: ")
        try:
            session.submit_guess(raw)
        except GuessError as exc:
            message = str(exc)
        else:
            message = None

    grid = show_result(console, session, number)
    offer_copy(console, grid, read)
    return session.status
