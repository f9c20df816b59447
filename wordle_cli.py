"""
wordle_cli.py

wordle-cli (wrdl) is a terminal-based game of Wordle.

Each run plays the next word from the ordered word list and then moves the
progress pointer on by one. After the last word the list starts over.

Configuration (each of these updates the data file and exits):
-w, --words [PATH]: use PATH as the target word list, no PATH to unset.
-a, --allowed-guesses [PATH]: use PATH as the allowed guesses list, no PATH to unset.
-r, --reset: set the next word pointer back to the beginning.

The data file lives in the platform data directory unless WORDLE_CLI_DATA
points somewhere else.
"""

import argparse
import logging
import sys
from pathlib import Path

from rich.console import Console

from wrdl import __version__, progress, words
from wrdl.errors import DataError, PersistenceError
from wrdl.game import GameSession
from wrdl.ui import play


logger = logging.getLogger("wrdl")


def print_error(message):
    Console(stderr=True).print(f"[bold red]error[/bold red]: {message}", highlight=False)


def verify_path(value):
    """Turn a flag value into an absolute path, or None when it was left blank."""
    if not value:
        return None
    path = Path(value).expanduser()
    if not path.exists():
        raise DataError(f"path does not exist: {value}")
    return str(path.resolve())


def forget_missing_paths(data):
    """Drop stored overrides whose file has since been moved or deleted."""
    if data.words_path and not Path(data.words_path).exists():
        logger.warning("Stored word list %s is gone, using the built-in list", data.words_path)
        data.words_path = None
    if data.allowed_guesses_path and not Path(data.allowed_guesses_path).exists():
        logger.warning(
            "Stored allowed guesses %s are gone, using the built-in list",
            data.allowed_guesses_path,
        )
        data.allowed_guesses_path = None


def apply_configuration(args, data_path):
    """Handle --words, --allowed-guesses and --reset. Returns the saved data."""
    data = progress.load_data(data_path)

    if args.words is not None:
        data.words_path = verify_path(args.words)
    if args.allowed_guesses is not None:
        data.allowed_guesses_path = verify_path(args.allowed_guesses)

    if args.words is not None or args.allowed_guesses is not None:
        forget_missing_paths(data)
        # Catch bad or mismatched lists now rather than at the next game.
        words.load(data.words_path, data.allowed_guesses_path)

    if args.reset:
        data.pointer = progress.reset()

    progress.save_data(data_path, data)

    if args.words is not None:
        print(f"Word list: {data.words_path or 'built-in'}")
    if args.allowed_guesses is not None:
        print(f"Allowed guesses: {data.allowed_guesses_path or 'built-in'}")
    if args.reset:
        print("Next word pointer reset to the beginning.")
    return data


def run_game(data_path, console, read=None):
    data = progress.load_data(data_path)
    word_lists = words.load(data.words_path, data.allowed_guesses_path)
    target = word_lists.target_at(data.pointer)
    logger.debug("Pointer %d of %d words", data.pointer, len(word_lists))

    session = GameSession.start(target, word_lists)
    try:
        play(session, console, data.pointer + 1, read=read)
    except (KeyboardInterrupt, EOFError):
        console.print("\nGame abandoned, progress not saved.")
        return 1

    # The result is already on screen, only the pointer update can fail here.
    progress.save(data_path, progress.advance(data.pointer))
    return 0


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        prog="wrdl",
        description="wordle-cli (wrdl) is a terminal-based game of Wordle.",
    )
    parser.add_argument(
        "-w",
        "--words",
        nargs="?",
        const="",
        default=None,
        metavar="PATH",
        help="Specify path to allowed words file, leave blank to unset.",
    )
    parser.add_argument(
        "-a",
        "--allowed-guesses",
        nargs="?",
        const="",
        default=None,
        metavar="PATH",
        help="Specify path to allowed guesses file, leave blank to unset.",
    )
    parser.add_argument(
        "-r",
        "--reset",
        action="store_true",
        help="Set the next word pointer to the beginning.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log file loading and saving to stderr.",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        data_path = progress.resolve_data_path()
        logger.debug("Using data file %s", data_path)

        if args.words is not None or args.allowed_guesses is not None or args.reset:
            apply_configuration(args, data_path)
            return 0

        return run_game(data_path, Console())
    except (DataError, PersistenceError) as exc:
        print_error(exc)
        raise SystemExit(1) from exc


if __name__ == "__main__":
    sys.exit(main())
