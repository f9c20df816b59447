"""
progress.py

Persists which target word comes next.

The data file is a small JSON object:

    {
      "pointer": 3,
      "words_path": null,
      "allowed_guesses_path": "/home/me/guesses.json"
    }

pointer indexes the ordered valid word list and only ever grows; wrapping
around the list is done by WordLists.target_at. The two paths are the word
list overrides set with --words and --allowed-guesses.
"""

import json
import logging
import os
import stat
import tempfile
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Optional

import platformdirs

from wrdl.errors import PersistenceError


logger = logging.getLogger(__name__)

DATA_ENV_VAR = "WORDLE_CLI_DATA"
APP_DIR_NAME = "wordle-cli"
DATA_FILE_NAME = "data.json"
NEW_FILE_MODE = 0o644


@dataclass
class ProgressData:
    pointer: int = 0
    words_path: Optional[str] = None
    allowed_guesses_path: Optional[str] = None


def resolve_data_path(environ=None) -> Path:
    """
    Location of the data file.

    WORDLE_CLI_DATA wins when set, otherwise the platform's user data
    directory is used (e.g. ~/.local/share/wordle-cli/data.json on Linux).
    """
    if environ is None:
        environ = os.environ
    override = environ.get(DATA_ENV_VAR)
    if override:
        return Path(override)
    return Path(platformdirs.user_data_dir()) / APP_DIR_NAME / DATA_FILE_NAME


def _check_pointer(value, path):
    # bool is an int subclass, reject it explicitly
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise PersistenceError(
            f"data file {path} has an invalid pointer: {value!r}"
        )
    return value


def _check_path(value, key, path):
    if value is not None and not isinstance(value, str):
        raise PersistenceError(f"data file {path} has an invalid {key}: {value!r}")
    return value


def load_data(path) -> ProgressData:
    """Read the data file, or return defaults if it does not exist yet."""
    path = Path(path)
    if not path.exists():
        logger.debug("No data file at %s, starting fresh", path)
        return ProgressData()

    try:
        with open(path, "r", encoding="utf-8") as f:
            raw = json.load(f)
    except OSError as exc:
        raise PersistenceError(f"unable to read data file {path}: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise PersistenceError(f"data file {path} is not valid JSON: {exc}") from exc

    if not isinstance(raw, dict):
        raise PersistenceError(f"data file {path} must contain a JSON object")

    data = ProgressData(
        pointer=_check_pointer(raw.get("pointer", 0), path),
        words_path=_check_path(raw.get("words_path"), "words_path", path),
        allowed_guesses_path=_check_path(
            raw.get("allowed_guesses_path"), "allowed_guesses_path", path
        ),
    )
    logger.debug("Loaded %s from %s", data, path)
    return data


def save_data(path, data: ProgressData) -> ProgressData:
    """
    Write the data file atomically.

    The JSON goes to a temporary file next to the target which then replaces
    it, so an interrupted run leaves either the old file or the new one.
    """
    path = Path(path)
    _check_pointer(data.pointer, path)
    tmp_name = None
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(
            dir=path.parent, prefix=f".{path.name}.", suffix=".tmp"
        )
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            json.dump(asdict(data), f, indent=2)
            f.write("\n")
        # mkstemp creates 0600 files, keep the mode the data file already had
        if path.exists():
            mode = stat.S_IMODE(path.stat().st_mode)
        else:
            mode = NEW_FILE_MODE
        os.chmod(tmp_name, mode)
        os.replace(tmp_name, path)
    except OSError as exc:
        if tmp_name is not None and os.path.exists(tmp_name):
            os.unlink(tmp_name)
        raise PersistenceError(f"unable to write data file {path}: {exc}") from exc

    logger.debug("Saved %s to %s", data, path)
    return data


def load(path) -> int:
    """Pointer stored at path, 0 when there is no data file."""
    return load_data(path).pointer


def save(path, pointer: int) -> int:
    """Store a new pointer, keeping any word list overrides already saved."""
    data = load_data(path)
    data.pointer = pointer
    save_data(path, data)
    return pointer


def reset() -> int:
    return 0


def advance(pointer: int) -> int:
    return pointer + 1
