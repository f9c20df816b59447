import json

import pytest

from wrdl.words import WordLists


@pytest.fixture
def word_lists():
    valid = ["CRANE", "SLATE", "ALLOW", "THOSE"]
    allowed = ["LLAMA", "GEESE", "EERIE", "BOBBY", "PIANO", "MOUSE", "TRAIN", "GHOST"]
    return WordLists(valid, allowed)


@pytest.fixture
def write_json(tmp_path):
    def write(name, payload):
        path = tmp_path / name
        path.write_text(json.dumps(payload), encoding="utf-8")
        return path

    return write
