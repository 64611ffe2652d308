"""Configuration values for the unit tests."""

import pytest
from click.testing import CliRunner

from lcaaj_transcriber.api import create_app
from lcaaj_transcriber.engine import get_transcriber
from lcaaj_transcriber.constants import HUSHED_CONSONANTS, NOTE_PAYLOAD, VOWELS


@pytest.fixture(scope="session")
def transcriber():
    """The transcriber with the built-in rule tables."""
    return get_transcriber()


@pytest.fixture
def note_dict():
    """Annotation rule with a comment closed by QP."""
    return {
        "code": "QS",
        "gloss": "said by: {text}",
        "payload": NOTE_PAYLOAD,
        "terminator": "QP",
    }


@pytest.fixture
def mark_dict():
    """Annotation rule without a comment."""
    return {"code": "QTA", "gloss": "tape audited"}


@pytest.fixture
def vowel_rule_dict():
    """Vowel rule for the short vowel marker."""
    return {
        "target": VOWELS,
        "marker": "(94)",
        "template": "{}\N{COMBINING BREVE}",
        "lookback": 2,
    }


@pytest.fixture
def hushing_rule_dict():
    """Consonant class rule for the hushing consonants."""
    return {
        "target": HUSHED_CONSONANTS,
        "marker": r"(\+)",
        "table": {"s": "ʃ", "z": "ʒ", "c": "tʃ"},
    }


@pytest.fixture(scope="session")
def sample_notations():
    """Mix of phonetic notation, annotation codes and plain text."""
    return [
        "a94",
        "s+",
        "d2",
        "0",
        "a,,",
        "+ BUTdog",
        "QTA QRR",
        "b3n1 ka+,, d8,",
        "Hello World",
        "",
    ]


@pytest.fixture
def app(transcriber):
    app = create_app(transcriber)
    app.config["TESTING"] = True
    return app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def runner():
    return CliRunner()
