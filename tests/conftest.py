import itertools
import os

import pytest
from sqlalchemy.pool import StaticPool
from sqlmodel import create_engine

# Set test environment variables before the app modules read settings
os.environ["ENVIRONMENT"] = "test"
os.environ["LOG_LEVEL"] = "WARNING"
os.environ["DATABASE_URL"] = "sqlite://"

from teachmi.core.database import init_db  # noqa: E402
from teachmi.schemas.card import Card, KanjiWord  # noqa: E402
from teachmi.services.cooldown_service import MIN_COOLDOWN  # noqa: E402
from teachmi.services.progress_store import ProgressStore  # noqa: E402


class ScriptedRandom:
    """Deterministic stand-in for random.Random.

    Values are consumed from the scripted sequences first; once a sequence is
    exhausted the matching default is returned.
    """

    def __init__(self, floats=(), windows=(), picks=(), default_float=0.0,
                 default_window=MIN_COOLDOWN, default_pick=0):
        self.floats = list(floats)
        self.windows = list(windows)
        self.picks = list(picks)
        self.default_float = default_float
        self.default_window = default_window
        self.default_pick = default_pick
        self.random_calls = 0

    def random(self):
        self.random_calls += 1
        return self.floats.pop(0) if self.floats else self.default_float

    def randint(self, a, b):
        value = self.windows.pop(0) if self.windows else self.default_window
        assert a <= value <= b, f"scripted window {value} outside [{a}, {b}]"
        return value

    def choice(self, seq):
        index = self.picks.pop(0) if self.picks else self.default_pick
        return seq[index % len(seq)]


def build_card(card_id, word_en="word", sentence_en="A sentence."):
    return Card(
        id=card_id,
        sentence=f"{card_id}の文です。",
        sentence_furigana=f"<ruby>{card_id}<rt>よみ</rt></ruby>の<ruby>文<rt>ぶん</rt></ruby>です。",
        sentence_en=sentence_en,
        word_kanji=card_id,
        word_furigana="よみ",
        word_en=word_en,
        extra_kanji=[KanjiWord(kanji="文", furigana="ぶん", en="sentence")],
    )


@pytest.fixture
def make_card():
    return build_card


@pytest.fixture
def make_rng():
    return ScriptedRandom


@pytest.fixture
def clock():
    """Clock returning strictly increasing epoch milliseconds."""
    ticks = itertools.count(1_700_000_000_000, 1000)
    return lambda: next(ticks)


@pytest.fixture
def engine():
    """In-memory SQLite engine with tables created."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    init_db(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def store(engine):
    return ProgressStore(engine, "teachmi_progress")
