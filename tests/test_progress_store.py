"""
Tests for ProgressStore persistence and the latest-record lookup.
"""
import json

import pytest
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, create_engine

from teachmi.core.exceptions import PersistenceUnavailableError
from teachmi.models.enums import Rating
from teachmi.models.storage_slot import StorageSlot
from teachmi.schemas.progress import ProgressRecord
from teachmi.services.progress_store import ProgressStore, build_lookup


def write_raw(engine, key, value):
    with Session(engine) as session:
        session.add(StorageSlot(key=key, value=value))
        session.commit()


def test_load_without_slot_is_empty(store):
    assert store.load() == []


def test_save_then_load(store):
    records = [
        ProgressRecord(card_id="a", rating=Rating.KNOWN, reviewed_at=1000),
        ProgressRecord(card_id="b", rating=Rating.UNKNOWN, reviewed_at=2000),
    ]
    store.save(records)
    assert store.load() == records


def test_save_overwrites_previous_payload(store):
    store.save([ProgressRecord(card_id="a", rating=Rating.KNOWN, reviewed_at=1000)])
    store.save([ProgressRecord(card_id="b", rating=Rating.UNKNOWN, reviewed_at=2000)])
    assert [r.card_id for r in store.load()] == ["b"]


def test_slot_timestamp_is_timezone_aware():
    slot = StorageSlot(key="teachmi_progress", value="[]")
    assert slot.updated_at.tzinfo is not None


def test_repeated_saves_update_existing_slot(engine, store):
    store.save([ProgressRecord(card_id="a", rating=Rating.KNOWN, reviewed_at=1000)])
    store.save([ProgressRecord(card_id="a", rating=Rating.UNKNOWN, reviewed_at=2000)])
    store.save([ProgressRecord(card_id="a", rating=Rating.KNOWN, reviewed_at=3000)])

    assert store.load() == [ProgressRecord(card_id="a", rating=Rating.KNOWN, reviewed_at=3000)]
    with Session(engine) as session:
        assert session.get(StorageSlot, "teachmi_progress").updated_at is not None


def test_persisted_payload_format(engine, store):
    store.save([ProgressRecord(card_id="a", rating=Rating.UNKNOWN, reviewed_at=1718000000000)])

    with Session(engine) as session:
        raw = session.get(StorageSlot, "teachmi_progress").value

    assert json.loads(raw) == [
        {"card_id": "a", "rating": "thumbs_down", "reviewed_at": 1718000000000}
    ]


def test_loads_payload_written_elsewhere(engine, store):
    write_raw(engine, "teachmi_progress", '[{"card_id": "a", "rating": "thumbs_up", "reviewed_at": 5}]')
    assert store.load() == [ProgressRecord(card_id="a", rating=Rating.KNOWN, reviewed_at=5)]


@pytest.mark.parametrize("payload", [
    "not json at all",
    "{\"card_id\": \"a\"}",
    "[{\"card_id\": \"a\", \"rating\": \"meh\", \"reviewed_at\": 1}]",
    "[{\"card_id\": \"a\", \"rating\": \"thumbs_up\"}]",
    "[1, 2, 3]",
])
def test_corrupt_payload_loads_as_empty(engine, store, payload):
    write_raw(engine, "teachmi_progress", payload)
    assert store.load() == []


def test_clear_removes_slot(engine, store):
    store.save([ProgressRecord(card_id="a", rating=Rating.KNOWN, reviewed_at=1)])
    store.clear()

    assert store.load() == []
    with Session(engine) as session:
        assert session.get(StorageSlot, "teachmi_progress") is None


def test_clear_without_slot_is_noop(store):
    store.clear()
    assert store.load() == []


def test_slots_are_keyed(engine):
    first = ProgressStore(engine, "first")
    second = ProgressStore(engine, "second")
    first.save([ProgressRecord(card_id="a", rating=Rating.KNOWN, reviewed_at=1)])
    assert second.load() == []


def test_missing_storage_raises():
    # No tables created: the medium itself is unusable
    bare_engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    store = ProgressStore(bare_engine)

    with pytest.raises(PersistenceUnavailableError):
        store.load()
    with pytest.raises(PersistenceUnavailableError):
        store.save([])


class TestBuildLookup:

    def test_latest_timestamp_wins(self):
        records = [
            ProgressRecord(card_id="a", rating=Rating.UNKNOWN, reviewed_at=3000),
            ProgressRecord(card_id="a", rating=Rating.KNOWN, reviewed_at=1000),
        ]
        assert build_lookup(records)["a"].rating == Rating.UNKNOWN

    def test_later_record_wins_on_equal_timestamp(self):
        records = [
            ProgressRecord(card_id="a", rating=Rating.UNKNOWN, reviewed_at=1000),
            ProgressRecord(card_id="a", rating=Rating.KNOWN, reviewed_at=1000),
        ]
        assert build_lookup(records)["a"].rating == Rating.KNOWN

    def test_one_entry_per_card(self):
        records = [
            ProgressRecord(card_id="a", rating=Rating.KNOWN, reviewed_at=1),
            ProgressRecord(card_id="b", rating=Rating.KNOWN, reviewed_at=2),
            ProgressRecord(card_id="a", rating=Rating.UNKNOWN, reviewed_at=3),
        ]
        lookup = build_lookup(records)
        assert set(lookup) == {"a", "b"}
