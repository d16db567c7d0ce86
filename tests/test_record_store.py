"""Tests for the persisted round collection.

Invariants:
1. list() is sorted by date descending after any sequence of appends
2. The whole collection round-trips through the byte store unchanged
3. Absent or malformed stored data loads as an empty collection
4. Persistence failures never lose the in-memory round
"""

import json

from conftest import make_round
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from tigerfive.core.errors import PersistenceWarning
from tigerfive.db import repo
from tigerfive.db.schema import ROUNDS_KEY
from tigerfive.store.record_store import RecordStore, decode_rounds, encode_rounds


class TestAppendOrdering:
    """Invariant: most recent date first."""

    def test_sorted_after_out_of_order_appends(self, session_factory):
        """Appends in any date order come back date-descending."""
        store = RecordStore(session_factory)
        for i, date in enumerate(["2024-05-01", "2024-07-15", "2023-12-31", "2024-06-10"]):
            store.append(make_round(round_id=i, date=date))

        dates = [r.date for r in store.list()]
        assert dates == ["2024-07-15", "2024-06-10", "2024-05-01", "2023-12-31"]

    def test_same_date_keeps_insertion_order(self, session_factory):
        """Ties are deterministic: earlier insertion first."""
        store = RecordStore(session_factory)
        store.append(make_round(round_id=1, date="2024-05-01", course="A"))
        store.append(make_round(round_id=2, date="2024-05-01", course="B"))
        store.append(make_round(round_id=3, date="2024-04-01", course="C"))

        assert [r.course for r in store.list()] == ["A", "B", "C"]

    def test_list_returns_copy(self, session_factory):
        """Mutating the returned list does not touch the store."""
        store = RecordStore(session_factory)
        store.append(make_round())
        store.list().clear()
        assert len(store.list()) == 1

    def test_append_reports_persisted(self, session_factory):
        """Successful appends report no warning."""
        store = RecordStore(session_factory)
        result = store.append(make_round())
        assert result.persisted is True
        assert result.warning is None


class TestPersistence:
    """Invariant: whole-collection round trip."""

    def test_round_trip(self, session_factory):
        """Reloading yields equal content in equal order."""
        store = RecordStore(session_factory)
        for i in range(6):
            store.append(
                make_round(
                    round_id=100 + i,
                    date=f"2024-03-{10 + i:02d}",
                    threePutts=i,
                    badDrives=i % 2,
                )
            )

        reloaded = RecordStore(session_factory)
        assert reloaded.load() == store.list()

    def test_tiger_five_not_recomputed_on_load(self, session_factory, session):
        """Stored Tiger Five is a snapshot and survives reload as stored."""
        payload = json.dumps(
            [
                {
                    "id": 1,
                    "date": "2024-01-01",
                    "course": "Old Course",
                    "totalScore": 90,
                    "doubleBogeyPlus": 1,
                    "bogeyOnPar5": 1,
                    "threePutts": 1,
                    "bogeyInside150": 1,
                    "missedEasySaves": 1,
                    "badDrives": 0,
                    "tigerFive": 7,
                }
            ]
        ).encode()
        repo.put_value(session, ROUNDS_KEY, payload)
        session.commit()

        rounds = RecordStore(session_factory).load()
        assert rounds[0].tigerFive == 7

    def test_stored_json_uses_camel_case_fields(self, session_factory, session):
        """Persisted records use the documented field names."""
        store = RecordStore(session_factory)
        store.append(make_round(round_id=5, threePutts=2))

        stored = json.loads(repo.get_value(session, ROUNDS_KEY))
        assert set(stored[0]) == {
            "id",
            "date",
            "course",
            "totalScore",
            "doubleBogeyPlus",
            "bogeyOnPar5",
            "threePutts",
            "bogeyInside150",
            "missedEasySaves",
            "badDrives",
            "tigerFive",
        }

    def test_encode_decode(self):
        """Codec keeps order and values."""
        rounds = [make_round(round_id=2, date="2024-02-02"), make_round(round_id=1)]
        assert decode_rounds(encode_rounds(rounds)) == rounds


class TestLoadFallbacks:
    """Invariant: load never fails the caller."""

    def test_absent_key_is_empty(self, session_factory):
        """Fresh store loads empty."""
        assert RecordStore(session_factory).load() == []

    def test_invalid_json_is_empty(self, session_factory, session):
        """Undecodable payload loads empty."""
        repo.put_value(session, ROUNDS_KEY, b"{not json")
        session.commit()
        assert RecordStore(session_factory).load() == []

    def test_non_list_is_empty(self, session_factory, session):
        """A JSON object instead of a list loads empty."""
        repo.put_value(session, ROUNDS_KEY, b'{"id": 1}')
        session.commit()
        assert RecordStore(session_factory).load() == []

    def test_missing_fields_is_empty(self, session_factory, session):
        """Records without required fields load empty."""
        repo.put_value(session, ROUNDS_KEY, b'[{"id": 1, "date": "2024-01-01"}]')
        session.commit()
        assert RecordStore(session_factory).load() == []

    def test_unreadable_store_is_empty(self):
        """A store without the table loads empty."""
        broken = sessionmaker(bind=create_engine("sqlite:///:memory:"))
        assert RecordStore(broken).load() == []


class TestPersistenceFailure:
    """Invariant: in-memory state survives write failures."""

    def test_write_failure_is_warning(self):
        """Append keeps the round and returns a PersistenceWarning."""
        broken = sessionmaker(bind=create_engine("sqlite:///:memory:"))
        store = RecordStore(broken)

        result = store.append(make_round(round_id=42))

        assert result.persisted is False
        assert isinstance(result.warning, PersistenceWarning)
        assert [r.id for r in store.list()] == [42]
