"""Canonical, persisted list of rounds.

The whole collection is the persisted unit: every append rewrites the
single ``tigerFiveRounds`` value in one transaction. Persistence failures
never invalidate the in-memory list.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass

from sqlalchemy.exc import SQLAlchemyError

from tigerfive.core.errors import PersistenceWarning
from tigerfive.core.identity import canonical_json
from tigerfive.db import repo
from tigerfive.db.schema import ROUNDS_KEY
from tigerfive.db.session import SessionFactory, session_scope
from tigerfive.models.domain import RoundEntity

logger = logging.getLogger(__name__)


@dataclass
class AppendResult:
    """Result of appending a round.

    Attributes:
        round: The stored round.
        persisted: Whether the collection reached the byte store.
        warning: Why it did not, when it did not.
    """

    round: RoundEntity
    persisted: bool
    warning: PersistenceWarning | None = None


def sort_by_date_desc(rounds: list[RoundEntity]) -> list[RoundEntity]:
    """Most recent date first; rounds sharing a date keep their order."""
    return sorted(rounds, key=lambda r: r.date, reverse=True)


def encode_rounds(rounds: list[RoundEntity]) -> bytes:
    return canonical_json([r.to_dict() for r in rounds]).encode("utf-8")


def decode_rounds(payload: bytes) -> list[RoundEntity]:
    """Decode a stored collection.

    Raises:
        ValueError: If the payload is not a JSON list of round objects.
    """
    data = json.loads(payload.decode("utf-8"))
    if not isinstance(data, list):
        raise ValueError(f"expected a list of rounds, got {type(data).__name__}")
    try:
        return [RoundEntity.from_dict(item) for item in data]
    except (KeyError, TypeError, AttributeError) as e:
        raise ValueError(f"malformed round record: {e}") from e


class RecordStore:
    """Ordered collection of rounds backed by the local byte store."""

    def __init__(self, session_factory: SessionFactory):
        """Initialize an empty store.

        Args:
            session_factory: Callable returning new database sessions.
        """
        self._session_factory = session_factory
        self._rounds: list[RoundEntity] = []

    def load(self) -> list[RoundEntity]:
        """Rehydrate from the byte store.

        An absent or malformed value yields an empty collection.
        """
        try:
            with session_scope(self._session_factory) as session:
                payload = repo.get_value(session, ROUNDS_KEY)
        except (SQLAlchemyError, OSError) as e:
            logger.warning(f"Could not read stored rounds: {e}")
            self._rounds = []
            return self.list()

        if payload is None:
            self._rounds = []
            return self.list()

        try:
            rounds = decode_rounds(payload)
        except (UnicodeDecodeError, ValueError) as e:
            logger.warning(f"Ignoring malformed stored rounds: {e}")
            rounds = []

        self._rounds = sort_by_date_desc(rounds)
        logger.debug(f"Loaded {len(self._rounds)} rounds")
        return self.list()

    def append(self, round: RoundEntity) -> AppendResult:
        """Insert a round, re-sort, and persist the whole collection."""
        self._rounds = sort_by_date_desc([*self._rounds, round])

        warning = self._persist()
        return AppendResult(round=round, persisted=warning is None, warning=warning)

    def list(self) -> list[RoundEntity]:
        """Current collection, most recent date first."""
        return list(self._rounds)

    def __len__(self) -> int:
        return len(self._rounds)

    def _persist(self) -> PersistenceWarning | None:
        payload = encode_rounds(self._rounds)
        try:
            with session_scope(self._session_factory) as session:
                repo.put_value(session, ROUNDS_KEY, payload)
        except (SQLAlchemyError, OSError) as e:
            logger.warning(f"Could not save rounds: {e}")
            return PersistenceWarning(f"Round kept for this session but not saved locally: {e}")
        return None
