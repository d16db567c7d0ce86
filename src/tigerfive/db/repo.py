"""Repository for the local byte store.

Encapsulates all SQLAlchemy queries. Callers only see keys and bytes.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy.orm import Session

from tigerfive.db.schema import KeyValueEntry

if TYPE_CHECKING:
    from sqlalchemy.orm import Session as DbSession
else:
    DbSession = Session

# Re-export for external use
__all__ = ["DbSession"]


def get_value(session: DbSession, key: str) -> bytes | None:
    """Get the stored bytes for a key, or None when absent."""
    entry = session.get(KeyValueEntry, key)
    return entry.value if entry else None


def put_value(session: DbSession, key: str, value: bytes) -> None:
    """Replace the stored bytes for a key."""
    entry = session.get(KeyValueEntry, key)
    if entry:
        entry.value = value
    else:
        session.add(KeyValueEntry(key=key, value=value))
