"""Database schema for the local byte store.

A single key-value table. Each key holds one opaque byte value that is
always replaced as a whole.
"""

from datetime import datetime, timezone

from sqlalchemy import DateTime, LargeBinary, String
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

# Logical keys
ROUNDS_KEY = "tigerFiveRounds"
DARK_MODE_KEY = "darkMode"


class Base(DeclarativeBase):
    """Base class for all models."""

    pass


class KeyValueEntry(Base):
    """One key of the local byte store."""

    __tablename__ = "kv_store"

    key: Mapped[str] = mapped_column(String(128), primary_key=True)
    value: Mapped[bytes] = mapped_column(LargeBinary, nullable=False)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime,
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
    )
