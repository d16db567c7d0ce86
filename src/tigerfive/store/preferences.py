"""Display preference flag (dark mode), stored as "true"/"false" text."""

from __future__ import annotations

import logging

from sqlalchemy.exc import SQLAlchemyError

from tigerfive.db import repo
from tigerfive.db.schema import DARK_MODE_KEY
from tigerfive.db.session import SessionFactory, session_scope

logger = logging.getLogger(__name__)


class DisplayPreferences:
    """Dark mode flag backed by the local byte store."""

    def __init__(self, session_factory: SessionFactory):
        self._session_factory = session_factory
        self.dark_mode = False

    def load(self) -> bool:
        """Read the stored flag; missing or unreadable means light mode."""
        try:
            with session_scope(self._session_factory) as session:
                payload = repo.get_value(session, DARK_MODE_KEY)
        except (SQLAlchemyError, OSError) as e:
            logger.warning(f"Could not read display preference: {e}")
            payload = None

        self.dark_mode = payload is not None and payload.strip() == b"true"
        return self.dark_mode

    def set_dark_mode(self, value: bool) -> bool:
        self.dark_mode = bool(value)
        try:
            with session_scope(self._session_factory) as session:
                repo.put_value(session, DARK_MODE_KEY, b"true" if self.dark_mode else b"false")
        except (SQLAlchemyError, OSError) as e:
            logger.warning(f"Could not save display preference: {e}")
        return self.dark_mode

    def toggle_dark_mode(self) -> bool:
        return self.set_dark_mode(not self.dark_mode)
