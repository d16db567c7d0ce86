"""Process-wide application state.

One owned object holds the round store, the display preference and the
remote mirror. It is created once at startup (rehydrate-or-empty) and
handed to the API through a dependency.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from tigerfive.config import Settings, load_settings
from tigerfive.db.session import SessionFactory, init_db
from tigerfive.entry.form import FormState, SubmissionResult, submit_round
from tigerfive.mirror.client import RemoteMirror
from tigerfive.mirror.oplog import OperationLog
from tigerfive.store.preferences import DisplayPreferences
from tigerfive.store.record_store import RecordStore

logger = logging.getLogger(__name__)


@dataclass
class AppState:
    """Owned state for one user session."""

    records: RecordStore
    preferences: DisplayPreferences
    mirror: RemoteMirror

    @property
    def operation_log(self) -> OperationLog:
        return self.mirror.log

    @classmethod
    def create(cls, session_factory: SessionFactory, mirror: RemoteMirror) -> AppState:
        """Build state over an existing byte store and rehydrate it."""
        state = cls(
            records=RecordStore(session_factory),
            preferences=DisplayPreferences(session_factory),
            mirror=mirror,
        )
        state.records.load()
        state.preferences.load()
        logger.info(
            f"State ready: {len(state.records)} rounds, "
            f"dark_mode={state.preferences.dark_mode}, mirror={'on' if mirror.enabled else 'off'}"
        )
        return state

    @classmethod
    def initialize(cls, settings: Settings | None = None) -> AppState:
        """Open the configured byte store and mirror."""
        if settings is None:
            settings = load_settings()
        session_factory = init_db(settings.db_path)
        return cls.create(session_factory, RemoteMirror.from_settings(settings))

    def submit(self, form: FormState) -> SubmissionResult:
        return submit_round(self.records, self.mirror, form)

    def close(self) -> None:
        self.mirror.shutdown(wait=True)
