"""Bounded, process-local log of remote mirror calls (newest first)."""

from __future__ import annotations

import threading
from collections import deque
from datetime import datetime, timezone
from typing import Any

from tigerfive.models.domain import OperationLogEntry

MAX_LOG_ENTRIES = 10


class OperationLog:
    """Most-recent-first log holding at most ``max_entries`` calls.

    Mirror pushes complete on executor threads, so inserts take a lock.
    """

    def __init__(self, max_entries: int = MAX_LOG_ENTRIES):
        self._entries: deque[OperationLogEntry] = deque(maxlen=max_entries)
        self._lock = threading.Lock()
        self._last_id = 0

    def record(self, method: str, endpoint: str, data: Any, response: Any) -> OperationLogEntry:
        """Insert a call at the front, dropping the oldest past the limit."""
        now = datetime.now(timezone.utc)
        with self._lock:
            entry_id = max(int(now.timestamp() * 1000), self._last_id + 1)
            self._last_id = entry_id
            entry = OperationLogEntry(
                id=entry_id,
                timestamp=now.isoformat(),
                method=method,
                endpoint=endpoint,
                data=data,
                response=response,
            )
            self._entries.appendleft(entry)
        return entry

    def entries(self) -> list[OperationLogEntry]:
        """Snapshot, newest first."""
        with self._lock:
            return list(self._entries)

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
