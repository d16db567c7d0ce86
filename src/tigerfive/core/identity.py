"""Identity utilities for round records.

- next_round_id: time-based id, strictly increasing within the process
- today_iso: default entry date
- canonical_json: compact JSON text used for the byte store and mirror
"""

import json
import threading
import time
from datetime import date
from typing import Any

_id_lock = threading.Lock()
_last_id = 0


def next_round_id(now_ms: int | None = None) -> int:
    """Return a new round id.

    The id is the creation time in milliseconds since the epoch. When two
    rounds are created within the same millisecond (or the clock steps
    backwards) the previous id plus one is used instead, so ids always
    follow creation order.

    Args:
        now_ms: Override for the current time, for tests.

    Returns:
        Positive integer id.
    """
    global _last_id

    if now_ms is None:
        now_ms = int(time.time() * 1000)

    with _id_lock:
        candidate = max(now_ms, _last_id + 1)
        _last_id = candidate
        return candidate


def today_iso() -> str:
    """Today's local date as YYYY-MM-DD."""
    return date.today().isoformat()


def canonical_json(obj: Any) -> str:
    """Compact JSON text with stable key order as given."""
    return json.dumps(obj, separators=(",", ":"))
