"""
CAESAR TOOLKIT - In-memory record of handled cipher requests.

The handler emits one event per request; the API exposes the newest ones on
/events. The buffer is bounded by EVENTS_BUFFER_SIZE and shared process-wide.
"""

import threading
from collections import Counter, deque
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from core.config import settings


def _utc_now() -> str:
    return datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")


class ActivityMonitor:
    """Process-wide singleton holding recent request events, oldest first."""

    _instance: Optional["ActivityMonitor"] = None
    _lock = threading.Lock()

    def __new__(cls) -> "ActivityMonitor":
        with cls._lock:
            if cls._instance is None:
                instance = super().__new__(cls)
                instance._events = deque(maxlen=settings.EVENTS_BUFFER_SIZE)
                instance._mode_counts = Counter()
                instance._guard = threading.Lock()
                cls._instance = instance
        return cls._instance

    def emit(self, mode: Optional[str], status: int, **payload: Any) -> None:
        """Record one handled request: its mode (None if unparsed) and response status."""
        event = {"mode": mode, "status": status, "timestamp": _utc_now(), "payload": payload}
        with self._guard:
            self._events.append(event)
            self._mode_counts[mode or "invalid"] += 1

    def get_recent(self, n: int = 50, mode: Optional[str] = None) -> List[Dict[str, Any]]:
        """
        Newest n events, returned oldest first.

        With mode set, the n newest events of that mode, however many events
        of other modes came after them.
        """
        if n <= 0:
            return []
        with self._guard:
            selected: List[Dict[str, Any]] = []
            for event in reversed(self._events):
                if mode is None or event["mode"] == mode:
                    selected.append(event)
                    if len(selected) == n:
                        break
        selected.reverse()
        return selected

    def counts(self) -> Dict[str, int]:
        """Requests handled per mode since start; unparsed requests count as "invalid"."""
        with self._guard:
            return dict(self._mode_counts)

    def clear(self) -> None:
        with self._guard:
            self._events.clear()
            self._mode_counts.clear()
