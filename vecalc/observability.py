"""
Degenerate-input observability for vecalc.

The operations in math_utils stay pure: a degenerate case only emits a
WARNING on the "vecalc" logger hierarchy. DegenerateMonitor is a logging
handler that turns those records into events and counters, so a caller that
wants metrics attaches one and reads summary().

Records:
- operation that hit the degenerate case
- kind (zero_vector, dimension_mismatch)
- message and timestamp
"""

import logging
import threading
from collections import defaultdict, deque
from dataclasses import dataclass
from typing import Dict, List, Optional

PACKAGE_LOGGER = "vecalc"

logger = logging.getLogger(__name__)


@dataclass
class DegenerateEvent:
    """Record of a single degenerate-input case."""
    timestamp: float
    operation: str
    kind: str
    message: str

    def to_dict(self) -> Dict:
        return {
            "timestamp": self.timestamp,
            "operation": self.operation,
            "kind": self.kind,
            "message": self.message,
        }


class DegenerateMonitor(logging.Handler):
    """
    Collects degenerate-input events from vecalc log records.

    Only records carrying both `operation` and `kind` attributes (set through
    `extra=` by math_utils) are counted; anything else is ignored.
    """

    def __init__(self, max_history: int = 1000, level: int = logging.WARNING):
        """
        Initialize the monitor.

        Args:
            max_history: Maximum number of events to keep in history
            level:       Minimum record level to consider
        """
        super().__init__(level=level)
        self.max_history = max_history
        self.events: deque = deque(maxlen=max_history)
        self.total_events = 0
        self.operation_counts: Dict[str, int] = defaultdict(int)
        self.kind_counts: Dict[str, int] = defaultdict(int)
        self._attached_to: Optional[logging.Logger] = None
        self._state_lock = threading.Lock()

    # ── logging.Handler ───────────────────────────────────────────

    def emit(self, record: logging.LogRecord) -> None:
        operation = getattr(record, "operation", None)
        kind = getattr(record, "kind", None)
        if operation is None or kind is None:
            return
        event = DegenerateEvent(
            timestamp=record.created,
            operation=operation,
            kind=kind,
            message=record.getMessage(),
        )
        with self._state_lock:
            self.events.append(event)
            self.total_events += 1
            self.operation_counts[operation] += 1
            self.kind_counts[kind] += 1

    # ── Attachment ────────────────────────────────────────────────

    def attach(self, logger_name: str = PACKAGE_LOGGER) -> "DegenerateMonitor":
        """Start listening on the given logger (the vecalc package logger by default)."""
        target = logging.getLogger(logger_name)
        target.addHandler(self)
        self._attached_to = target
        logger.debug(f"DegenerateMonitor attached to '{logger_name}'")
        return self

    def detach(self) -> None:
        if self._attached_to is not None:
            self._attached_to.removeHandler(self)
            self._attached_to = None

    # ── Reporting ─────────────────────────────────────────────────

    def get_recent_events(self, limit: int = 10) -> List[DegenerateEvent]:
        """Get recent degenerate-input events."""
        with self._state_lock:
            return list(self.events)[-limit:]

    def summary(self) -> Dict:
        """
        Summary of everything recorded so far.

        Returns:
            Dictionary with totals per operation and per kind
        """
        with self._state_lock:
            return {
                "total_events": self.total_events,
                "events_retained": len(self.events),
                "operation_counts": dict(self.operation_counts),
                "kind_counts": dict(self.kind_counts),
            }

    def reset(self) -> None:
        """Reset all metrics."""
        with self._state_lock:
            self.events.clear()
            self.total_events = 0
            self.operation_counts.clear()
            self.kind_counts.clear()
