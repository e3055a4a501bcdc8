"""Sequencing for overlapping location selections.

Fetches are never cancelled, so a slow earlier selection can finish after a
newer one.  Each selection takes a token; only the newest token's result is
accepted.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SelectionToken:
    sequence: int
    location: str


class SelectionTracker(Generic[T]):
    """Tracks the latest selection and the result currently on display."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._sequence = 0
        self._latest: SelectionToken | None = None
        self._result: T | None = None

    def select(self, location: str) -> SelectionToken:
        """Start a new selection, superseding any in flight."""
        with self._lock:
            self._sequence += 1
            self._latest = SelectionToken(self._sequence, location)
            return self._latest

    def is_current(self, token: SelectionToken) -> bool:
        with self._lock:
            return token == self._latest

    def complete(self, token: SelectionToken, result: T) -> bool:
        """Store ``result`` if ``token`` is still the latest selection."""
        with self._lock:
            if token != self._latest:
                logger.info(
                    "Discarding stale result for %s (selection %d superseded by %d)",
                    token.location,
                    token.sequence,
                    self._sequence,
                )
                return False
            self._result = result
            return True

    @property
    def result(self) -> T | None:
        with self._lock:
            return self._result
