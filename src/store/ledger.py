"""Append-only delta ledger.

Stores every write made to one instance, from any view, in write order.
Key property: append-only, never reordered or rewritten.
"""

from __future__ import annotations

import threading
from typing import Iterator

from core.types import Delta


class Ledger:
    """Ordered, append-only sequence of deltas for one instance.

    Appends are serialized under a lock. Readers take a snapshot, so a read
    observes the ledger as it was when the read started.
    """

    def __init__(self) -> None:
        self._deltas: list[Delta] = []
        self._lock = threading.Lock()

    def append(self, delta: Delta) -> int:
        """Append a delta and return its position in the ledger.

        This is the only write operation. Deltas are never modified or deleted.
        """
        with self._lock:
            self._deltas.append(delta)
            return len(self._deltas) - 1

    def snapshot(self) -> tuple[Delta, ...]:
        """Return an immutable copy of the deltas recorded so far."""
        with self._lock:
            return tuple(self._deltas)

    def __len__(self) -> int:
        with self._lock:
            return len(self._deltas)

    def __iter__(self) -> Iterator[Delta]:
        return iter(self.snapshot())
