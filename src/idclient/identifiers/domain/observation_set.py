"""Local observation set for analysis identifiers.

Records the analysis identifiers one client instance has issued or
accepted. Membership is the only state the identifiers domain mutates; it
is never persisted and never shared between instances.
"""

from __future__ import annotations

import threading
from typing import Iterable, Iterator


class ObservationSet:
    """Thread-safe, grow-only set of identifier strings.

    All reads and writes are serialized behind a lock, so a single client
    may be shared across threads. add_if_absent() performs the membership
    check and the insert atomically.
    """

    def __init__(self, initial: Iterable[str] = ()) -> None:
        self._lock = threading.Lock()
        self._ids: set[str] = set(initial)

    def __contains__(self, identifier: object) -> bool:
        with self._lock:
            return identifier in self._ids

    def __len__(self) -> int:
        with self._lock:
            return len(self._ids)

    def __iter__(self) -> Iterator[str]:
        with self._lock:
            snapshot = frozenset(self._ids)
        return iter(snapshot)

    def add(self, identifier: str) -> None:
        """Record an identifier."""
        with self._lock:
            self._ids.add(identifier)

    def add_if_absent(self, identifier: str) -> bool:
        """Record an identifier unless already present.

        Returns:
            True if the identifier was added, False if it was already known
        """
        with self._lock:
            if identifier in self._ids:
                return False
            self._ids.add(identifier)
            return True

    def snapshot(self) -> frozenset[str]:
        """Return an immutable copy of the current members."""
        with self._lock:
            return frozenset(self._ids)
