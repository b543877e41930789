"""Run statistics.

Counters are shared between the traversal thread and anything else
that reports progress, so every update goes through a single lock.
"""

import threading
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Stats:
    """Immutable snapshot of a run's counters.

    Attributes:
        files_total: Every node below the root, files and directories.
        files_removed: Nodes removed, including every node of a pruned subtree.
        bytes_removed: Bytes of removed files (directories count as 0).
    """

    files_total: int = 0
    files_removed: int = 0
    bytes_removed: int = 0


class StatsAggregator:
    """Thread-safe, monotonically increasing run counters."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._files_total = 0
        self._files_removed = 0
        self._bytes_removed = 0

    def add(
        self,
        *,
        files_total: int = 0,
        files_removed: int = 0,
        bytes_removed: int = 0,
    ) -> None:
        """Increment counters atomically.

        Raises:
            ValueError: If any increment is negative.
        """
        if files_total < 0 or files_removed < 0 or bytes_removed < 0:
            msg = "Stats increments must be non-negative"
            raise ValueError(msg)

        with self._lock:
            self._files_total += files_total
            self._files_removed += files_removed
            self._bytes_removed += bytes_removed

    def snapshot(self) -> Stats:
        """Return a consistent copy of the current counters."""
        with self._lock:
            return Stats(
                files_total=self._files_total,
                files_removed=self._files_removed,
                bytes_removed=self._bytes_removed,
            )
