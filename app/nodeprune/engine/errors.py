"""Prune errors and the first-error-wins slot.

Only the first fatal error of a run is kept. Later errors are logged
at debug level and dropped, so a large partial failure cannot pile up
an unbounded error list.
"""

from __future__ import annotations

import logging
import threading

logger = logging.getLogger(__name__)


class PruneError(Exception):
    """Base class for fatal errors of a prune run.

    Attributes:
        path: Filesystem path the error relates to, if any.
    """

    def __init__(self, message: str, path: str | None = None) -> None:
        super().__init__(message)
        self.path = path

    @classmethod
    def from_os_error(cls, action: str, path: str, exc: OSError) -> PruneError:
        """Wrap an OSError, chaining it as the cause.

        Args:
            action: What was being done, e.g. "removing directory".
            path: Path the operation was performed on.
            exc: Underlying error.

        Returns:
            Error instance with ``__cause__`` set to ``exc``.
        """
        reason = exc.strerror or str(exc)
        error = cls(f"{action} {path}: {reason}", path=path)
        error.__cause__ = exc
        return error


class TraversalError(PruneError):
    """A directory could not be listed or an entry could not be stat-ed."""


class DeletionError(PruneError):
    """A file or directory could not be removed."""


class ErrorSlot:
    """Set-once holder for a run's terminal error.

    The first call to :meth:`offer` wins; every later offer is discarded.
    Safe to use from any number of threads.
    """

    def __init__(self, log: logging.Logger | logging.LoggerAdapter | None = None) -> None:
        self._lock = threading.Lock()
        self._event = threading.Event()
        self._error: PruneError | None = None
        self._log = log or logger

    @property
    def error(self) -> PruneError | None:
        """The captured error, or None if the run has not failed."""
        with self._lock:
            return self._error

    @property
    def failed(self) -> bool:
        """Check if an error has been captured."""
        return self._event.is_set()

    def offer(self, error: PruneError) -> bool:
        """Record an error unless one is already captured.

        Args:
            error: Error to record.

        Returns:
            True if this error became the run's terminal error.
        """
        with self._lock:
            if self._error is not None:
                self._log.debug("Discarding subsequent error: %s", error)
                return False
            self._error = error
            self._event.set()
        return True

    def wait(self, timeout: float | None = None) -> bool:
        """Block until an error is captured or the timeout expires.

        Returns:
            True if an error has been captured.
        """
        return self._event.wait(timeout)
