"""Concurrent deletion pipeline.

A fixed pool of worker threads consumes deletion work units from a
bounded queue, so the directory walk keeps discovering entries while
slow removals of large subtrees run in the background. A full queue
blocks the submitter, which bounds memory on very large trees.
"""

import logging
import os
import queue
import shutil
import threading
from dataclasses import dataclass
from pathlib import Path

from nodeprune.engine.errors import DeletionError, ErrorSlot

logger = logging.getLogger(__name__)

# Queue slots per worker.
_QUEUE_DEPTH = 2

_STOP = object()


def default_workers() -> int:
    """Number of workers used when none is configured (one per core)."""
    return os.cpu_count() or 1


@dataclass(frozen=True, slots=True)
class WorkUnit:
    """A single deletion task.

    Attributes:
        path: Path to remove.
        is_dir: True to remove the whole subtree, False to unlink a single entry.
        size: Cached size in bytes, for logging.
    """

    path: str
    is_dir: bool
    size: int = 0


class DeletionPipeline:
    """Bounded worker pool that performs the actual removals.

    Each submitted unit is consumed by exactly one worker. Deletion
    failures are offered to the shared error slot and never kill a
    worker. Once the slot holds an error, queued units are discarded
    instead of executed.

    Usage:
        >>> with DeletionPipeline(errors, workers=4) as pipeline:
        ...     pipeline.submit(WorkUnit("node_modules/foo/test", is_dir=True))
        ...     pipeline.wait()
    """

    def __init__(
        self,
        errors: ErrorSlot,
        workers: int | None = None,
        *,
        dry_run: bool = False,
        log: logging.Logger | logging.LoggerAdapter | None = None,
    ) -> None:
        """Initialize the pipeline without starting any threads.

        Args:
            errors: Shared first-error-wins slot of the run.
            workers: Pool size. Defaults to the number of CPU cores.
            dry_run: If True, workers log removals without performing them.
            log: Logger to report through. Defaults to the module logger.

        Raises:
            ValueError: If workers is less than 1.
        """
        size = default_workers() if workers is None else workers
        if size < 1:
            msg = f"Worker count must be at least 1, got {size}"
            raise ValueError(msg)

        self._errors = errors
        self._size = size
        self._dry_run = dry_run
        self._log = log or logger
        self._queue: queue.Queue[WorkUnit | object] = queue.Queue(maxsize=size * _QUEUE_DEPTH)
        self._threads: list[threading.Thread] = []
        self._pending = 0
        self._idle = threading.Condition()
        self._closed = False

    @property
    def size(self) -> int:
        """Number of worker threads."""
        return self._size

    @property
    def dry_run(self) -> bool:
        """Check if the pipeline is in dry-run mode."""
        return self._dry_run

    def __enter__(self) -> "DeletionPipeline":
        self.start()
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def start(self) -> None:
        """Spawn the worker threads.

        Raises:
            RuntimeError: If the pipeline was already started.
        """
        if self._threads or self._closed:
            msg = "Deletion pipeline already started"
            raise RuntimeError(msg)

        for index in range(self._size):
            thread = threading.Thread(
                target=self._work,
                name=f"nodeprune-worker-{index}",
                daemon=True,
            )
            thread.start()
            self._threads.append(thread)

    def submit(self, unit: WorkUnit) -> None:
        """Queue a unit for deletion, blocking while the queue is full.

        Raises:
            RuntimeError: If the pipeline is not running.
        """
        if not self._threads or self._closed:
            msg = "Deletion pipeline is not running"
            raise RuntimeError(msg)

        with self._idle:
            self._pending += 1
        self._queue.put(unit)

    def wait(self) -> None:
        """Block until every submitted unit is processed or the run has failed."""
        with self._idle:
            self._idle.wait_for(lambda: self._pending == 0 or self._errors.failed)

    def close(self) -> None:
        """Stop and join the workers.

        After a failure, queued units are dropped first, so joining only
        waits for removals already in progress.
        """
        if self._closed:
            return
        self._closed = True

        if self._errors.failed:
            self._drain()

        for _ in self._threads:
            self._queue.put(_STOP)
        for thread in self._threads:
            thread.join()

    def _drain(self) -> None:
        """Drop every queued unit without executing it."""
        while True:
            try:
                item = self._queue.get_nowait()
            except queue.Empty:
                return
            if item is not _STOP:
                self._finish()

    def _work(self) -> None:
        """Worker loop: consume units until told to stop."""
        while True:
            item = self._queue.get()
            if not isinstance(item, WorkUnit):
                return
            try:
                if self._errors.failed:
                    self._log.debug("Skipping %s after earlier failure", item.path)
                else:
                    self._execute(item)
            finally:
                self._finish()

    def _execute(self, unit: WorkUnit) -> None:
        """Remove a single unit, reporting failures to the error slot."""
        kind = "directory" if unit.is_dir else "file"

        if self._dry_run:
            self._log.debug("Dry-run: would remove %s %s", kind, unit.path)
            return

        try:
            if unit.is_dir:
                shutil.rmtree(unit.path)
            else:
                Path(unit.path).unlink()
        except OSError as e:
            error = DeletionError.from_os_error(f"removing {kind}", unit.path, e)
            if self._errors.offer(error):
                self._log.error("Failed removing %s %s: %s", kind, unit.path, e)
            return

        self._log.debug("Removed %s %s (%d bytes)", kind, unit.path, unit.size)

    def _finish(self) -> None:
        with self._idle:
            self._pending -= 1
            self._idle.notify_all()
