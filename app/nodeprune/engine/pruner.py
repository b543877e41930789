"""Dependency tree pruner.

Walks a directory tree depth-first in lexical order, classifies every
entry against a rule set, and hands prune decisions to the deletion
pipeline. A pruned directory is never descended into: its subtree is
pre-counted once and removed as a single work unit. The exception is a
pruned directory holding excluded paths: it stays, and its children are
pruned one by one unless excluded themselves.

Removed counts are taken when the prune decision is made, not when the
removal completes. On success the numbers are exact; on a failed run
files_removed may include entries whose removal failed.
"""

import dataclasses
import logging
import os
import stat
import time
from dataclasses import dataclass
from pathlib import Path

from nodeprune.engine.errors import ErrorSlot, PruneError, TraversalError
from nodeprune.engine.pipeline import DeletionPipeline, WorkUnit
from nodeprune.engine.stats import Stats, StatsAggregator
from nodeprune.rules import (
    Entry,
    RuleSet,
    Verdict,
    build_rule_set,
    classify,
    is_excluded,
    matches_any,
)

logger = logging.getLogger(__name__)

DEFAULT_DIRECTORY = "node_modules"


@dataclass(frozen=True, slots=True)
class PruneOptions:
    """Options for a single prune run.

    Attributes:
        directory: Root of the tree to prune.
        files: Replacement file table (None keeps the defaults).
        directories: Replacement directory table (None keeps the defaults).
        extensions: Replacement extension table (None keeps the defaults).
        include: Extra patterns that are always pruned.
        exclude: Globs that are never pruned.
        workers: Deletion pool size (None for one per CPU core).
        dry_run: Classify and count without removing anything.
        verbose: Verbose logging. Only consumed by the logging setup.
    """

    directory: str = DEFAULT_DIRECTORY
    files: tuple[str, ...] | None = None
    directories: tuple[str, ...] | None = None
    extensions: tuple[str, ...] | None = None
    include: tuple[str, ...] = ()
    exclude: tuple[str, ...] = ()
    workers: int | None = None
    dry_run: bool = False
    verbose: bool = False

    def rule_set(self) -> RuleSet:
        """Build the rule set described by these options."""
        return build_rule_set(
            files=self.files,
            directories=self.directories,
            extensions=self.extensions,
            include=self.include,
            exclude=self.exclude,
        )


@dataclass(frozen=True, slots=True)
class PruneResult:
    """Outcome of a prune run.

    Stats are always present, including after a failure, so callers can
    report how far the run got.

    Attributes:
        stats: Final counters.
        error: First fatal error, or None on success.
        duration: Wall-clock run time in seconds.
        dry_run: Whether removals were simulated.
    """

    stats: Stats
    error: PruneError | None = None
    duration: float = 0.0
    dry_run: bool = False

    @property
    def success(self) -> bool:
        """Check if the run completed without a fatal error."""
        return self.error is None


class Pruner:
    """Prunes unnecessary files from a dependency tree.

    Args:
        options: Run options. Defaults to PruneOptions().
        rules: Explicit rule set. Overrides the one built from options.
        log: Injected logger. Defaults to the module logger.
    """

    def __init__(
        self,
        options: PruneOptions | None = None,
        *,
        rules: RuleSet | None = None,
        log: logging.Logger | logging.LoggerAdapter | None = None,
    ) -> None:
        self._options = options or PruneOptions()
        self._rules = rules if rules is not None else self._options.rule_set()
        self._log = log or logger

    @property
    def options(self) -> PruneOptions:
        """Options this pruner was created with."""
        return self._options

    @property
    def rules(self) -> RuleSet:
        """Rule set entries are classified against."""
        return self._rules

    def prune(self) -> PruneResult:
        """Run the prune over the configured directory.

        Traversal and deletion failures do not raise: the first one is
        returned in PruneResult.error alongside the stats collected so far.

        Returns:
            PruneResult with final stats and the terminal error, if any.
        """
        start = time.monotonic()
        stats = StatsAggregator()
        errors = ErrorSlot(self._log)
        pipeline = DeletionPipeline(
            errors,
            self._options.workers,
            dry_run=self._options.dry_run,
            log=self._log,
        )

        self._log.debug(
            "Pruning %s with %d worker(s)%s",
            self._options.directory,
            pipeline.size,
            " (dry-run)" if self._options.dry_run else "",
        )

        with pipeline:
            self._walk(stats, errors, pipeline)
            pipeline.wait()

        return PruneResult(
            stats=stats.snapshot(),
            error=errors.error,
            duration=time.monotonic() - start,
            dry_run=self._options.dry_run,
        )

    def _walk(
        self,
        stats: StatsAggregator,
        errors: ErrorSlot,
        pipeline: DeletionPipeline,
    ) -> None:
        """Depth-first pre-order walk, stopping at the first fatal error."""
        root = self._options.directory
        try:
            # The flag marks entries below a pruned directory that holds excluded paths.
            stack = [(_root_entry(root), False)]
        except OSError as e:
            errors.offer(TraversalError.from_os_error("reading", root, e))
            return

        while stack:
            if errors.failed:
                self._log.debug("Aborting walk after fatal error")
                return

            entry, inherited = stack.pop()
            # The root directory is the subject of the run, not one of its entries.
            counted = not (entry.is_root and entry.is_dir)
            if counted:
                stats.add(files_total=1)

            verdict = classify(entry, self._rules)
            if inherited and not is_excluded(entry, self._rules):
                verdict = Verdict.PRUNE

            if verdict is Verdict.KEEP:
                self._log.debug("keep %s (size=%d, dir=%s)", entry.path, entry.size, entry.is_dir)
                if entry.is_dir and not self._descend(entry, stack, errors, inherit=False):
                    return
                continue

            if entry.is_dir:
                try:
                    scan = _subtree_stats(entry, self._rules)
                except OSError as e:
                    errors.offer(TraversalError.from_os_error("reading", entry.path, e))
                    return
                if scan is None:
                    self._log.info("keep %s (contains excluded paths)", entry.path)
                    if not self._descend(entry, stack, errors, inherit=True):
                        return
                    continue
                nodes, size = scan
                stats.add(
                    files_total=nodes,
                    files_removed=nodes + (1 if counted else 0),
                    bytes_removed=size,
                )
            else:
                stats.add(files_removed=1, bytes_removed=entry.size)

            self._log.info("prune %s (size=%d, dir=%s)", entry.path, entry.size, entry.is_dir)
            pipeline.submit(WorkUnit(path=entry.path, is_dir=entry.is_dir, size=entry.size))

    def _descend(
        self,
        entry: Entry,
        stack: list[tuple[Entry, bool]],
        errors: ErrorSlot,
        *,
        inherit: bool,
    ) -> bool:
        """Push a directory's children onto the walk stack.

        Returns:
            False if the directory could not be listed.
        """
        try:
            children = _list_children(entry)
        except OSError as e:
            errors.offer(TraversalError.from_os_error("reading", entry.path, e))
            return False
        stack.extend((child, inherit) for child in reversed(children))
        return True


def prune(
    directory: str | os.PathLike[str] | None = None,
    options: PruneOptions | None = None,
    *,
    log: logging.Logger | logging.LoggerAdapter | None = None,
) -> PruneResult:
    """Prune a dependency tree.

    Args:
        directory: Root directory. Overrides options.directory when given.
        options: Run options. Defaults to PruneOptions().
        log: Injected logger.

    Returns:
        PruneResult with final stats and the terminal error, if any.
    """
    options = options or PruneOptions()
    if directory is not None:
        options = dataclasses.replace(options, directory=os.fspath(directory))
    return Pruner(options, log=log).prune()


def _make_entry(path: str, relpath: str, name: str, st: os.stat_result) -> Entry:
    is_dir = stat.S_ISDIR(st.st_mode)
    return Entry(
        path=path,
        relpath=relpath,
        name=name,
        is_dir=is_dir,
        size=0 if is_dir else st.st_size,
    )


def _root_entry(root: str) -> Entry:
    """Build the entry for the walk root without following symlinks."""
    st = os.lstat(root)
    return _make_entry(root, ".", Path(os.path.abspath(root)).name, st)


def _list_children(parent: Entry) -> list[Entry]:
    """List a directory's entries in lexical order."""
    with os.scandir(parent.path) as it:
        dirents = sorted(it, key=lambda d: d.name)

    children: list[Entry] = []
    for dirent in dirents:
        relpath = dirent.name if parent.is_root else f"{parent.relpath}/{dirent.name}"
        st = dirent.stat(follow_symlinks=False)
        children.append(_make_entry(dirent.path, relpath, dirent.name, st))
    return children


def _subtree_stats(parent: Entry, rules: RuleSet) -> tuple[int, int] | None:
    """Count the descendants of a directory and sum their file sizes.

    Symlinks are counted but not followed. The scan stops at the first
    descendant matching an exclusion, since the directory can then no
    longer be removed as a whole.

    Returns:
        Tuple of (descendant node count, total bytes of non-directories),
        or None if a descendant is excluded.
    """
    nodes = 0
    size = 0
    stack = [(parent.path, "" if parent.is_root else f"{parent.relpath}/")]
    while stack:
        path, prefix = stack.pop()
        with os.scandir(path) as it:
            for dirent in it:
                relpath = prefix + dirent.name
                if matches_any(rules.exclusions, relpath, dirent.name):
                    return None
                nodes += 1
                st = dirent.stat(follow_symlinks=False)
                if stat.S_ISDIR(st.st_mode):
                    stack.append((dirent.path, f"{relpath}/"))
                else:
                    size += st.st_size
    return nodes, size
