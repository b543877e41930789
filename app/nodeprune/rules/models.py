"""Rule set and entry models for prune classification.

This module defines the immutable data structures consulted by the
classifier: the entry being classified, the verdict, and the rule set
it is classified against.
"""

from dataclasses import dataclass
from enum import Enum


class Verdict(str, Enum):
    """Classification outcome for a single entry.

    Attributes:
        KEEP: Leave the entry on disk (and descend into it if a directory).
        PRUNE: Remove the entry (and its whole subtree if a directory).
    """

    KEEP = "keep"
    PRUNE = "prune"


@dataclass(frozen=True, slots=True)
class Entry:
    """A single filesystem node visited during traversal.

    Attributes:
        path: Path as walked (root-prefixed).
        relpath: POSIX path relative to the walk root ("." for the root).
        name: Base name of the entry.
        is_dir: True for real directories. Symlinks are never directories.
        size: Size in bytes from lstat (0 for directories).
    """

    path: str
    relpath: str
    name: str
    is_dir: bool
    size: int = 0

    def __post_init__(self) -> None:
        """Validate entry data after initialization."""
        if not self.path:
            msg = "Entry path cannot be empty"
            raise ValueError(msg)
        if self.size < 0:
            msg = f"Entry size cannot be negative, got {self.size}"
            raise ValueError(msg)

    @property
    def extension(self) -> str:
        """Suffix from the last dot of the name, or an empty string.

        A leading dot counts, so a file named ".md" has extension ".md".
        """
        dot = self.name.rfind(".")
        return self.name[dot:] if dot >= 0 else ""

    @property
    def is_root(self) -> bool:
        """Check if this entry is the walk root."""
        return self.relpath == "."


@dataclass(frozen=True, slots=True)
class RuleSet:
    """Immutable collection of prune rules.

    Exact-match sets are compared case-sensitively. Glob sets are
    matched with fnmatch against both the base name and the relative
    path of an entry.

    Attributes:
        directories: Directory base names to prune.
        files: File base names, or relative paths, to prune.
        extensions: File extensions to prune (e.g. ".md").
        globs: Glob patterns for files that are always pruned.
        directory_globs: Glob patterns for directories that are always pruned.
        exclusions: Glob patterns that are never pruned. Wins over everything.
    """

    directories: frozenset[str] = frozenset()
    files: frozenset[str] = frozenset()
    extensions: frozenset[str] = frozenset()
    globs: frozenset[str] = frozenset()
    directory_globs: frozenset[str] = frozenset()
    exclusions: frozenset[str] = frozenset()

    def __post_init__(self) -> None:
        """Validate rule data after initialization."""
        for ext in self.extensions:
            if not ext.startswith("."):
                msg = f"Extension must start with '.', got {ext!r}"
                raise ValueError(msg)
