"""Keep/prune classification of filesystem entries.

Pure functions only: nothing here touches the filesystem, so the
classifier can be called from any thread.
"""

import fnmatch
from collections.abc import Iterable

from nodeprune.rules.models import Entry, RuleSet, Verdict

GLOB_CHARS = frozenset("*?[")


def is_glob(pattern: str) -> bool:
    """Check if a pattern contains glob metacharacters."""
    return any(ch in GLOB_CHARS for ch in pattern)


def matches_any(patterns: Iterable[str], *candidates: str) -> bool:
    """Check if any candidate string matches any glob pattern.

    Matching is case-sensitive on every platform.

    Args:
        patterns: Glob patterns to test.
        *candidates: Strings to test against each pattern.

    Returns:
        True on the first match, False otherwise.
    """
    for pattern in patterns:
        for candidate in candidates:
            if fnmatch.fnmatchcase(candidate, pattern):
                return True
    return False


def is_excluded(entry: Entry, rules: RuleSet) -> bool:
    """Check if an entry matches a never-prune exclusion."""
    return matches_any(rules.exclusions, entry.relpath, entry.name)


def classify(entry: Entry, rules: RuleSet) -> Verdict:
    """Decide whether an entry should be kept or pruned.

    Checks in order:
    1. Exclusion globs (always keep)
    2. Directories: base name, then directory globs
    3. Files: base name, relative path, extension, then file globs

    Args:
        entry: Entry to classify.
        rules: Rule set to consult.

    Returns:
        Verdict.PRUNE if any rule matches and no exclusion does.
    """
    if is_excluded(entry, rules):
        return Verdict.KEEP

    if entry.is_dir:
        if entry.name in rules.directories:
            return Verdict.PRUNE
        if matches_any(rules.directory_globs, entry.name, entry.relpath):
            return Verdict.PRUNE
        return Verdict.KEEP

    if entry.name in rules.files or entry.relpath in rules.files:
        return Verdict.PRUNE

    if entry.extension and entry.extension in rules.extensions:
        return Verdict.PRUNE

    if matches_any(rules.globs, entry.name, entry.relpath):
        return Verdict.PRUNE

    return Verdict.KEEP
