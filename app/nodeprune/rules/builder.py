"""Rule set construction from defaults and user configuration.

Inclusion patterns are folded into the rule set here, before any
classification happens, so they behave exactly like the defaults.

Inclusion pattern forms:
- ``name/`` or ``glob*/``: directory name or directory glob
- ``*.map``, ``dist/**/*.d.ts``: file glob
- ``.map``: bare dotted name, added as both a file name and an extension
- anything else: exact file name or relative path
"""

from collections.abc import Iterable

from nodeprune.rules.classifier import is_glob
from nodeprune.rules.defaults import DEFAULT_DIRECTORIES, DEFAULT_EXTENSIONS, DEFAULT_FILES
from nodeprune.rules.models import RuleSet


def _is_bare_extension(pattern: str) -> bool:
    return pattern.startswith(".") and pattern.count(".") == 1 and len(pattern) > 1


def build_rule_set(
    *,
    files: Iterable[str] | None = None,
    directories: Iterable[str] | None = None,
    extensions: Iterable[str] | None = None,
    include: Iterable[str] = (),
    exclude: Iterable[str] = (),
) -> RuleSet:
    """Build an immutable rule set.

    Args:
        files: Replacement file table. None keeps DEFAULT_FILES.
        directories: Replacement directory table. None keeps DEFAULT_DIRECTORIES.
        extensions: Replacement extension table. None keeps DEFAULT_EXTENSIONS.
        include: Extra patterns that are always pruned.
        exclude: Globs that are never pruned.

    Returns:
        RuleSet ready for classification.

    Raises:
        ValueError: If a pattern is empty or an extension lacks a leading dot.
    """
    file_set = set(DEFAULT_FILES if files is None else files)
    dir_set = set(DEFAULT_DIRECTORIES if directories is None else directories)
    ext_set = set(DEFAULT_EXTENSIONS if extensions is None else extensions)
    globs: set[str] = set()
    dir_globs: set[str] = set()

    for pattern in include:
        if not pattern or pattern == "/":
            msg = "Inclusion pattern cannot be empty"
            raise ValueError(msg)

        if pattern.endswith("/"):
            name = pattern.rstrip("/")
            (dir_globs if is_glob(name) else dir_set).add(name)
        elif is_glob(pattern):
            globs.add(pattern)
        elif _is_bare_extension(pattern):
            file_set.add(pattern)
            ext_set.add(pattern)
        else:
            file_set.add(pattern)

    exclusions = frozenset(exclude)
    if "" in exclusions:
        msg = "Exclusion pattern cannot be empty"
        raise ValueError(msg)

    return RuleSet(
        directories=frozenset(dir_set),
        files=frozenset(file_set),
        extensions=frozenset(ext_set),
        globs=frozenset(globs),
        directory_globs=frozenset(dir_globs),
        exclusions=exclusions,
    )
