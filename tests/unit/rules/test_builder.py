"""Unit tests for rule set construction."""

import pytest
from nodeprune.rules import (
    DEFAULT_DIRECTORIES,
    DEFAULT_EXTENSIONS,
    DEFAULT_FILES,
    Entry,
    RuleSet,
    build_rule_set,
)


class TestBuildRuleSet:
    """Tests for build_rule_set."""

    def test_defaults(self) -> None:
        """Without arguments the built-in tables are used."""
        rules = build_rule_set()

        assert rules.files == frozenset(DEFAULT_FILES)
        assert rules.directories == frozenset(DEFAULT_DIRECTORIES)
        assert rules.extensions == frozenset(DEFAULT_EXTENSIONS)
        assert rules.globs == frozenset()
        assert rules.exclusions == frozenset()

    def test_replacement_tables(self) -> None:
        """Explicit tables replace the defaults."""
        rules = build_rule_set(files=["a"], directories=["b"], extensions=[".c"])

        assert rules.files == {"a"}
        assert rules.directories == {"b"}
        assert rules.extensions == {".c"}

    def test_empty_table_disables_rule(self) -> None:
        """An empty table prunes nothing of that kind."""
        rules = build_rule_set(extensions=[])
        assert rules.extensions == frozenset()

    def test_include_directory(self) -> None:
        """A trailing slash adds a directory name."""
        rules = build_rule_set(include=["fixtures/"])
        assert "fixtures" in rules.directories
        assert "fixtures/" not in rules.files

    def test_include_directory_glob(self) -> None:
        """A trailing slash on a glob adds a directory glob."""
        rules = build_rule_set(include=["bench*/"])
        assert rules.directory_globs == {"bench*"}

    def test_include_file_glob(self) -> None:
        """Glob patterns are kept as inclusion globs."""
        rules = build_rule_set(include=["*.map"])
        assert rules.globs == {"*.map"}
        assert "*.map" not in rules.files

    def test_include_bare_extension(self) -> None:
        """A bare dotted name is added as extension and file name."""
        rules = build_rule_set(include=[".flow"])
        assert ".flow" in rules.extensions
        assert ".flow" in rules.files

    def test_include_dotted_file_name(self) -> None:
        """A dotfile with a suffix is a file name, not an extension."""
        rules = build_rule_set(include=[".prettierrc.json"])
        assert ".prettierrc.json" in rules.files
        assert ".prettierrc.json" not in rules.extensions

    def test_include_plain_name(self) -> None:
        """A plain name is added to the file table on top of the defaults."""
        rules = build_rule_set(include=["CHANGELOG"])
        assert "CHANGELOG" in rules.files
        assert rules.files >= frozenset(DEFAULT_FILES)

    def test_include_unions_with_replacement(self) -> None:
        """Inclusions are added to replacement tables too."""
        rules = build_rule_set(files=["a"], include=["b"])
        assert rules.files == {"a", "b"}

    def test_exclusions(self) -> None:
        """Exclusions are stored verbatim."""
        rules = build_rule_set(exclude=["foo/*", "LICENSE"])
        assert rules.exclusions == {"foo/*", "LICENSE"}

    def test_empty_include_rejected(self) -> None:
        """Empty inclusion patterns are rejected."""
        with pytest.raises(ValueError, match="cannot be empty"):
            build_rule_set(include=[""])

    def test_empty_exclude_rejected(self) -> None:
        """Empty exclusion patterns are rejected."""
        with pytest.raises(ValueError, match="cannot be empty"):
            build_rule_set(exclude=[""])

    def test_invalid_extension_rejected(self) -> None:
        """Extensions without a leading dot are rejected."""
        with pytest.raises(ValueError, match="must start with '.'"):
            build_rule_set(extensions=["md"])


class TestModels:
    """Tests for RuleSet and Entry models."""

    def test_rule_set_is_frozen(self) -> None:
        """RuleSet cannot be mutated."""
        rules = RuleSet()
        with pytest.raises(AttributeError):
            rules.files = frozenset({"x"})  # type: ignore[misc]

    def test_entry_extension(self) -> None:
        """Entry.extension is the last suffix including the dot."""
        entry = Entry(
            path="nm/a/b.tar.tgz", relpath="a/b.tar.tgz", name="b.tar.tgz", is_dir=False
        )
        assert entry.extension == ".tgz"

    def test_entry_without_extension(self) -> None:
        """Names without a suffix have an empty extension."""
        entry = Entry(path="nm/Makefile", relpath="Makefile", name="Makefile", is_dir=False)
        assert entry.extension == ""

    def test_entry_dotfile_extension(self) -> None:
        """A leading dot starts the extension when it is the only dot."""
        entry = Entry(path="nm/.md", relpath=".md", name=".md", is_dir=False)
        assert entry.extension == ".md"
        rc = Entry(path="nm/.babelrc.js", relpath=".babelrc.js", name=".babelrc.js", is_dir=False)
        assert rc.extension == ".js"

    def test_entry_is_root(self) -> None:
        """The walk root has relative path '.'."""
        root = Entry(path="node_modules", relpath=".", name="node_modules", is_dir=True)
        assert root.is_root
        child = Entry(path="node_modules/a", relpath="a", name="a", is_dir=True)
        assert not child.is_root

    def test_entry_empty_path_rejected(self) -> None:
        """Entry requires a path."""
        with pytest.raises(ValueError, match="cannot be empty"):
            Entry(path="", relpath=".", name="", is_dir=True)

    def test_entry_negative_size_rejected(self) -> None:
        """Entry sizes cannot be negative."""
        with pytest.raises(ValueError, match="negative"):
            Entry(path="x", relpath="x", name="x", is_dir=False, size=-1)
