"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

import logging
from collections.abc import Callable, Iterator
from pathlib import Path

import pytest

TreeLayout = dict[str, str | None]


def _build_tree(root: Path, layout: TreeLayout) -> Path:
    """Create files and directories under root.

    Keys are POSIX paths relative to root. A None value creates a
    directory; a string value creates a file with that content.
    """
    root.mkdir(parents=True, exist_ok=True)
    for relpath, content in layout.items():
        target = root / relpath
        if content is None:
            target.mkdir(parents=True, exist_ok=True)
        else:
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(content)
    return root


@pytest.fixture
def count_nodes() -> Callable[[Path], int]:
    """Return a function counting every node below a root (root excluded)."""

    def _count(root: Path) -> int:
        return sum(1 for _ in root.rglob("*"))

    return _count


@pytest.fixture
def make_tree(tmp_path: Path) -> Callable[..., Path]:
    """Factory fixture that builds a directory tree under tmp_path."""

    def _make(layout: TreeLayout, name: str = "node_modules") -> Path:
        return _build_tree(tmp_path / name, layout)

    return _make


@pytest.fixture
def node_modules_layout() -> TreeLayout:
    """A small but representative node_modules tree."""
    return {
        "foo/index.js": "module.exports = 1;\n",
        "foo/package.json": '{"name": "foo"}\n',
        "foo/README.md": "# foo\n",
        "foo/README": "plain readme\n",
        "foo/LICENSE": "MIT\n",
        "foo/test/x.js": "test();\n",
        "foo/test/fixtures/data.json": "{}\n",
        "foo/lib/util.js": "exports.util = 1;\n",
        "foo/lib/util.ts": "export const util = 1;\n",
        "bar/index.js": "module.exports = 2;\n",
        "bar/docs/guide.html": "<p>guide</p>\n",
        "bar/.github/workflows/ci.yml": "on: push\n",
        "bar/Makefile": "all:\n",
        "bar/empty": None,
    }


@pytest.fixture
def sample_tree(make_tree: Callable[..., Path], node_modules_layout: TreeLayout) -> Path:
    """Build the representative node_modules tree."""
    return make_tree(node_modules_layout)


@pytest.fixture
def xdg_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point XDG_CONFIG_HOME at an empty temporary directory."""
    config_home = tmp_path / "xdg-config"
    config_home.mkdir()
    monkeypatch.setenv("XDG_CONFIG_HOME", str(config_home))
    return config_home


@pytest.fixture(autouse=True)
def reset_package_logger() -> Iterator[None]:
    """Restore the nodeprune logger after tests that configure it."""
    log = logging.getLogger("nodeprune")
    handlers = list(log.handlers)
    level = log.level
    propagate = log.propagate
    yield
    log.handlers[:] = handlers
    log.setLevel(level)
    log.propagate = propagate
