"""Unit tests for logging setup."""

import io
import logging

from nodeprune.core.log import LOGGER_NAME, configure_logging
from rich.console import Console
from rich.logging import RichHandler


def _console() -> tuple[Console, io.StringIO]:
    buffer = io.StringIO()
    return Console(file=buffer, width=200, color_system=None), buffer


class TestConfigureLogging:
    """Tests for configure_logging function."""

    def test_default_level_is_warning(self) -> None:
        """Without verbose only warnings and errors are shown."""
        log = configure_logging()

        assert log.name == LOGGER_NAME
        assert log.level == logging.WARNING
        assert log.propagate is False

    def test_verbose_level_is_debug(self) -> None:
        """Verbose enables keep/prune decision logging."""
        log = configure_logging(verbose=True)
        assert log.level == logging.DEBUG

    def test_installs_rich_handler(self) -> None:
        """A single RichHandler is attached."""
        log = configure_logging()

        assert len(log.handlers) == 1
        assert isinstance(log.handlers[0], RichHandler)

    def test_repeated_calls_do_not_stack_handlers(self) -> None:
        """Reconfiguring replaces the previous handler."""
        configure_logging()
        log = configure_logging(verbose=True)

        assert len(log.handlers) == 1

    def test_child_loggers_render_to_console(self) -> None:
        """Engine module loggers write through the configured console."""
        console, buffer = _console()
        configure_logging(verbose=True, console=console)

        logging.getLogger("nodeprune.engine.pruner").info("prune %s", "foo/test")

        assert "prune foo/test" in buffer.getvalue()

    def test_debug_hidden_by_default(self) -> None:
        """Debug records are dropped without verbose."""
        console, buffer = _console()
        configure_logging(console=console)

        logging.getLogger("nodeprune.engine.pruner").debug("keep %s", "foo/index.js")

        assert buffer.getvalue() == ""
