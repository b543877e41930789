"""Process-wide logging setup for the CLI.

The engine only ever logs through the logger it is handed; this module
is where the CLI decides what that logger prints and where.
"""

import logging

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME = "nodeprune"


def configure_logging(verbose: bool = False, console: Console | None = None) -> logging.Logger:
    """Configure the package logger with a Rich handler.

    Safe to call more than once: previously installed handlers are
    replaced rather than stacked.

    Args:
        verbose: Log keep/prune decisions (DEBUG) instead of warnings only.
        console: Console to render log records to. Defaults to stderr.

    Returns:
        The configured ``nodeprune`` logger.
    """
    log = logging.getLogger(LOGGER_NAME)
    for handler in list(log.handlers):
        log.removeHandler(handler)

    handler = RichHandler(
        console=console,
        show_time=False,
        show_path=False,
        markup=False,
        rich_tracebacks=verbose,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))

    log.addHandler(handler)
    log.setLevel(logging.DEBUG if verbose else logging.WARNING)
    log.propagate = False
    return log
