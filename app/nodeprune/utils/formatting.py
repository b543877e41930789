"""Rich console formatting utilities.

Provides consistent formatting for CLI output using Rich.
"""

import sys

from rich.console import Console
from rich.theme import Theme

from nodeprune.core.theme import get_theme


def _detect_color_system() -> str | None:
    """Detect the best color system for the current terminal.

    Returns "truecolor" for interactive terminals to enable full hex color support,
    None otherwise to let Rich auto-detect.
    """
    if sys.stdout.isatty():
        return "truecolor"
    return None


# Shared console instances (theme loaded once at import)
console = Console(theme=get_theme(), color_system=_detect_color_system())
err_console = Console(theme=get_theme(), stderr=True, color_system=_detect_color_system())


def apply_theme(theme: Theme) -> None:
    """Apply a theme on top of the current one for both consoles."""
    console.push_theme(theme)
    err_console.push_theme(theme)


def format_size(size_bytes: int | None) -> str:
    """Format byte count as human-readable string (1000-based units)."""
    if not size_bytes:
        return "0 B"
    size = float(size_bytes)
    for unit in ("B", "kB", "MB", "GB", "TB"):
        if abs(size) < 1000:
            return f"{int(size)} B" if unit == "B" else f"{size:.1f} {unit}"
        size /= 1000
    return f"{size:.1f} PB"


def format_count(count: int) -> str:
    """Format an integer with thousands separators (e.g. 12,345)."""
    return f"{count:,}"


def format_duration(seconds: float) -> str:
    """Format a duration rounded to milliseconds (e.g. 1.234s, 56ms)."""
    millis = round(seconds * 1000)
    if millis < 1000:
        return f"{millis}ms"
    return f"{millis / 1000:.3f}s"


def print_error(message: str) -> None:
    """Print an error message."""
    err_console.print(f"[error]Error:[/] {message}")