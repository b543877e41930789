"""Console colors for the prune report and log output.

The palette ships in data/theme.toml. The [colors] table of the user
configuration overrides individual roles.
"""

import logging
import string
import tomllib
from collections.abc import Mapping
from importlib import resources
from typing import Annotated

from pydantic import BaseModel, BeforeValidator, ConfigDict, ValidationError
from rich.theme import Theme

logger = logging.getLogger(__name__)


def _hex_color(value: object) -> str:
    """Accept a #RGB or #RRGGBB color string."""
    if not isinstance(value, str):
        msg = "color must be a string"
        raise ValueError(msg)
    color = value.strip()
    digits = color.removeprefix("#")
    if digits == color:
        msg = f"color must start with '#', got {color!r}"
        raise ValueError(msg)
    if len(digits) not in (3, 6):
        msg = f"color must be #RGB or #RRGGBB, got {color!r}"
        raise ValueError(msg)
    if not all(ch in string.hexdigits for ch in digits):
        msg = f"invalid hex color {color!r}"
        raise ValueError(msg)
    return color


HexColor = Annotated[str, BeforeValidator(_hex_color)]


class Palette(BaseModel):
    """Colors used by the CLI, keyed by role.

    Attributes:
        label: Metric names in the report.
        value: Metric values in the report.
        border: Table borders.
        muted: Zero counts and debug log records.
        removed: Removed-file counts.
        info: Info log records.
        warning: Warnings.
        error: Errors (rendered bold).
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    label: HexColor = "#69B9A1"
    value: HexColor = "#ffffff"
    border: HexColor = "#29526d"
    muted: HexColor = "#b2bec3"
    removed: HexColor = "#f53263"
    info: HexColor = "#0ec1c8"
    warning: HexColor = "#f5b332"
    error: HexColor = "#f53263"


def _read_bundled_colors() -> dict[str, str]:
    """Read the [colors] table of the bundled data/theme.toml."""
    source = resources.files("nodeprune.data").joinpath("theme.toml")
    try:
        data = tomllib.loads(source.read_text(encoding="utf-8"))
    except (OSError, tomllib.TOMLDecodeError) as e:
        logger.error("Bundled theme unreadable, using built-in colors: %s", e)
        return {}

    colors = data.get("colors")
    if not isinstance(colors, dict):
        logger.error("Bundled theme has no [colors] table")
        return {}
    return {role: color for role, color in colors.items() if isinstance(color, str)}


def load_palette(overrides: Mapping[str, str] | None = None) -> Palette:
    """Merge user overrides over the bundled palette.

    Overrides that fail validation are ignored as a whole and reported
    as a warning.

    Args:
        overrides: Role to hex color mapping, usually the config [colors] table.

    Returns:
        Validated Palette.
    """
    bundled = _read_bundled_colors()

    if overrides:
        try:
            return Palette.model_validate({**bundled, **overrides})
        except ValidationError as e:
            logger.warning("Ignoring invalid [colors] overrides: %s", e)

    try:
        return Palette.model_validate(bundled)
    except ValidationError as e:
        logger.error("Bundled theme invalid, using built-in colors: %s", e)
        return Palette()


def build_theme(palette: Palette) -> Theme:
    """Map palette roles onto the Rich style names used by the CLI."""
    return Theme(
        {
            "label": f"bold {palette.label}",
            "value": palette.value,
            "border": palette.border,
            "muted": palette.muted,
            "removed": palette.removed,
            "info": palette.info,
            "warning": palette.warning,
            "error": f"bold {palette.error}",
            "logging.level.debug": palette.muted,
            "logging.level.info": palette.info,
            "logging.level.warning": palette.warning,
            "logging.level.error": f"bold {palette.error}",
        }
    )


_active: Theme | None = None


def get_theme() -> Theme:
    """Return the active theme, building it from the bundled palette on first use."""
    global _active
    if _active is None:
        _active = build_theme(load_palette())
    return _active


def use_colors(overrides: Mapping[str, str]) -> Theme:
    """Rebuild the active theme with user overrides.

    Returns:
        The new active theme.
    """
    global _active
    _active = build_theme(load_palette(overrides))
    return _active
