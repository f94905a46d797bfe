"""Output colors for rmprogress.

The bundled ``data/theme.toml`` supplies every color; a ``[colors]`` table in
the user's ``theme.toml`` may override any subset of them.
"""

import logging
import re
import tomllib
from functools import cache
from importlib import resources
from pathlib import Path

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator
from rich.theme import Theme

from rmprogress.core.paths import get_user_theme_path

logger = logging.getLogger(__name__)

_HEX_COLOR = re.compile(r"#(?:[0-9a-fA-F]{3}){1,2}")

# Styles rendered bold; every other color is used as-is
BOLD_STYLES = frozenset({"error", "pid", "progress"})


class ThemeColors(BaseModel):
    """Hex colors for each markup style the CLI prints with."""

    model_config = ConfigDict(extra="forbid")

    text: str = "#ffffff"
    muted: str = "#b2bec3"
    success: str = "#03b971"
    warning: str = "#f5b332"
    error: str = "#f53263"
    info: str = "#0ec1c8"
    pid: str = "#69B9A1"
    progress: str = "#c1ff62"

    @field_validator("*", mode="before")
    @classmethod
    def check_hex(cls, value: object) -> str:
        if not isinstance(value, str) or not _HEX_COLOR.fullmatch(value.strip()):
            raise ValueError(f"expected a #RGB or #RRGGBB color, got {value!r}")
        return value.strip()

    def to_rich(self) -> Theme:
        """Build the rich theme, one style per color."""
        return Theme(
            {
                name: f"bold {color}" if name in BOLD_STYLES else color
                for name, color in self.model_dump().items()
            }
        )


def read_colors(text: str, source: str) -> dict[str, str]:
    """Extract the ``[colors]`` table from theme TOML text.

    Unparsable text or a ``colors`` key that is not a table yields no colors.
    """
    try:
        colors = tomllib.loads(text).get("colors", {})
    except tomllib.TOMLDecodeError as e:
        logger.warning("Ignoring unparsable theme %s: %s", source, e)
        return {}
    if not isinstance(colors, dict):
        logger.warning("Ignoring theme %s: 'colors' is not a table", source)
        return {}
    return {name: value for name, value in colors.items() if isinstance(value, str)}


def load_theme(user_path: Path | None = None) -> ThemeColors:
    """Merge the user's colors over the bundled ones.

    Falls back to the built-in defaults when the merged colors are invalid.
    """
    bundled = resources.files("rmprogress.data").joinpath("theme.toml")
    colors = read_colors(bundled.read_text(encoding="utf-8"), "bundled theme")

    user_path = user_path or get_user_theme_path()
    try:
        user_text = user_path.read_text(encoding="utf-8")
    except FileNotFoundError:
        user_text = None
    except OSError as e:
        logger.warning("Cannot read theme %s: %s", user_path, e)
        user_text = None
    if user_text is not None:
        logger.debug("Applying theme overrides from %s", user_path)
        colors |= read_colors(user_text, str(user_path))

    try:
        return ThemeColors.model_validate(colors)
    except ValidationError as e:
        logger.warning("Invalid theme colors, using defaults: %s", e)
        return ThemeColors()


@cache
def get_theme() -> Theme:
    """Rich theme shared by the CLI consoles, loaded once per process."""
    return load_theme().to_rich()
