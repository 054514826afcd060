"""Console colors for the assettree CLI.

The bundled ``data/theme.toml`` defines every color. A user file at
``~/.config/assettree/theme.toml`` may override any subset of them:

    [colors]
    directory = "#3b82f6"
    asset_name = "#f59e0b"

Overrides are validated one key at a time, so a single bad value only
costs that one color.
"""

import logging
import tomllib
from importlib import resources
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator
from rich.theme import Theme

from assettree.core.paths import get_config_dir

logger = logging.getLogger(__name__)

THEME_FILENAME = "theme.toml"

# Rich style template per color; colors not listed are used as-is
_STYLE_TEMPLATES: dict[str, str] = {
    "error": "bold {}",
    "directory": "bold {}",
    "asset_name": "bold {}",
}


def _parse_hex(value: object) -> str:
    """Normalize a #RGB or #RRGGBB color.

    Raises:
        ValueError: If the value is not a hex color string.
    """
    if not isinstance(value, str):
        raise ValueError("color must be a string")
    color = value.strip()
    if not color.startswith("#"):
        raise ValueError("color must start with '#'")
    digits = color[1:]
    if len(digits) not in (3, 6):
        raise ValueError("color must be #RGB or #RRGGBB format")
    try:
        int(digits, 16)
    except ValueError:
        raise ValueError(f"invalid hex color '{color}'") from None
    return color


class ThemeColors(BaseModel):
    """Named colors used by the CLI, as hex codes."""

    model_config = ConfigDict(extra="forbid")

    text: str = "#ffffff"
    muted: str = "#b2bec3"
    header: str = "#69B9A1"
    border: str = "#29526d"

    success: str = "#03b971"
    warning: str = "#f5b332"
    error: str = "#f53263"
    info: str = "#0ec1c8"

    directory: str = "#0e8ac8"
    file: str = "#c1ff62"
    asset_name: str = "#69B9A1"

    @field_validator("*", mode="before")
    @classmethod
    def validate_hex_color(cls, v: object, info: Any) -> str:
        try:
            return _parse_hex(v)
        except ValueError as e:
            raise ValueError(f"{info.field_name}: {e}") from None


def get_user_theme_path() -> Path:
    """Path of the optional user theme file."""
    return get_config_dir() / THEME_FILENAME


def get_bundled_theme_path() -> Path:
    """Path of the theme file shipped inside the package."""
    return Path(str(resources.files("assettree.data").joinpath(THEME_FILENAME)))


def read_theme_file(path: Path) -> dict[str, str] | None:
    """Read the ``[colors]`` table of a theme file.

    Non-string values are ignored.

    Returns:
        Color names mapped to values, or None if the file is missing or unusable.
    """
    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
    except FileNotFoundError:
        return None
    except tomllib.TOMLDecodeError as e:
        logger.warning("Failed to parse theme file %s: %s", path, e)
        return None
    except OSError as e:
        logger.warning("Failed to read theme file %s: %s", path, e)
        return None

    table = data.get("colors", {})
    if not isinstance(table, dict):
        logger.warning("Invalid 'colors' section in %s", path)
        return None
    return {key: value for key, value in table.items() if isinstance(value, str)}


def _apply_overrides(colors: ThemeColors, overrides: dict[str, str], source: Path) -> ThemeColors:
    """Return a copy of colors with every valid override applied."""
    accepted: dict[str, str] = {}
    for key, value in overrides.items():
        if key not in ThemeColors.model_fields:
            logger.warning("Unknown theme color %r in %s", key, source)
            continue
        try:
            accepted[key] = _parse_hex(value)
        except ValueError as e:
            logger.warning("Ignoring theme color %r in %s: %s", key, source, e)
    return colors.model_copy(update=accepted)


def load_theme(user_path: Path | None = None) -> ThemeColors:
    """Load the bundled theme and apply user overrides.

    Args:
        user_path: Override file to apply. Defaults to get_user_theme_path().

    Returns:
        The effective colors.
    """
    bundled_path = get_bundled_theme_path()
    try:
        colors = ThemeColors(**(read_theme_file(bundled_path) or {}))
    except ValidationError as e:
        logger.error("Bundled theme %s is invalid, using built-in colors: %s", bundled_path, e)
        colors = ThemeColors()

    source = user_path or get_user_theme_path()
    overrides = read_theme_file(source)
    if overrides:
        logger.debug("Applying theme overrides from %s", source)
        colors = _apply_overrides(colors, overrides, source)
    return colors


def get_rich_theme(colors: ThemeColors | None = None) -> Theme:
    """Build the Rich theme for the CLI consoles.

    Every color becomes a style of the same name. Table headers use
    ``bold_header`` and secondary text uses ``dim``.
    """
    if colors is None:
        colors = load_theme()

    styles = {
        name: _STYLE_TEMPLATES.get(name, "{}").format(value)
        for name, value in colors.model_dump().items()
    }
    styles["bold_header"] = f"bold {colors.header}"
    styles["dim"] = colors.muted
    return Theme(styles)
