"""assettree configuration and settings.

This module provides the configuration model and I/O functions for
assettree. Configuration is stored in ~/.config/assettree/config.toml
and every key is optional:

    resource_dir = "/opt/game/assets"
    documents_dir = "/home/user/.local/share/mygame"
    ignored_filenames = [".DS_Store", "Thumbs.db"]
    on_error = "skip"
"""

import logging
import os
import tomllib
from enum import Enum
from pathlib import Path
from tempfile import NamedTemporaryFile
from typing import Annotated

import tomli_w
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from assettree.core.paths import get_config_path

logger = logging.getLogger(__name__)

# OS metadata files that never become asset records
DEFAULT_IGNORED_FILENAMES: tuple[str, ...] = (".DS_Store", "Thumbs.db", "desktop.ini")


class ErrorPolicy(str, Enum):
    """What the tree walker does when an entry's metadata cannot be read.

    Attributes:
        RAISE: Abort the traversal with MetadataUnavailableError.
        SKIP: Log a warning and continue with the next entry.
    """

    RAISE = "raise"
    SKIP = "skip"


class AssetTreeConfig(BaseModel):
    """Configuration for assettree.

    Attributes:
        resource_dir: Root of the read-only resource base (None = working directory).
        documents_dir: Root of the writable documents base (None = XDG data dir).
        ignored_filenames: Filenames that are never turned into FileRecords.
        on_error: Policy for entries whose metadata cannot be read.
    """

    model_config = ConfigDict(extra="forbid")

    resource_dir: Annotated[
        str | None,
        Field(description="Resource base directory (None = working directory)"),
    ] = None
    documents_dir: Annotated[
        str | None,
        Field(description="Documents base directory (None = XDG data directory)"),
    ] = None
    ignored_filenames: Annotated[
        list[str],
        Field(description="Filenames dropped when building name tables"),
    ] = Field(default_factory=lambda: list(DEFAULT_IGNORED_FILENAMES))
    on_error: Annotated[
        ErrorPolicy,
        Field(description="Metadata failure policy (raise or skip)"),
    ] = ErrorPolicy.RAISE

    @field_validator("ignored_filenames")
    @classmethod
    def validate_ignored_filenames(cls, v: list[str]) -> list[str]:
        """Reject entries that contain a directory separator."""
        for name in v:
            if not name or "/" in name or "\\" in name:
                msg = f"ignored_filenames entries must be bare filenames, got {name!r}"
                raise ValueError(msg)
        return v


class ConfigError(Exception):
    """Base exception for configuration errors."""


class ConfigNotFoundError(ConfigError):
    """Raised when the config file is not found."""


class ConfigParseError(ConfigError):
    """Raised when the config file cannot be parsed."""


def load_config(path: Path | None = None) -> AssetTreeConfig:
    """Load configuration from a TOML file.

    Args:
        path: Path to the config file. If None, uses the default config path.

    Returns:
        Validated AssetTreeConfig object.

    Raises:
        ConfigNotFoundError: If the config file doesn't exist.
        ConfigParseError: If the TOML syntax is invalid.
        ConfigError: If the content doesn't match the schema.
    """
    config_path = path or get_config_path()

    if not config_path.exists():
        raise ConfigNotFoundError(f"Config not found: {config_path}")

    try:
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigParseError(f"Invalid TOML syntax: {e}") from e
    except OSError as e:
        raise ConfigError(f"Failed to read config: {e}") from e

    try:
        return AssetTreeConfig.model_validate(data)
    except (ValueError, ValidationError) as e:
        raise ConfigError(f"Invalid config content: {e}") from e


def save_config(config: AssetTreeConfig, path: Path | None = None) -> Path:
    """Save configuration to a TOML file.

    The file is written atomically by first writing to a temporary file
    and then using os.replace() for atomic rename.

    Args:
        config: The AssetTreeConfig object to save.
        path: Path to save the config. If None, uses the default config path.

    Returns:
        Path where the config was saved.

    Raises:
        ConfigError: If the file cannot be written.
    """
    config_path = path or get_config_path()

    config_path.parent.mkdir(parents=True, exist_ok=True)

    data = _config_to_dict(config)

    tmp_path: Path | None = None
    try:
        with NamedTemporaryFile(
            mode="wb",
            dir=config_path.parent,
            delete=False,
            suffix=".tmp",
        ) as f:
            tmp_path = Path(f.name)
            tomli_w.dump(data, f)
        os.replace(str(tmp_path), str(config_path))
    except OSError as e:
        if tmp_path is not None and tmp_path.exists():
            tmp_path.unlink()
        raise ConfigError(f"Failed to write config: {e}") from e

    return config_path


def _config_to_dict(config: AssetTreeConfig) -> dict[str, object]:
    """Convert AssetTreeConfig to a dictionary for TOML serialization.

    TOML has no null, so unset directories are omitted.

    Args:
        config: The AssetTreeConfig to convert.

    Returns:
        Dictionary ready for TOML serialization.
    """
    result: dict[str, object] = {}

    if config.resource_dir is not None:
        result["resource_dir"] = config.resource_dir

    if config.documents_dir is not None:
        result["documents_dir"] = config.documents_dir

    result["ignored_filenames"] = list(config.ignored_filenames)
    result["on_error"] = config.on_error.value

    return result


def get_default_config() -> AssetTreeConfig:
    """Create a default AssetTreeConfig.

    Returns:
        AssetTreeConfig with default settings.
    """
    return AssetTreeConfig()


def get_config() -> AssetTreeConfig:
    """Get the active configuration.

    Falls back to defaults when no config file exists. A config file
    that exists but is invalid is an error.

    Returns:
        The loaded or default configuration.

    Raises:
        ConfigError: If the config file exists but cannot be used.
    """
    try:
        return load_config()
    except ConfigNotFoundError:
        logger.debug("No config file, using defaults")
        return get_default_config()
