"""Base locations and path helpers for assettree.

Files are addressed relative to one of two base locations:

- Resource: read-only bundled assets (defaults to the working directory).
- Documents: writable per-user data (~/.local/share/assettree/).

Configuration follows the XDG Base Directory Specification:
- Config: ~/.config/assettree/
"""

import os
from enum import Enum
from pathlib import Path

# Directory name used under every XDG base
APP_NAME = "assettree"

# Environment override for the resource root
RESOURCE_DIR_ENV = "ASSETTREE_RESOURCE_DIR"


class BaseDirectory(str, Enum):
    """Base location a relative path is resolved against."""

    RESOURCE = "resource"
    DOCUMENTS = "documents"


def _xdg_app_dir(env_var: str, fallback: str) -> Path:
    """Return $env_var/assettree, or ~/fallback/assettree when the variable is unset."""
    home = os.environ.get(env_var) or Path.home() / fallback
    return Path(home) / APP_NAME


def get_config_dir() -> Path:
    """Directory holding config.toml and theme.toml."""
    return _xdg_app_dir("XDG_CONFIG_HOME", ".config")


def get_config_path() -> Path:
    """Get the default config file path.

    Returns:
        Path to ~/.config/assettree/config.toml.
    """
    return get_config_dir() / "config.toml"


def get_documents_dir() -> Path:
    """Get the writable per-user data directory.

    Returns:
        Path to ~/.local/share/assettree/ (or XDG_DATA_HOME/assettree/).
    """
    return _xdg_app_dir("XDG_DATA_HOME", ".local/share")


def get_resource_dir() -> Path:
    """Get the read-only resource directory.

    Uses ASSETTREE_RESOURCE_DIR when set, the working directory otherwise.
    """
    override = os.environ.get(RESOURCE_DIR_ENV)
    if override:
        return Path(override)
    return Path.cwd()


def get_base_dir(base: BaseDirectory) -> Path:
    """Get the root directory for a base location.

    Explicit ``resource_dir``/``documents_dir`` config values take
    precedence over the defaults.

    Args:
        base: Base location to look up.

    Returns:
        Root directory of that base location.
    """
    # Imported here: config imports this module for its default paths
    from assettree.core.config import get_config

    config = get_config()
    if base == BaseDirectory.RESOURCE:
        return Path(config.resource_dir) if config.resource_dir else get_resource_dir()
    return Path(config.documents_dir) if config.documents_dir else get_documents_dir()


def path_for_file(path: str | Path, base: BaseDirectory | None = BaseDirectory.RESOURCE) -> Path:
    """Resolve a path against a base location.

    Absolute paths and ``base=None`` return the path unchanged.

    Args:
        path: File or directory path, usually relative.
        base: Base location to join the path onto.

    Returns:
        The resolved path.
    """
    candidate = Path(path)
    if base is None or candidate.is_absolute():
        return candidate
    return get_base_dir(base) / candidate


def get_dir_separator() -> str:
    """Get the directory separator for the current platform."""
    return os.sep


def _ensure_dir(path: Path, label: str) -> Path:
    """mkdir -p, reporting failures as RuntimeError."""
    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        reason = e.strerror or str(e)
        raise RuntimeError(f"Cannot create {label} directory {path}: {reason}") from e
    return path


def ensure_config_dir() -> Path:
    """Create the config directory if needed and return it."""
    return _ensure_dir(get_config_dir(), "config")


def ensure_documents_dir() -> Path:
    """Create the active documents directory if needed and return it.

    Raises:
        RuntimeError: If the directory cannot be created.
    """
    return _ensure_dir(get_base_dir(BaseDirectory.DOCUMENTS), "documents")
