"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

import logging
from collections.abc import Callable, Iterable, Iterator
from pathlib import Path

import pytest


@pytest.fixture(autouse=True)
def isolated_dirs(tmp_path_factory: pytest.TempPathFactory, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point XDG config/data directories at a temporary location.

    Keeps tests away from the real ~/.config/assettree/config.toml.
    """
    xdg = tmp_path_factory.mktemp("xdg")
    monkeypatch.setenv("XDG_CONFIG_HOME", str(xdg / "config"))
    monkeypatch.setenv("XDG_DATA_HOME", str(xdg / "data"))
    monkeypatch.delenv("ASSETTREE_RESOURCE_DIR", raising=False)
    return xdg


@pytest.fixture(autouse=True)
def reset_logging() -> Iterator[None]:
    """Undo CLI logging setup so caplog sees package records."""
    yield
    logger = logging.getLogger("assettree")
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True


@pytest.fixture
def make_tree(tmp_path: Path) -> Callable[..., Path]:
    """Build a directory tree under tmp_path.

    Entries ending in "/" are created as directories, everything else as
    files whose content is their own relative path.
    """

    def _make(entries: Iterable[str], root_name: str = "assets") -> Path:
        root = tmp_path / root_name
        root.mkdir(exist_ok=True)
        for rel in entries:
            target = root / rel
            if rel.endswith("/"):
                target.mkdir(parents=True, exist_ok=True)
            else:
                target.parent.mkdir(parents=True, exist_ok=True)
                target.write_text(rel)
        return root

    return _make


@pytest.fixture
def sound_tree(make_tree: Callable[..., Path]) -> Path:
    """A small asset tree with a type directory, nesting and junk files."""
    return make_tree(
        [
            "sfx/ui/click.wav",
            "sfx/ui/.DS_Store",
            "sfx/boom.ogg",
            "music/level1/boss/theme.mp3",
            "readme.txt",
        ],
        root_name="sounds",
    )


def write_config(xdg: Path, content: str) -> Path:
    """Write a config.toml into the isolated XDG config directory."""
    config_path = xdg / "config" / "assettree" / "config.toml"
    config_path.parent.mkdir(parents=True, exist_ok=True)
    config_path.write_text(content)
    return config_path


@pytest.fixture
def config_writer(isolated_dirs: Path) -> Callable[[str], Path]:
    """Write the active config file for the current test."""

    def _write(content: str) -> Path:
        return write_config(isolated_dirs, content)

    return _write
