"""Shared pytest fixtures for directory bookmark tests."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from dir_bookmarks.config import STORAGE_ENV_VAR
from dir_bookmarks.store import BookmarkStore

if TYPE_CHECKING:
    from pathlib import Path


@pytest.fixture
def home_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point HOME at a fresh directory so tilde expansion is predictable."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.delenv(STORAGE_ENV_VAR, raising=False)
    return home


@pytest.fixture
def store_path(tmp_path: Path) -> Path:
    """Location of a bookmarks file inside a not-yet-created config directory."""
    return tmp_path / "config" / "bookmark" / "bookmarks.json"


@pytest.fixture
def store(store_path: Path) -> BookmarkStore:
    """A store with no prior persisted file."""
    return BookmarkStore(store_path)


@pytest.fixture
def project_dirs(tmp_path: Path) -> dict[str, Path]:
    """A few real directories to bookmark."""
    dirs: dict[str, Path] = {}
    for name in ("alpha", "beta", "gamma"):
        path = tmp_path / "projects" / name
        path.mkdir(parents=True)
        dirs[name] = path
    return dirs
