"""Persistent store mapping bookmark names to directories."""

from __future__ import annotations

import json
import logging
import os
import tempfile
from pathlib import Path

from pydantic import ValidationError

from .config import default_storage_path
from .errors import (
    BookmarkNotFoundError,
    ConfigDirError,
    DuplicateNameError,
    DuplicatePathError,
    HomeDirError,
    InvalidNameError,
    InvalidPathError,
    PathNotFoundError,
    StorageFormatError,
    StorageReadError,
    StorageWriteError,
)
from .models import Bookmark, BookmarkCollection, BookmarkFileModel

LOGGER = logging.getLogger(__name__)


def expand_home(raw_path: str) -> str:
    """Replace a leading ``~`` with the user's home directory.

    Everything after the tilde is joined beneath home, so ``~``, ``~/src``
    and ``~src`` all land inside it. Other paths are returned unchanged.
    Raises HomeDirError when the home directory cannot be determined.
    """
    if not raw_path.startswith("~"):
        return raw_path
    try:
        home = str(Path.home())
    except (KeyError, RuntimeError) as exc:
        msg = f"Failed to expand home directory: {exc}"
        raise HomeDirError(msg) from exc
    remainder = raw_path[1:].lstrip("/" + os.sep)
    return os.path.join(home, remainder) if remainder else home


def _is_utf8(text: str) -> bool:
    # Undecodable filename bytes arrive as lone surrogates.
    try:
        text.encode("utf-8")
    except UnicodeEncodeError:
        return False
    return True


def _path_exists(path: str) -> bool:
    try:
        os.stat(path)
    except (FileNotFoundError, NotADirectoryError, ValueError):
        return False
    except OSError:
        # Present but not stat-able (e.g. permissions); treat as existing.
        return True
    return True


class BookmarkStore:
    """Owns the bookmark collection and its JSON snapshot on disk.

    The whole collection is loaded at construction and rewritten after every
    successful mutation. There is no locking: two concurrent invocations can
    overwrite each other's changes.
    """

    def __init__(self, storage_path: Path | None = None) -> None:
        """Load the store from ``storage_path`` (default: per-user config file).

        Raises ConfigDirError, StorageReadError or StorageFormatError.
        """
        self._path = storage_path if storage_path is not None else default_storage_path()
        self._ensure_parent_dir()
        self._collection = self._load()

    @property
    def storage_path(self) -> Path:
        """Location of the bookmarks file."""
        return self._path

    def _ensure_parent_dir(self) -> None:
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            msg = f"Failed to create config directory {self._path.parent}: {exc}"
            raise ConfigDirError(msg) from exc

    def _load(self) -> BookmarkCollection:
        try:
            raw_text = self._path.read_text(encoding="utf-8")
        except FileNotFoundError:
            LOGGER.debug("No bookmarks file at %s; starting empty", self._path)
            return BookmarkCollection()
        except (OSError, UnicodeDecodeError) as exc:
            msg = f"Failed to read bookmarks file {self._path}: {exc}"
            raise StorageReadError(msg) from exc
        try:
            file_model = BookmarkFileModel.model_validate_json(raw_text)
        except ValidationError as exc:
            msg = f"Failed to parse bookmarks file {self._path}: {exc}"
            raise StorageFormatError(msg) from exc
        collection = file_model.to_collection()
        LOGGER.debug("Loaded %d bookmarks from %s", len(collection), self._path)
        return collection

    def save(self) -> None:
        """Atomically replace the bookmarks file with the in-memory collection.

        Raises StorageWriteError on any I/O or encoding failure; the previous
        file is left intact in that case.
        """
        payload = self._collection.to_model().model_dump(mode="json")
        text = json.dumps(payload, indent=2, ensure_ascii=False) + "\n"
        tmp_name: str | None = None
        try:
            with tempfile.NamedTemporaryFile(
                "w",
                encoding="utf-8",
                dir=self._path.parent,
                prefix=f".{self._path.name}.",
                suffix=".tmp",
                delete=False,
            ) as handle:
                tmp_name = handle.name
                handle.write(text)
                handle.flush()
                os.fsync(handle.fileno())
            os.replace(tmp_name, self._path)
        except BaseException as exc:
            if tmp_name is not None:
                Path(tmp_name).unlink(missing_ok=True)
            if isinstance(exc, (OSError, UnicodeError)):
                msg = f"Failed to write bookmarks file {self._path}: {exc}"
                raise StorageWriteError(msg) from exc
            raise
        LOGGER.debug("Wrote %d bookmarks to %s", len(self._collection), self._path)

    def add(self, name: str, raw_path: str) -> Bookmark:
        """Bookmark ``raw_path`` under ``name`` and persist the store.

        ``raw_path`` may start with ``~`` or be relative to the current
        working directory; the stored path is absolute but symlinks are kept.
        """
        if not name or not _is_utf8(name):
            raise InvalidNameError(name)
        existing = self._collection.find_by_name(name)
        if existing is not None:
            raise DuplicateNameError(name, existing.path)

        path = expand_home(raw_path)
        if not _path_exists(path):
            raise PathNotFoundError(path)
        abs_path = os.path.abspath(path)
        if not _is_utf8(abs_path):
            raise InvalidPathError(abs_path)

        conflict = self._collection.find_by_path(abs_path)
        if conflict is not None:
            raise DuplicatePathError(abs_path, conflict.name)

        bookmark = Bookmark(name=name, path=abs_path)
        self._collection.append(bookmark)
        LOGGER.info("Added bookmark %r -> %s", name, abs_path)
        self.save()
        return bookmark

    def remove(self, name: str) -> Bookmark:
        """Delete the bookmark called ``name`` and persist the store."""
        removed = self._collection.remove(name)
        if removed is None:
            raise BookmarkNotFoundError(name)
        LOGGER.info("Removed bookmark %r", name)
        self.save()
        return removed

    def get(self, name: str) -> str:
        """Resolve ``name`` to its stored absolute path."""
        bookmark = self._collection.find_by_name(name)
        if bookmark is None:
            raise BookmarkNotFoundError(name)
        return bookmark.path

    def list(self) -> list[Bookmark]:
        """Return all bookmarks in insertion order."""
        return list(self._collection.bookmarks)
