"""Error types raised by the bookmark store."""

from __future__ import annotations


class BookmarkError(Exception):
    """Base class for every failure surfaced by the bookmark store."""


class ConfigDirError(BookmarkError):
    """Raised when the per-user configuration directory cannot be created."""


class StorageError(BookmarkError):
    """Raised when the bookmarks file cannot be read, parsed or written."""


class StorageReadError(StorageError):
    """Raised when the bookmarks file exists but cannot be read."""


class StorageFormatError(StorageError):
    """Raised when the bookmarks file is not valid bookmark JSON."""


class StorageWriteError(StorageError):
    """Raised when the bookmarks file could not be rewritten.

    The mutation that triggered the write is still applied in memory.
    """


class InvalidNameError(BookmarkError):
    """Raised when a bookmark name is empty."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Invalid bookmark name: {name!r}")


class DuplicateNameError(BookmarkError):
    """Raised when a bookmark name is already taken."""

    def __init__(self, name: str, existing_path: str) -> None:
        self.name = name
        self.existing_path = existing_path
        super().__init__(
            f"bookmark with name '{name}' already exists (points to: {existing_path})",
        )


class DuplicatePathError(BookmarkError):
    """Raised when a directory is already bookmarked under another name."""

    def __init__(self, path: str, existing_name: str) -> None:
        self.path = path
        self.existing_name = existing_name
        super().__init__(f"This directory is already bookmarked as '{existing_name}'")


class PathNotFoundError(BookmarkError):
    """Raised when the path to bookmark does not exist."""

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"Directory does not exist: {path}")


class BookmarkNotFoundError(BookmarkError):
    """Raised when no bookmark matches the requested name."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Bookmark not found: {name}")


class InvalidPathError(BookmarkError):
    """Raised when a path cannot be stored as UTF-8 text."""

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"Path is not valid UTF-8 and cannot be bookmarked: {path!r}")


class HomeDirError(BookmarkError):
    """Raised when ``~`` is used but no home directory can be determined."""
