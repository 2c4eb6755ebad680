"""Global configuration constants for directory bookmarks."""

from __future__ import annotations

import os
from pathlib import Path

from .errors import ConfigDirError

# Directory under ~/.config holding the bookmark store.
CONFIG_DIR_NAME: str = "bookmark"

BOOKMARKS_FILENAME: str = "bookmarks.json"

# Environment variable overriding the storage file location (also read from .env).
STORAGE_ENV_VAR: str = "BM_BOOKMARKS_FILE"


def default_storage_path() -> Path:
    """Return the storage file location for the current user.

    ``$BM_BOOKMARKS_FILE`` wins when set; otherwise the file lives in
    ``~/.config/bookmark``. Raises ConfigDirError when no home directory
    can be determined.
    """
    override = os.getenv(STORAGE_ENV_VAR, "").strip()
    if override:
        return Path(override).expanduser()
    try:
        home = Path.home()
    except (KeyError, RuntimeError) as exc:
        msg = f"Failed to get home directory: {exc}"
        raise ConfigDirError(msg) from exc
    return home / ".config" / CONFIG_DIR_NAME / BOOKMARKS_FILENAME
