"""Shell integration snippet for jumping to bookmarked directories.

``bm`` only prints paths; the ``cdto`` function below captures the output of
``bm go`` and changes directory inside the user's own shell.
"""

from __future__ import annotations

SHELL_FUNCTION = """# Directory bookmarks
function cdto() {
    if [ $# -eq 0 ]; then
        local dir=$(bm go 2>/dev/null)
    else
        local dir=$(bm go "$1" 2>/dev/null)
    fi

    if [ -n "$dir" ]; then
        cd "$dir"
        echo "Changed directory to: $dir"
    else
        echo "Error: Bookmark not found: $1"
        return 1
    fi
}
alias goto="cdto"
"""


def render_shell_init() -> str:
    """Return the bash/zsh snippet defining ``cdto`` and the ``goto`` alias."""
    return SHELL_FUNCTION
