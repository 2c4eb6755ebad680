"""CLI entry point for directory bookmarks.

Resolves bookmark names to paths for the ``cdto``/``goto`` shell function;
the shell performs the actual directory change. Each invocation loads the
store, runs one command and exits.
"""

from __future__ import annotations

# Standard library imports (alphabetical within groups)
import argparse
import logging
import os
import sys
from typing import TYPE_CHECKING, NoReturn

# Third-party imports
from dotenv import load_dotenv

# Internal imports
from dir_bookmarks.errors import BookmarkError
from dir_bookmarks.shell import render_shell_init
from dir_bookmarks.store import BookmarkStore

if TYPE_CHECKING:  # pragma: no cover
    from collections.abc import Callable, Sequence

EXIT_OK = 0
EXIT_FAILURE = 1


class _ArgumentParser(argparse.ArgumentParser):
    """Argument parser that exits with status 1 on usage errors."""

    def error(self, message: str) -> NoReturn:
        self.print_usage(sys.stderr)
        self.exit(EXIT_FAILURE, f"{self.prog}: error: {message}\n")


def configure_logging(*, verbose: bool) -> None:
    """Configure root logging on stderr (debug when verbose).

    Stdout carries paths captured by the shell, so only warnings are shown
    by default.
    """
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        stream=sys.stderr,
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog="bm",
        description="Bookmark directories and jump back to them by name",
        epilog=(
            "Shell setup: add 'eval \"$(bm init)\"' to your .bashrc or .zshrc,"
            " then use 'goto <name>' to change directory."
        ),
    )
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    commands = parser.add_subparsers(dest="command", metavar="<command>")

    add = commands.add_parser(
        "add", help="Add a bookmark for the current or specified directory",
    )
    add.add_argument("name", help="Bookmark name")
    add.add_argument("path", nargs="?", help="Directory to bookmark (default: current directory)")

    remove = commands.add_parser("remove", help="Remove a bookmark")
    remove.add_argument("name", help="Bookmark name")

    go = commands.add_parser(
        "go", help="Print the path of a bookmark (use with cd, see 'bm init')",
    )
    go.add_argument("name", nargs="?", help="Bookmark name (default: home directory)")

    commands.add_parser("list", help="List all bookmarks")
    commands.add_parser("init", help="Print the cdto/goto shell functions")
    return parser


def _cmd_add(store: BookmarkStore, args: argparse.Namespace) -> int:
    raw_path = args.path
    if raw_path is None:
        try:
            raw_path = os.getcwd()
        except OSError as exc:
            print(f"Error: Failed to get current directory: {exc}", file=sys.stderr)
            return EXIT_FAILURE
    bookmark = store.add(args.name, raw_path)
    print(f"Added bookmark '{bookmark.name}' -> {bookmark.path}")
    return EXIT_OK


def _cmd_remove(store: BookmarkStore, args: argparse.Namespace) -> int:
    store.remove(args.name)
    print(f"Removed bookmark '{args.name}'")
    return EXIT_OK


def _cmd_go(store: BookmarkStore, args: argparse.Namespace) -> int:
    path = os.path.expanduser("~") if args.name is None else store.get(args.name)
    # No trailing newline: the output is captured by $(bm go ...).
    sys.stdout.write(path)
    sys.stdout.flush()
    return EXIT_OK


def _cmd_list(store: BookmarkStore, _args: argparse.Namespace) -> int:
    bookmarks = store.list()
    if not bookmarks:
        print("No bookmarks saved.")
        return EXIT_OK
    print("Bookmarks:")
    for bookmark in bookmarks:
        print(f"  {bookmark.name} -> {bookmark.path}")
    return EXIT_OK


COMMANDS: dict[str, Callable[[BookmarkStore, argparse.Namespace], int]] = {
    "add": _cmd_add,
    "remove": _cmd_remove,
    "go": _cmd_go,
    "list": _cmd_list,
}


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point for the ``bm`` CLI; returns the process exit status."""
    load_dotenv()
    parser = _build_parser()
    args = parser.parse_args(argv)
    configure_logging(verbose=args.verbose)
    logger = logging.getLogger("dir_bookmarks")

    if args.command is None:
        parser.print_help()
        return EXIT_OK
    if args.command == "init":
        sys.stdout.write(render_shell_init())
        return EXIT_OK

    try:
        store = BookmarkStore()
        logger.debug("Running %r against %s", args.command, store.storage_path)
        return COMMANDS[args.command](store, args)
    except BookmarkError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return EXIT_FAILURE


if __name__ == "__main__":
    sys.exit(main())
