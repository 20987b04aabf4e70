"""Entry point for the Bookmarker CLI."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

from . import __version__
from .constants import DATA_PATH
from .errors import BookmarkerError
from .favicon import favicon_url
from .log import configure_logging, logger
from .models import BookmarkId, BookmarkRecord, newest_first
from .persistence import BookmarkStore


def parse_id(text: str) -> BookmarkId:
    """Command-line ids: digits are matched as integers, anything else as text."""
    text = text.strip()
    if text.lstrip("-").isdigit():
        return int(text)
    return text


def _format_line(record: BookmarkRecord) -> str:
    added = record.date.astimezone().strftime("%Y-%m-%d")
    return f"{record.id}\t{added}\t{record.name}\t{record.url}"


def _print_list(store: BookmarkStore, as_json: bool) -> None:
    records = newest_first(store.list())
    if as_json:
        payload = [{**r.to_dict(), "favicon": favicon_url(r.url)} for r in records]
        print(json.dumps(payload, indent=2, ensure_ascii=False))
        return
    if not records:
        print("No bookmarks yet.")
        return
    for record in records:
        print(_format_line(record))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bookmarker",
        description="Bookmarker - save and organize your favorite websites",
    )
    parser.add_argument(
        "--version",
        "-V",
        action="version",
        version=f"bookmarker {__version__}",
    )
    parser.add_argument(
        "--data-file",
        type=Path,
        default=None,
        help=f"Bookmark file to use (default: {DATA_PATH})",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Write debug output to the log file",
    )

    actions = parser.add_mutually_exclusive_group()
    actions.add_argument(
        "--list",
        "-l",
        action="store_true",
        help="Print all bookmarks, newest first, and exit",
    )
    actions.add_argument(
        "--add",
        nargs=2,
        metavar=("NAME", "URL"),
        help="Add a bookmark and exit",
    )
    actions.add_argument(
        "--edit",
        nargs=3,
        metavar=("ID", "NAME", "URL"),
        help="Change a bookmark's name and URL and exit",
    )
    actions.add_argument(
        "--delete",
        metavar="ID",
        help="Delete a bookmark and exit",
    )
    actions.add_argument(
        "--today",
        action="store_true",
        help="Print how many bookmarks were added today and exit",
    )
    actions.add_argument(
        "--clear",
        action="store_true",
        help="Delete every bookmark and exit",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="With --list, print JSON (includes favicon addresses)",
    )
    return parser


def run_command(args: argparse.Namespace, store: BookmarkStore) -> bool:
    """Run a one-shot action.  Returns False when no action flag was given."""
    if args.list:
        _print_list(store, args.json)
    elif args.add:
        name, url = args.add
        store.create(name, url)
        print(f"Added {name}")
    elif args.edit:
        bookmark_id = parse_id(args.edit[0])
        store.require(bookmark_id)
        store.update(bookmark_id, args.edit[1], args.edit[2])
        print(f"Updated {bookmark_id}")
    elif args.delete is not None:
        bookmark_id = parse_id(args.delete)
        record = store.require(bookmark_id)
        store.delete(bookmark_id)
        print(f"Deleted {record.name}")
    elif args.today:
        print(store.count_added_on())
    elif args.clear:
        count = len(store.list())
        store.clear()
        print(f"Deleted {count} bookmark(s)")
    else:
        return False
    return True


def main(argv: list[str] | None = None) -> None:
    """Run Bookmarker."""
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.json and not args.list:
        parser.error("--json can only be used with --list")
    configure_logging("DEBUG" if args.debug else None)

    store = BookmarkStore(args.data_file or DATA_PATH)
    store.load()

    try:
        if run_command(args, store):
            return
    except BookmarkerError as exc:
        logger.debug("command failed", exc_info=True)
        print(f"bookmarker: {exc}", file=sys.stderr)
        sys.exit(1)

    try:
        from bookmarker.app import run_app

        run_app(store)
    except (KeyboardInterrupt, SystemExit):
        pass
    except Exception:
        logger.debug("Fatal error in bookmarker", exc_info=True)
        import traceback

        traceback.print_exc()
        sys.exit(1)


if __name__ == "__main__":
    main()
