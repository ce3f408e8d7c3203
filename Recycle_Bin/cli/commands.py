import argparse
import sys
from pathlib import Path
from typing import Iterable, List, Optional

from Recycle_Bin.core.cleanup import cleanup_trash
from Recycle_Bin.core.errors import TrashError
from Recycle_Bin.core.models import TrashConfig
from Recycle_Bin.core.session import open_trash
from Recycle_Bin.core.store import TrashStore
from Recycle_Bin.core.trash import list_trash, move_to_trash, restore_from_trash
from Recycle_Bin.cli.settings import build_config, load_settings, parse_ttl


PROG = "recycle-bin"


# ----------------------------
# Argument parsing
# ----------------------------

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=PROG,
        description=(
            "Move files to a recycle bin instead of deleting them, "
            "restore them to where they were, and purge old ones."
        ),
    )
    parser.add_argument("--settings", type=Path, help="Settings JSON file")
    parser.add_argument("--trash-dir", type=Path, help="Override the trash directory")
    parser.add_argument("--store", type=Path, help="Override the record store file")

    sub = parser.add_subparsers(dest="command", metavar="COMMAND")
    sub.required = True

    delete = sub.add_parser(
        "delete",
        aliases=["put", "p", "rm"],
        help="Move files to the trash",
    )
    delete.add_argument("paths", nargs="+", metavar="PATH")

    restore = sub.add_parser(
        "restore",
        aliases=["r"],
        help="Move trashed files back to where they were",
    )
    restore.add_argument("paths", nargs="+", metavar="PATH")

    gc = sub.add_parser("gc", help="Permanently delete expired trash")
    gc.add_argument(
        "ttl",
        nargs="?",
        help="Retention window, e.g. 7d, 12h, 30m (bare number = days)",
    )

    ls = sub.add_parser("list", aliases=["ls"], help="List trashed files")
    ls.add_argument(
        "-l",
        "--long",
        action="store_true",
        help="Also show trash location and deletion time",
    )

    return parser


# ----------------------------
# Commands
# ----------------------------

def _report(path, err) -> None:
    print(f"{PROG}: {path}: {err}", file=sys.stderr)


def _protected(config: TrashConfig) -> tuple:
    return (config.store_path, config.lock_path)


def cmd_delete(store: TrashStore, config: TrashConfig, paths: List[str]) -> int:
    failures = 0
    for p in paths:
        try:
            record = move_to_trash(store, p, protected=_protected(config))
        except TrashError as e:
            _report(p, e)
            failures += 1
            continue
        print(f"🗑️  {record.original_path} -> {record.trash_path}")
    return 1 if failures else 0


def cmd_restore(store: TrashStore, config: TrashConfig, paths: List[str]) -> int:
    failures = 0
    for p in paths:
        try:
            record = restore_from_trash(store, p)
        except TrashError as e:
            _report(p, e)
            failures += 1
            continue
        if record is not None:
            print(f"♻️  {record.trash_path} -> {record.original_path}")
    return 1 if failures else 0


def cmd_gc(store: TrashStore, config: TrashConfig, ttl: Optional[str]) -> int:
    retention = parse_ttl(ttl) if ttl is not None else config.ttl

    report = cleanup_trash(store, retention, skip=_protected(config))

    for entry, message in report.errors:
        _report(entry, message)

    print(
        f"✅ Removed {len(report.removed)} expired file(s)"
        + (f", dropped {len(report.dropped)} dangling record(s)" if report.dropped else "")
    )
    return 0 if report.ok else 1


def cmd_list(store: TrashStore, long: bool = False) -> int:
    for record in list_trash(store):
        if long:
            print(
                f"{record.deleted_at_display()}\t"
                f"{record.original_path}\t{record.trash_path}"
            )
        else:
            print(record.original_path)
    return 0


# ----------------------------
# CLI Orchestrator
# ----------------------------

def run(argv: Optional[Iterable[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)

    try:
        settings = load_settings(args.settings)
        config = build_config(
            settings,
            trash_dir=args.trash_dir,
            store_path=args.store,
        )
        # Validate before taking the lock
        if args.command == "gc" and args.ttl is not None:
            parse_ttl(args.ttl)
    except ValueError as e:
        print(f"{PROG}: {e}", file=sys.stderr)
        return 1

    try:
        with open_trash(config) as store:
            if args.command in ("delete", "put", "p", "rm"):
                return cmd_delete(store, config, args.paths)
            if args.command in ("restore", "r"):
                return cmd_restore(store, config, args.paths)
            if args.command == "gc":
                return cmd_gc(store, config, args.ttl)
            return cmd_list(store, long=args.long)
    except (TrashError, OSError) as e:
        print(f"{PROG}: {e}", file=sys.stderr)
        return 1
