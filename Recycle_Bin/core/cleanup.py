import os
import time
from dataclasses import dataclass, field
from datetime import timedelta
from pathlib import Path
from typing import List, Optional, Tuple

from Recycle_Bin.core.models import TrashRecord
from Recycle_Bin.core.paths import is_within
from Recycle_Bin.core.store import TrashStore


@dataclass
class CleanupReport:
    removed: List[Path] = field(default_factory=list)
    dropped: List[Path] = field(default_factory=list)
    errors: List[Tuple[Path, str]] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors


def cleanup_trash(
    store: TrashStore,
    retention: Optional[timedelta] = None,
    *,
    now: Optional[float] = None,
    skip: tuple = (),
) -> CleanupReport:
    """
    Permanently delete trashed files older than the retention window.

    - Age is measured from the record's deletion time, or from the file's
      mtime when there is no record or no timestamp
    - Only files strictly older than the window are removed
    - Records that point at a file that no longer exists are dropped
    - Empty directories left behind are pruned, the trash root is kept
    - A failure on one entry is reported and the sweep goes on
    """
    from akinus.utils.logger import log

    ttl = (retention if retention is not None else store.ttl).total_seconds()
    now = time.time() if now is None else now
    trash_dir = store.trash_dir
    report = CleanupReport()

    # Dangling records first, so the walk below only sees real files
    for record in store.all():
        if not os.path.lexists(record.trash_path):
            store.remove(record.original_path)
            report.dropped.append(record.original_path)
            log(
                "WARNING",
                "cleanup",
                f"Dropped record with missing trash file: {record.original_path}",
            )

    def on_walk_error(err: OSError) -> None:
        report.errors.append((Path(err.filename or trash_dir), str(err)))
        log("ERROR", "cleanup", f"Cannot read {err.filename}: {err}")

    def expire(entry: Path, record: Optional[TrashRecord]) -> None:
        try:
            if record is not None and record.deleted_at is not None:
                reference = record.deleted_at
            else:
                reference = entry.lstat().st_mtime

            if now - reference <= ttl:
                return

            entry.unlink()
        except OSError as e:
            report.errors.append((entry, str(e)))
            log("ERROR", "cleanup", f"Cannot remove {entry}: {e}")
            return

        report.removed.append(entry)
        if record is not None:
            store.remove(record.original_path)

        log(
            "INFO",
            "cleanup",
            f"Removed expired trash file: {entry}",
        )

    # Records left behind by an earlier trash dir still expire
    for record in store.all():
        if not is_within(record.trash_path, trash_dir):
            expire(record.trash_path, record)

    if not trash_dir.exists():
        return report

    by_trash_path = {record.trash_path: record for record in store.all()}

    for dirpath, dirnames, filenames in os.walk(trash_dir, onerror=on_walk_error):
        base = Path(dirpath)
        # symlinks to directories are trashed entries too, never walked into
        links = [d for d in dirnames if (base / d).is_symlink()]
        for name in filenames + links:
            entry = base / name
            if entry not in skip:
                expire(entry, by_trash_path.get(entry))

    _prune_empty_dirs(trash_dir, report)

    return report


def _prune_empty_dirs(trash_dir: Path, report: CleanupReport) -> None:
    from akinus.utils.logger import log

    for dirpath, dirnames, filenames in os.walk(trash_dir, topdown=False):
        directory = Path(dirpath)
        if directory == trash_dir:
            continue
        try:
            if any(directory.iterdir()):
                continue
            directory.rmdir()
        except OSError as e:
            report.errors.append((directory, str(e)))
            log("ERROR", "cleanup", f"Cannot prune {directory}: {e}")
