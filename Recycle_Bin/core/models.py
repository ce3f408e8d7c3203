from dataclasses import dataclass
from datetime import datetime, timedelta
from pathlib import Path
from typing import Optional


@dataclass(frozen=True)
class TrashRecord:
    """
    One trashed file: where it came from and where it sits now.

    Records are never patched. Restore and cleanup drop the whole record.
    `deleted_at` is None only for records loaded from a store written
    before timestamps were kept.
    """
    original_path: Path
    trash_path: Path
    deleted_at: Optional[float] = None

    def deleted_at_display(self) -> str:
        if self.deleted_at is None:
            return "-"
        return datetime.fromtimestamp(self.deleted_at).strftime("%Y-%m-%d %H:%M:%S")

    def to_json(self) -> dict:
        return {
            "trash_path": str(self.trash_path),
            "deleted_at": self.deleted_at,
        }


@dataclass(frozen=True)
class TrashConfig:
    """
    Everything a recycle-bin run needs to know about where things live.
    Built once by the CLI and handed to each component.
    """
    trash_dir: Path
    ttl: timedelta
    store_path: Path

    @property
    def lock_path(self) -> Path:
        return self.store_path.with_name(self.store_path.name + ".lock")
