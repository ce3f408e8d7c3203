import json
import os
import tempfile
from datetime import timedelta
from pathlib import Path
from typing import Dict, List, Optional

from Recycle_Bin.core.errors import CorruptState
from Recycle_Bin.core.models import TrashRecord
from Recycle_Bin.core.paths import mirrored_destination


# ----------------------------
# Schema keys
# ----------------------------

DIR_KEY = "dir"
TTL_KEY = "ttl"
PATHMAP_KEY = "pathmap"


# ----------------------------
# Helpers
# ----------------------------

def _record_from_json(trash_dir: Path, original: str, value) -> TrashRecord:
    original_path = Path(original)
    if not original_path.is_absolute():
        raise CorruptState(f"record key is not absolute: {original!r}")

    # Old stores kept a bare key with a null value
    if value is None:
        return TrashRecord(
            original_path=original_path,
            trash_path=mirrored_destination(trash_dir, original_path),
        )

    if not isinstance(value, dict):
        raise CorruptState(f"record for {original!r} is not an object")

    trash_path = value.get("trash_path")
    if trash_path is None:
        trash_path = mirrored_destination(trash_dir, original_path)
    elif not isinstance(trash_path, str):
        raise CorruptState(f"trash_path for {original!r} is not a string")

    deleted_at = value.get("deleted_at")
    if deleted_at is not None and (
        isinstance(deleted_at, bool) or not isinstance(deleted_at, (int, float))
    ):
        raise CorruptState(f"deleted_at for {original!r} is not a number")

    return TrashRecord(
        original_path=original_path,
        trash_path=Path(trash_path),
        deleted_at=float(deleted_at) if deleted_at is not None else None,
    )


# ----------------------------
# Public API
# ----------------------------

class TrashStore:
    """
    In-memory mapping of original path -> TrashRecord, plus its JSON file.

    Only `load` and `save` touch the disk.
    """

    def __init__(
        self,
        trash_dir: Path,
        ttl: timedelta,
        records: Optional[Dict[Path, TrashRecord]] = None,
    ):
        self.trash_dir = trash_dir
        self.ttl = ttl
        self._records: Dict[Path, TrashRecord] = dict(records or {})

    # -------- Persistence --------

    @classmethod
    def load(cls, path: Path, trash_dir: Path, ttl: timedelta) -> "TrashStore":
        """
        Load the store at `path`.

        A missing file is an empty store. Anything unreadable raises
        CorruptState so the caller never overwrites it.
        """
        try:
            text = path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return cls(trash_dir, ttl)
        except OSError as e:
            raise CorruptState(f"cannot read {path}: {e}", path) from e

        try:
            data = json.loads(text)
        except ValueError as e:
            raise CorruptState(f"{path} is not valid JSON: {e}", path) from e

        if not isinstance(data, dict):
            raise CorruptState(f"{path} does not hold a JSON object", path)

        pathmap = data.get(PATHMAP_KEY, {})
        if pathmap is None:
            pathmap = {}
        if not isinstance(pathmap, dict):
            raise CorruptState(f"{path}: '{PATHMAP_KEY}' is not an object", path)

        # Entries without a trash_path live under the dir the store was written for
        stored_dir = data.get(DIR_KEY)
        layout_dir = Path(stored_dir) if isinstance(stored_dir, str) and stored_dir else trash_dir

        records: Dict[Path, TrashRecord] = {}
        for original, value in pathmap.items():
            record = _record_from_json(layout_dir, original, value)
            records[record.original_path] = record

        return cls(trash_dir, ttl, records)

    def save(self, path: Path) -> None:
        """
        Write the store next to `path` and rename it into place.
        """
        payload = {
            DIR_KEY: str(self.trash_dir),
            TTL_KEY: int(self.ttl.total_seconds()),
            PATHMAP_KEY: {
                str(original): record.to_json()
                for original, record in self._records.items()
            },
        }

        path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(
            dir=path.parent,
            prefix=f".{path.name}.",
            suffix=".tmp",
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(payload, f, indent=2)
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp_name, path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise

    # -------- Records --------

    def put(self, record: TrashRecord) -> Optional[TrashRecord]:
        """
        Insert `record`, returning the record it replaced, if any.
        """
        previous = self._records.pop(record.original_path, None)
        self._records[record.original_path] = record
        return previous

    def get(self, original_path: Path) -> Optional[TrashRecord]:
        return self._records.get(original_path)

    def remove(self, original_path: Path) -> Optional[TrashRecord]:
        return self._records.pop(original_path, None)

    def all(self) -> List[TrashRecord]:
        return list(self._records.values())

    def find_by_trash_path(self, trash_path: Path) -> Optional[TrashRecord]:
        for record in self._records.values():
            if record.trash_path == trash_path:
                return record
        return None

    def __len__(self) -> int:
        return len(self._records)

    def __contains__(self, original_path) -> bool:
        return original_path in self._records
