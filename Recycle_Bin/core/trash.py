import os
import stat
import time
from pathlib import Path
from typing import List, Optional

from Recycle_Bin.core.errors import (
    MoveFailed,
    NotFound,
    ProtectedPath,
    UnsupportedTarget,
)
from Recycle_Bin.core.models import TrashRecord
from Recycle_Bin.core.paths import (
    canonicalize,
    is_within,
    mirrored_destination,
    prune_empty_parents,
)
from Recycle_Bin.core.store import TrashStore


def move_to_trash(
    store: TrashStore,
    file_path,
    *,
    cwd: Optional[Path] = None,
    protected: tuple = (),
    now: Optional[float] = None,
) -> TrashRecord:
    """
    Move a file into the trash and record where it came from.

    The trash layout mirrors the original absolute path, so the same file
    always lands in the same slot. Deleting a path that is already tracked
    replaces the older trash copy and its record.
    Returns the new record.
    """
    from akinus.utils.logger import log

    original = canonicalize(file_path, cwd)
    trash_dir = store.trash_dir

    if is_within(original, trash_dir) or original in protected:
        raise ProtectedPath(f"refusing to trash {original}", original)

    try:
        st = original.lstat()
    except FileNotFoundError as e:
        raise NotFound(f"no such file: {original}", original) from e
    except OSError as e:
        raise NotFound(f"cannot stat {original}: {e}", original) from e

    if stat.S_ISDIR(st.st_mode):
        raise UnsupportedTarget(f"is a directory: {original}", original)

    dest_path = mirrored_destination(trash_dir, original)

    # An earlier copy in another slot goes first, so it is never left untracked
    previous = store.get(original)
    if previous is not None and previous.trash_path != dest_path:
        try:
            previous.trash_path.unlink(missing_ok=True)
        except OSError as e:
            raise MoveFailed(
                f"cannot remove earlier trash copy {previous.trash_path}: {e}",
                original,
            ) from e
        prune_empty_parents(previous.trash_path.parent, trash_dir)

    try:
        dest_path.parent.mkdir(parents=True, exist_ok=True)
        os.replace(original, dest_path)
    except OSError as e:
        prune_empty_parents(dest_path.parent, trash_dir)
        if previous is not None and previous.trash_path != dest_path:
            # its backing file is gone now
            store.remove(original)
        raise MoveFailed(f"cannot move {original} to trash: {e}", original) from e

    record = TrashRecord(
        original_path=original,
        trash_path=dest_path,
        deleted_at=time.time() if now is None else now,
    )
    store.put(record)

    if previous is not None:
        log(
            "INFO",
            "trash",
            f"Replaced earlier trash copy of {original} ({previous.trash_path})",
        )

    log(
        "INFO",
        "trash",
        f"Moved file to trash: {original} -> {dest_path}",
    )

    return record


def restore_from_trash(
    store: TrashStore,
    file_path,
    *,
    cwd: Optional[Path] = None,
) -> Optional[TrashRecord]:
    """
    Move a trashed file back to where it was deleted from.

    Returns the restored record, or None when nothing was trashed under
    that path. The record is only dropped once the file is back.
    """
    from akinus.utils.logger import log

    original = canonicalize(file_path, cwd, strict=False)
    record = store.get(original)
    if record is None:
        return None

    if os.path.lexists(original):
        raise MoveFailed(f"refusing to overwrite existing {original}", original)

    try:
        os.replace(record.trash_path, original)
    except OSError as e:
        raise MoveFailed(f"cannot restore {original}: {e}", original) from e

    store.remove(original)
    prune_empty_parents(record.trash_path.parent, store.trash_dir)

    log(
        "INFO",
        "trash",
        f"Restored file from trash: {record.trash_path} -> {original}",
    )

    return record


def list_trash(store: TrashStore) -> List[TrashRecord]:
    return store.all()
