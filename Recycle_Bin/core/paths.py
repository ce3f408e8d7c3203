import os
from pathlib import Path
from typing import Optional


# ----------------------------
# Canonicalization
# ----------------------------

def canonicalize(
    path,
    cwd: Optional[Path] = None,
    *,
    strict: bool = True,
) -> Path:
    """
    Turn user input into the absolute key used by the store.

    The parent directory is resolved (symlinks, `..`), the final component
    is kept as typed so a symlink is trashed as a link.
    With strict=True the parent must exist.
    """
    from Recycle_Bin.core.errors import PathResolutionError

    raw = os.fspath(path) if path is not None else ""
    if not raw:
        raise PathResolutionError("empty path")

    candidate = Path(raw).expanduser()
    name = candidate.name
    if name in ("", ".", ".."):
        raise PathResolutionError(f"cannot resolve {raw!r} to a file", Path(raw))

    if not candidate.is_absolute():
        candidate = (cwd or Path.cwd()) / candidate

    try:
        parent = candidate.parent.resolve(strict=strict)
    except (OSError, RuntimeError) as e:
        raise PathResolutionError(f"cannot resolve {raw!r}: {e}", Path(raw)) from e

    return parent / name


def is_within(path: Path, root: Path) -> bool:
    try:
        path.relative_to(root)
    except ValueError:
        return False
    return True


# ----------------------------
# Trash layout
# ----------------------------

def mirrored_destination(trash_dir: Path, original: Path) -> Path:
    """
    /tmp/a/report.txt -> <trash_dir>/tmp/a/report.txt
    """
    return trash_dir / original.relative_to(original.anchor)


def prune_empty_parents(start: Path, trash_dir: Path) -> None:
    """
    Remove `start` and its ancestors while they are empty.

    Stops at the first non-empty directory and never touches `trash_dir`
    or anything outside it.
    """
    current = start
    while current != trash_dir and is_within(current, trash_dir):
        try:
            current.rmdir()
        except OSError:
            # not empty, or already gone
            break
        current = current.parent
