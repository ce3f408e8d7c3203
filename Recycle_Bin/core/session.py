from contextlib import contextmanager
from typing import Iterator

from Recycle_Bin.core.errors import LockBusy
from Recycle_Bin.core.lock import TrashLock
from Recycle_Bin.core.models import TrashConfig
from Recycle_Bin.core.store import TrashStore


@contextmanager
def open_trash(config: TrashConfig) -> Iterator[TrashStore]:
    """
    Lock, load, hand out the store, then save and unlock.

    - LockBusy is raised before anything is read
    - CorruptState from loading releases the lock and never saves,
      so an unreadable store is left as it was
    - Once loaded, the store is saved on every exit path, errors included
    """
    from akinus.utils.logger import log

    lock = TrashLock(config.lock_path)
    if not lock.try_acquire():
        log("WARNING", "lock", f"Store is locked by another process: {config.lock_path}")
        raise LockBusy("another recycle-bin process is running, try again", config.lock_path)

    try:
        config.trash_dir.mkdir(parents=True, exist_ok=True)
        store = TrashStore.load(config.store_path, config.trash_dir, config.ttl)
        try:
            yield store
        finally:
            store.save(config.store_path)
            log("DEBUG", "store", f"Saved {len(store)} record(s) to {config.store_path}")
    finally:
        lock.release()
