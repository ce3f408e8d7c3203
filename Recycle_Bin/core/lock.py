import fcntl
from pathlib import Path
from typing import Optional, TextIO


class TrashLock:
    """
    Exclusive, non-blocking lock on a file next to the store.

    Only one recycle-bin process may work on a store at a time. A second
    one gets `try_acquire() == False` and must give up.
    """

    def __init__(self, path: Path):
        self.path = path
        self._fd: Optional[TextIO] = None

    @property
    def held(self) -> bool:
        return self._fd is not None

    def try_acquire(self) -> bool:
        if self._fd is not None:
            return True

        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd = open(self.path, "a")
        try:
            fcntl.flock(fd.fileno(), fcntl.LOCK_EX | fcntl.LOCK_NB)
        except BlockingIOError:
            fd.close()
            return False
        except OSError:
            fd.close()
            raise

        self._fd = fd
        return True

    def release(self) -> None:
        if self._fd is None:
            return
        try:
            fcntl.flock(self._fd.fileno(), fcntl.LOCK_UN)
        finally:
            self._fd.close()
            self._fd = None
