from pathlib import Path
from typing import Optional


class TrashError(Exception):
    """
    Base class for every error the recycle bin reports to the user.
    """

    def __init__(self, message: str, path: Optional[Path] = None):
        super().__init__(message)
        self.path = path


class PathResolutionError(TrashError):
    pass


class NotFound(TrashError):
    pass


class UnsupportedTarget(TrashError):
    pass


class ProtectedPath(TrashError):
    pass


class MoveFailed(TrashError):
    pass


class CorruptState(TrashError):
    pass


class LockBusy(TrashError):
    pass
