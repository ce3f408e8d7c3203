# Auto-generated __init__.py

from . import cleanup
from .cleanup import CleanupReport
from .cleanup import cleanup_trash
from . import errors
from .errors import CorruptState
from .errors import LockBusy
from .errors import MoveFailed
from .errors import NotFound
from .errors import PathResolutionError
from .errors import ProtectedPath
from .errors import TrashError
from .errors import UnsupportedTarget
from . import lock
from .lock import TrashLock
from . import models
from .models import TrashConfig
from .models import TrashRecord
from . import paths
from .paths import canonicalize
from .paths import mirrored_destination
from .paths import prune_empty_parents
from . import session
from .session import open_trash
from . import store
from .store import TrashStore
from . import trash
from .trash import list_trash
from .trash import move_to_trash
from .trash import restore_from_trash

__all__ = [
    "cleanup",
    "errors",
    "lock",
    "models",
    "paths",
    "session",
    "store",
    "trash",
    "CleanupReport",
    "CorruptState",
    "LockBusy",
    "MoveFailed",
    "NotFound",
    "PathResolutionError",
    "ProtectedPath",
    "TrashConfig",
    "TrashError",
    "TrashLock",
    "TrashRecord",
    "TrashStore",
    "UnsupportedTarget",
    "canonicalize",
    "cleanup_trash",
    "list_trash",
    "mirrored_destination",
    "move_to_trash",
    "open_trash",
    "prune_empty_parents",
    "restore_from_trash",
]
