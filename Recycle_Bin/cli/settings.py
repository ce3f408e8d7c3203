import json
import os
import re
from datetime import timedelta
from pathlib import Path
from typing import Any, Dict, Optional

from Recycle_Bin.core.models import TrashConfig


# ----------------------------
# Settings
# ----------------------------

HOME_ENV = "RECYCLE_BIN_HOME"
DEFAULT_HOME = Path.home() / ".local" / "share" / "recycle_bin"

SETTINGS_FILE = "settings.json"
TRASH_DIR_NAME = "files"
STORE_FILE = "trash.json"

DEFAULT_SETTINGS = {
    "trash": {
        "dir": None,  # None -> <home>/files
        "retention_days": 7,
    },
    "store": {
        "path": None,  # None -> <home>/trash.json
    },
}

_TTL_UNITS = {
    "s": "seconds",
    "m": "minutes",
    "h": "hours",
    "d": "days",
    "w": "weeks",
}
_TTL_RE = re.compile(r"^\s*(\d+(?:\.\d+)?)\s*([smhdw]?)\s*$", re.IGNORECASE)


def data_home() -> Path:
    override = os.environ.get(HOME_ENV)
    if override:
        return Path(override).expanduser()
    return DEFAULT_HOME


def load_settings(settings_path: Optional[Path] = None) -> Dict[str, Any]:
    """
    Read the user's settings file and merge it over DEFAULT_SETTINGS.

    A missing file means defaults. Sections are merged key by key, so a
    file that only sets "retention_days" keeps the default trash dir.
    """
    path = settings_path or data_home() / SETTINGS_FILE

    merged = json.loads(json.dumps(DEFAULT_SETTINGS))

    if not path.exists():
        return merged

    try:
        with open(path, "r", encoding="utf-8") as f:
            user_settings = json.load(f)
    except OSError as e:
        raise ValueError(f"cannot read settings {path}: {e}") from e

    if not isinstance(user_settings, dict):
        raise ValueError(f"{path}: settings must be a JSON object")

    for k, v in user_settings.items():
        if k in DEFAULT_SETTINGS and not isinstance(v, dict):
            raise ValueError(f"{path}: section '{k}' must be a JSON object")
        if isinstance(v, dict) and k in merged:
            merged[k].update(v)
        else:
            merged[k] = v

    return merged


def parse_ttl(value) -> timedelta:
    """
    "30d", "12h", "90m", "45s", "2w" or a bare number of days.
    """
    if isinstance(value, timedelta):
        return value
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        if value < 0:
            raise ValueError(f"retention must not be negative: {value}")
        return timedelta(days=value)

    match = _TTL_RE.match(str(value))
    if not match:
        raise ValueError(f"invalid retention {value!r}, expected e.g. 7d, 12h, 30m")

    amount, unit = match.groups()
    unit = (unit or "d").lower()
    return timedelta(**{_TTL_UNITS[unit]: float(amount)})


def build_config(
    settings: Dict[str, Any],
    *,
    trash_dir: Optional[Path] = None,
    store_path: Optional[Path] = None,
    home: Optional[Path] = None,
) -> TrashConfig:
    """
    Combine merged settings and command-line overrides into a TrashConfig.
    """
    home = home or data_home()

    trash_dir = trash_dir or settings["trash"].get("dir") or home / TRASH_DIR_NAME
    store_path = store_path or settings["store"].get("path") or home / STORE_FILE

    return TrashConfig(
        trash_dir=Path(trash_dir).expanduser().resolve(),
        ttl=parse_ttl(settings["trash"].get("retention_days", 7)),
        store_path=Path(store_path).expanduser().resolve(),
    )
