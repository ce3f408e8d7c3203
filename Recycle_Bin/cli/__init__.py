# Auto-generated __init__.py

from . import commands
from .commands import build_parser
from .commands import run
from . import settings
from .settings import build_config
from .settings import load_settings
from .settings import parse_ttl

__all__ = [
    "commands",
    "settings",
    "build_config",
    "build_parser",
    "load_settings",
    "parse_ttl",
    "run",
]
