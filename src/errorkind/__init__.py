"""errorkind — Hierarchical error kinds with inherited defaults and stack capture."""

from pathlib import Path

_VERSION_FILE = Path(__file__).resolve().parent.parent.parent / "VERSION"
__version__ = _VERSION_FILE.read_text().strip() if _VERSION_FILE.exists() else "0.0.0"

from errorkind.config import (
    CaptureOptions,
    Settings,
    configure,
    get_settings,
    override_settings,
)
from errorkind.kinds import ErrorKind, define_error_type
from errorkind.stack import root_initializer
from errorkind.exceptions import ArgumentOrderError, CustomError

__all__ = [
    "__version__",
    "ArgumentOrderError",
    "CaptureOptions",
    "CustomError",
    "ErrorKind",
    "Settings",
    "configure",
    "define_error_type",
    "get_settings",
    "override_settings",
    "root_initializer",
]
