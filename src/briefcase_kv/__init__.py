"""Briefcase: named string values kept as files in a scratch directory."""

from .commands import COMMANDS, CommandArgs, CommandResult, dispatch
from .config import BriefcaseConfig, load_config
from .locator import StorageLocation, locate, resolve_storage_dir
from .store import EntryStore, InvalidEntryNameError

__version__ = "0.0.1"

__all__ = [
    "COMMANDS",
    "BriefcaseConfig",
    "CommandArgs",
    "CommandResult",
    "EntryStore",
    "InvalidEntryNameError",
    "StorageLocation",
    "__version__",
    "dispatch",
    "load_config",
    "locate",
    "resolve_storage_dir",
]
