from __future__ import annotations

import logging
import os
import shutil
from pathlib import Path

logger = logging.getLogger(__name__)

_RESERVED_NAMES = {".", ".."}


class InvalidEntryNameError(ValueError):
    pass


def validate_entry_name(name: str) -> str:
    """Reject names that would resolve outside the storage directory."""
    if not name:
        raise InvalidEntryNameError("entry name must not be empty")
    if name in _RESERVED_NAMES:
        raise InvalidEntryNameError(f"invalid entry name: {name}")

    separators = {"/", os.sep}
    if os.altsep:
        separators.add(os.altsep)
    if any(separator in name for separator in separators) or "\x00" in name:
        raise InvalidEntryNameError(f"invalid entry name: {name}")
    return name


class EntryStore:
    """One file per entry, stored flat inside ``directory``.

    The directory is created lazily by ``set``; read paths treat a missing
    directory as an empty store.
    """

    def __init__(self, directory: str | Path) -> None:
        self.directory = Path(directory)

    @property
    def exists(self) -> bool:
        return self.directory.is_dir()

    def ensure_directory(self) -> None:
        self.directory.mkdir(mode=0o700, parents=True, exist_ok=True)

    def set(self, name: str, value: str | bytes) -> None:
        validate_entry_name(name)
        self.ensure_directory()
        self.write(name, value)

    def write(self, name: str, value: str | bytes) -> None:
        if isinstance(value, str):
            value = value.encode("utf-8", "surrogateescape")
        path = self._entry_path(name)
        path.write_bytes(value)
        logger.info("store set name=%s bytes=%d", name, len(value))

    def get(self, name: str) -> bytes:
        data = self._entry_path(name).read_bytes()
        logger.info("store get name=%s bytes=%d", name, len(data))
        return data

    def remove(self, name: str) -> None:
        self._entry_path(name).unlink()
        logger.info("store remove name=%s", name)

    def list_entries(self) -> list[str]:
        try:
            names = sorted(path.name for path in self.directory.iterdir())
        except FileNotFoundError:
            logger.info("store list_entries directory=%s reason=not_found", self.directory)
            return []
        return names

    def count(self) -> int:
        return len(self.list_entries())

    def purge(self) -> bool:
        if not self.directory.exists():
            logger.info("store purge directory=%s reason=not_found", self.directory)
            return False
        shutil.rmtree(self.directory)
        logger.info("store purge directory=%s", self.directory)
        return True

    def _entry_path(self, name: str) -> Path:
        return self.directory / validate_entry_name(name)
