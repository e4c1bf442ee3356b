"""
Local key-value storage.

This module provides the durable storage the inventory is persisted to:
a flat mapping of slot names to string values, kept either in a JSON
file on disk or in memory.
"""

import json
import logging
import os
import tempfile
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)


class StorageError(Exception):
    """Error reading or writing local storage."""
    pass


class BaseStorage(ABC):
    """
    Abstract base class for key-value storage backends.

    Subclasses must implement get_item() and set_item().
    """

    @abstractmethod
    def get_item(self, key: str) -> Optional[str]:
        """
        Read a slot.

        Args:
            key: The slot name.

        Returns:
            The stored string, or None if the slot is empty.
        """
        pass

    @abstractmethod
    def set_item(self, key: str, value: str) -> None:
        """
        Overwrite a slot.

        Args:
            key: The slot name.
            value: The string to store.
        """
        pass


class MemoryStorage(BaseStorage):
    """Storage held in a dictionary, lost when the process exits."""

    def __init__(self, initial: Optional[dict[str, str]] = None) -> None:
        self._data: dict[str, str] = dict(initial or {})

    def get_item(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._data[key] = value


class JsonFileStorage(BaseStorage):
    """
    Storage kept in a single JSON file.

    The file holds one JSON object mapping slot names to strings. Writes
    go to a temporary file in the same directory which then replaces the
    original, so a failed write never leaves a truncated file behind.
    """

    def __init__(self, path: Path) -> None:
        """
        Initialize the storage.

        Args:
            path: Location of the storage file. It is created on first write.
        """
        self.path = Path(path).expanduser()

    def _read_all(self) -> dict[str, str]:
        """
        Read the whole storage file.

        Raises:
            StorageError: If the file exists but cannot be read or is not
                a JSON object of strings.
        """
        if not self.path.exists():
            return {}

        try:
            with open(self.path, encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            raise StorageError(f"Failed to read storage file {self.path}: {e}") from e

        if not isinstance(data, dict):
            raise StorageError(f"Storage file {self.path} does not hold a JSON object")

        return {str(k): v for k, v in data.items() if isinstance(v, str)}

    def _write_all(self, data: dict[str, str]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(
            prefix=f".{self.path.name}.",
            dir=self.path.parent,
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(data, f, indent=2, ensure_ascii=False)
            os.replace(tmp_name, self.path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise

    def get_item(self, key: str) -> Optional[str]:
        return self._read_all().get(key)

    def set_item(self, key: str, value: str) -> None:
        try:
            data = self._read_all()
        except StorageError:
            logger.warning("Overwriting unreadable storage file %s", self.path)
            data = {}
        data[key] = value
        self._write_all(data)
        logger.debug("Wrote slot %r to %s", key, self.path)

