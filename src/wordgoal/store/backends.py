"""Key-value stores for persisted preferences.

Two backends share the KeyValueStore interface:
- MemoryStore: dict-backed, for tests and embedding
- JsonFileStore: a JSON object on disk, rewritten atomically on every set
"""

import json
import logging
import os
import tempfile
from collections.abc import Iterator
from pathlib import Path
from typing import Any, Protocol

from wordgoal.exceptions import StoreLoadError, StoreWriteError

logger = logging.getLogger(__name__)


class KeyValueStore(Protocol):
    """Durable get/set of named scalar values."""

    def get(self, key: str, default: Any = None) -> Any:
        ...

    def set(self, key: str, value: Any) -> None:
        ...


class MemoryStore:
    """In-memory key-value store.

    Example:
        store = MemoryStore({"wordLimit": 750})
        store.get("wordLimit", 500)
    """

    def __init__(self, values: dict[str, Any] | None = None) -> None:
        self._values: dict[str, Any] = dict(values or {})

    def get(self, key: str, default: Any = None) -> Any:
        return self._values.get(key, default)

    def set(self, key: str, value: Any) -> None:
        self._values[key] = value

    def __contains__(self, key: object) -> bool:
        return key in self._values

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def as_dict(self) -> dict[str, Any]:
        return dict(self._values)


class JsonFileStore(MemoryStore):
    """Key-value store persisted as a JSON object.

    A missing file starts an empty store. An unreadable or corrupt file is
    logged and also starts empty; the next successful set() replaces it.

    Example:
        store = JsonFileStore(Path("~/.wordgoal.json").expanduser())
        store.set("wordLimit", 750)
    """

    def __init__(self, path: Path) -> None:
        super().__init__()
        self._path = path
        try:
            self._values = self._load()
        except StoreLoadError as e:
            logger.warning("%s; starting with empty preferences", e)
            self._values = {}

    @property
    def path(self) -> Path:
        return self._path

    def _load(self) -> dict[str, Any]:
        """Read the JSON file.

        Returns:
            Stored values; empty if the file does not exist

        Raises:
            StoreLoadError: If the file cannot be read or is not a JSON object
        """
        if not self._path.exists():
            return {}
        try:
            data = json.loads(self._path.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
            raise StoreLoadError(str(self._path), str(e)) from e
        if not isinstance(data, dict):
            raise StoreLoadError(str(self._path), "top-level value is not an object")
        return data

    def set(self, key: str, value: Any) -> None:
        """Store a value and write the file.

        Raises:
            StoreWriteError: If the file cannot be written
        """
        values = {**self._values, key: value}
        self._flush(values)
        self._values = values

    def _flush(self, values: dict[str, Any]) -> None:
        directory = self._path.parent
        try:
            directory.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                prefix=f".{self._path.name}.", suffix=".tmp", dir=directory
            )
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as fh:
                    json.dump(values, fh, indent=2, sort_keys=True)
                os.replace(tmp_name, self._path)
            except BaseException:
                Path(tmp_name).unlink(missing_ok=True)
                raise
        except OSError as e:
            raise StoreWriteError(str(self._path), str(e)) from e
