"""JSON file implementation of IKeyValueStore.

Local-device style storage: all keys live in a single JSON object file.
Writes go to a temporary file in the same directory which then replaces
the target, so readers never see a half-written file.
"""

import asyncio
import json
import logging
import os
import tempfile
import threading
from pathlib import Path
from typing import Dict, Optional, Union

from bmi_tracker.domain.bmi.core.exceptions.domain_errors import ResultStorageError
from bmi_tracker.domain.bmi.core.ports.key_value_store import IKeyValueStore

logger = logging.getLogger(__name__)


class JsonFileKeyValueStore(IKeyValueStore):
    """
    Key-value store persisted as one JSON object on disk.

    Blocking file I/O runs in a worker thread (asyncio.to_thread) so the
    event loop is never blocked.

    Example:
        >>> store = JsonFileKeyValueStore("/tmp/bmi.json")
        >>> await store.set("lastBMI", '{"value": 22.86}')
        >>> await store.get("lastBMI")
        '{"value": 22.86}'
    """

    def __init__(self, path: Union[str, Path]) -> None:
        self._path = Path(path)
        # Serializes read-modify-write of the file between worker threads
        self._lock = threading.Lock()
        logger.info(f"Initialized {self.__class__.__name__} at '{self._path}'")

    @property
    def path(self) -> Path:
        return self._path

    async def get(self, key: str) -> Optional[str]:
        """
        Read value by key.

        Raises:
            ResultStorageError: If the file cannot be read or decoded
        """
        data = await asyncio.to_thread(self._read_locked)
        value = data.get(key)
        if value is not None and not isinstance(value, str):
            raise ResultStorageError(
                f"Value for key '{key}' in {self._path} is not a string"
            )
        return value

    async def set(self, key: str, value: str) -> None:
        """
        Store value, overwriting previous one.

        Raises:
            ResultStorageError: If the file cannot be written. A corrupt file
                is moved to "<name>.corrupt" and replaced.
        """
        await asyncio.to_thread(self._write_key, key, value)

    # ============================================================
    # Blocking helpers (run in worker thread)
    # ============================================================

    def _read_locked(self) -> Dict[str, object]:
        with self._lock:
            return self._read()

    def _read(self) -> Dict[str, object]:
        if not self._path.exists():
            return {}
        try:
            with self._path.open("r", encoding="utf-8") as fh:
                data = json.load(fh)
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
            logger.error(f"Error reading store file: path={self._path}, error={e}")
            raise ResultStorageError(f"Cannot read store file {self._path}") from e

        if not isinstance(data, dict):
            raise ResultStorageError(f"Store file {self._path} does not hold a JSON object")
        return data

    def _write_key(self, key: str, value: str) -> None:
        with self._lock:
            try:
                data = self._read()
            except ResultStorageError as e:
                if isinstance(e.__cause__, OSError):
                    raise
                # Undecodable content: keep a copy aside and start over
                data = {}
                self._set_aside_corrupt_file()
            data[key] = value
            try:
                self._path.parent.mkdir(parents=True, exist_ok=True)
                fd, tmp_name = tempfile.mkstemp(
                    dir=self._path.parent, prefix=f".{self._path.name}.", suffix=".tmp"
                )
                try:
                    with os.fdopen(fd, "w", encoding="utf-8") as fh:
                        json.dump(data, fh)
                    os.replace(tmp_name, self._path)
                except BaseException:
                    if os.path.exists(tmp_name):
                        os.unlink(tmp_name)
                    raise
            except OSError as e:
                logger.error(f"Error writing store file: path={self._path}, error={e}")
                raise ResultStorageError(f"Cannot write store file {self._path}") from e

    def _set_aside_corrupt_file(self) -> None:
        backup = self._path.with_name(f"{self._path.name}.corrupt")
        try:
            os.replace(self._path, backup)
        except OSError as e:
            logger.error(f"Error moving corrupt store file: path={self._path}, error={e}")
            raise ResultStorageError(f"Cannot replace corrupt store file {self._path}") from e
        logger.warning(
            "Store file was corrupt, previous content moved aside",
            extra={"path": str(self._path), "backup": str(backup)},
        )
