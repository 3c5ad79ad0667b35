"""Storage port for the scenario collection: a JSON file on disk or plain memory."""

import json
import logging
import os
from abc import ABC, abstractmethod
from typing import List, Optional

from config.defaults import STORAGE_KEY, storage_path

logger = logging.getLogger(__name__)


class StorageError(Exception):
    """Raised when stored scenarios cannot be read or written."""


class ScenarioStorage(ABC):
    """Port: load() returns a list of scenario records, or None when nothing is stored."""

    @abstractmethod
    def load(self) -> Optional[List[dict]]:
        ...

    @abstractmethod
    def save(self, records: List[dict]) -> None:
        ...


class MemoryStorage(ScenarioStorage):
    def __init__(self, records: Optional[List[dict]] = None):
        self._payload = json.dumps(records) if records is not None else None

    def load(self) -> Optional[List[dict]]:
        if self._payload is None:
            return None
        return json.loads(self._payload)

    def save(self, records: List[dict]) -> None:
        self._payload = json.dumps(records)


class JsonFileStorage(ScenarioStorage):
    """Keeps the collection under a fixed key inside a JSON document."""

    def __init__(self, path: Optional[str] = None, key: str = STORAGE_KEY):
        self.path = path or storage_path()
        self.key = key

    def _read_document(self) -> dict:
        if not os.path.exists(self.path):
            return {}
        try:
            with open(self.path, "r", encoding="utf-8") as fh:
                document = json.load(fh)
        except (OSError, ValueError) as e:
            raise StorageError(f"Could not read {self.path}: {e}") from e
        if not isinstance(document, dict):
            raise StorageError(f"Unexpected content in {self.path}: expected a JSON object")
        return document

    def load(self) -> Optional[List[dict]]:
        records = self._read_document().get(self.key)
        if records is None:
            return None
        if not isinstance(records, list):
            raise StorageError(f"Key '{self.key}' in {self.path} does not hold a list")
        return records

    def save(self, records: List[dict]) -> None:
        try:
            document = self._read_document()
        except StorageError:
            logger.warning("Overwriting unreadable storage file %s", self.path)
            document = {}
        document[self.key] = records

        directory = os.path.dirname(self.path)
        tmp_path = f"{self.path}.tmp"
        try:
            if directory:
                os.makedirs(directory, exist_ok=True)
            with open(tmp_path, "w", encoding="utf-8") as fh:
                json.dump(document, fh, ensure_ascii=False, indent=2)
            os.replace(tmp_path, self.path)
        except OSError as e:
            logger.error("Failed to save scenarios to %s: %s", self.path, e)
            raise StorageError(f"Could not write {self.path}: {e}") from e
        logger.debug("Saved %d scenarios to %s", len(records), self.path)
