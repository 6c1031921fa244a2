"""
Key/value store persisted as a single JSON document on disk.
"""
import json
import os
from typing import Dict, Optional
from pom_grading.data.connectors.base_connector import BaseStore
from pom_grading.utils.logging_config import get_logger

# Set up logging
logger = get_logger(__name__)


class JsonFileStore(BaseStore):
    """
    Store that keeps every key in one JSON object file.

    The file is read on each access and rewritten on each change, which is
    enough for a handful of rule profiles.
    """

    def __init__(self, path: str):
        """
        Initialize the store.

        Args:
            path (str): Location of the JSON file; created on first write
        """
        self.path = path

    def _read_all(self) -> Dict[str, str]:
        if not os.path.exists(self.path):
            return {}
        with open(self.path, 'r', encoding='utf-8') as f:
            content = f.read()
        if not content.strip():
            return {}
        data = json.loads(content)
        if not isinstance(data, dict):
            raise ValueError(f"Store file {self.path} does not contain a JSON object")
        return data

    def _write_all(self, data: Dict[str, str]) -> None:
        directory = os.path.dirname(self.path)
        if directory:
            os.makedirs(directory, exist_ok=True)
        with open(self.path, 'w', encoding='utf-8') as f:
            json.dump(data, f, indent=2, sort_keys=True)
        logger.debug(f"Wrote {len(data)} key(s) to {self.path}")

    def get(self, key: str) -> Optional[str]:
        return self._read_all().get(key)

    def set(self, key: str, value: str) -> None:
        data = self._read_all()
        data[key] = value
        self._write_all(data)

    def delete(self, key: str) -> None:
        data = self._read_all()
        if key in data:
            del data[key]
            self._write_all(data)
