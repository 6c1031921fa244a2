"""
Base key/value store interface.
"""
from abc import ABC, abstractmethod
from typing import Optional


class BaseStore(ABC):
    """
    Abstract base class for durable key/value stores holding string values.
    """

    @abstractmethod
    def get(self, key: str) -> Optional[str]:
        """
        Get the value stored under a key.

        Args:
            key (str): The key to read

        Returns:
            Optional[str]: The stored value, or None when the key is absent
        """
        pass

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        """
        Store a value under a key, replacing any previous value.

        Args:
            key (str): The key to write
            value (str): The value to store
        """
        pass

    @abstractmethod
    def delete(self, key: str) -> None:
        """
        Remove a key. Removing an absent key is not an error.
        """
        pass


class InMemoryStore(BaseStore):
    """
    Store that keeps values in a dictionary for the life of the process.
    """

    def __init__(self):
        self._values = {}

    def get(self, key: str) -> Optional[str]:
        return self._values.get(key)

    def set(self, key: str, value: str) -> None:
        self._values[key] = value

    def delete(self, key: str) -> None:
        self._values.pop(key, None)
