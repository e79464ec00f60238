"""
Hand-off key-value store.

Abstract string key-value boundary plus an in-process implementation with a
byte quota, sized like browser local storage.

Dependencies: reqbot.core.exceptions
System role: Storage backend for chat-to-report hand-offs
"""

import logging
import threading
from abc import ABC, abstractmethod

from reqbot.core.exceptions import StorageError

logger = logging.getLogger(__name__)

DEFAULT_MAX_BYTES = 5 * 1024 * 1024


class HandoffStore(ABC):
    """String key-value store used to carry state between requests."""

    @abstractmethod
    def put(self, key: str, value: str) -> None:
        """
        Store a value, replacing any previous value for the key.

        Raises:
            StorageError: If the value cannot be stored
        """

    @abstractmethod
    def get(self, key: str) -> str:
        """
        Read a value.

        Raises:
            StorageError: If the key does not exist
        """

    @abstractmethod
    def delete(self, key: str) -> None:
        """Remove a key. Missing keys are ignored."""


class InMemoryHandoffStore(HandoffStore):
    """
    Process-local store with a total byte capacity.

    Size is measured as UTF-8 bytes of keys plus values. A put that would
    take the store over capacity fails and leaves existing data intact.
    """

    def __init__(self, max_bytes: int = DEFAULT_MAX_BYTES) -> None:
        if max_bytes <= 0:
            raise ValueError("max_bytes must be positive")
        self._max_bytes = max_bytes
        self._data: dict[str, str] = {}
        self._used_bytes = 0
        self._lock = threading.Lock()

    @property
    def max_bytes(self) -> int:
        return self._max_bytes

    @property
    def used_bytes(self) -> int:
        with self._lock:
            return self._used_bytes

    @staticmethod
    def _entry_size(key: str, value: str) -> int:
        return len(key.encode("utf-8")) + len(value.encode("utf-8"))

    def put(self, key: str, value: str) -> None:
        size = self._entry_size(key, value)
        with self._lock:
            previous = self._data.get(key)
            freed = self._entry_size(key, previous) if previous is not None else 0
            projected = self._used_bytes - freed + size
            if projected > self._max_bytes:
                logger.warning(
                    f"{__name__}:put - Quota exceeded key={key}, "
                    f"size={size}, used={self._used_bytes}, max={self._max_bytes}"
                )
                raise StorageError(
                    "Could not save to hand-off storage. It might be too large.",
                    key=key,
                    operation="put",
                    details={"size_bytes": size, "max_bytes": self._max_bytes},
                )
            self._data[key] = value
            self._used_bytes = projected

    def get(self, key: str) -> str:
        with self._lock:
            value = self._data.get(key)
        if value is None:
            raise StorageError(f"Key not found: {key}", key=key, operation="get")
        return value

    def delete(self, key: str) -> None:
        with self._lock:
            value = self._data.pop(key, None)
            if value is not None:
                self._used_bytes -= self._entry_size(key, value)
