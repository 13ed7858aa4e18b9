"""State store interface and an in-memory implementation."""

from __future__ import annotations

import dataclasses
import json
import threading
from abc import ABC, abstractmethod
from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum
from typing import Any, Union


class StateOperation(str, Enum):
    """The kind of a transactional state operation."""

    UPSERT = "upsert"
    DELETE = "delete"

    def __str__(self) -> str:
        return self.value


@dataclass
class SetRequest:
    """Stores ``value`` under ``key``."""

    key: str = ""
    value: Any = None


@dataclass
class DeleteRequest:
    """Removes ``key``."""

    key: str = ""


@dataclass
class TransactionalStateRequest:
    """One operation of a state transaction."""

    operation: StateOperation = StateOperation.UPSERT
    request: Union[SetRequest, DeleteRequest, None] = None


def _default(value: Any) -> Any:
    to_dict = getattr(value, "to_dict", None)
    if callable(to_dict):
        return to_dict()
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return dataclasses.asdict(value)
    if isinstance(value, (bytes, bytearray)):
        raise TypeError("raw bytes cannot be stored as JSON")
    raise TypeError(f"object of type {type(value).__name__} is not JSON serialisable")


_ESCAPES = {
    "<": "\\u003c",
    ">": "\\u003e",
    "&": "\\u0026",
    "\u2028": "\\u2028",
    "\u2029": "\\u2029",
}


def _encode(value: Any) -> bytes:
    """Encode ``value`` as compact JSON with HTML-sensitive characters escaped."""
    text = json.dumps(value, default=_default, ensure_ascii=False, separators=(",", ":"))
    for char, escaped in _ESCAPES.items():
        text = text.replace(char, escaped)
    return text.encode("utf-8")


class StateStore(ABC):
    """A key/value store for actor state."""

    @abstractmethod
    def get(self, key: str) -> bytes | None:
        """Return the stored bytes for ``key``, or ``None`` if absent."""

    @abstractmethod
    def set(self, request: SetRequest) -> None:
        """Store the JSON encoding of ``request.value`` under ``request.key``."""

    @abstractmethod
    def delete(self, request: DeleteRequest) -> None:
        """Remove ``request.key`` if present."""


class TransactionalStore(StateStore):
    """A state store that can apply several operations atomically."""

    @abstractmethod
    def multi(self, requests: Iterable[TransactionalStateRequest]) -> None:
        """Apply all ``requests`` as one transaction."""


class MemoryStateStore(TransactionalStore):
    """A thread-safe state store held in memory."""

    def __init__(self) -> None:
        self._items: dict[str, bytes] = {}
        self._lock = threading.RLock()

    def get(self, key: str) -> bytes | None:
        with self._lock:
            return self._items.get(key)

    def set(self, request: SetRequest) -> None:
        encoded = _encode(request.value)
        with self._lock:
            self._items[request.key] = encoded

    def delete(self, request: DeleteRequest) -> None:
        with self._lock:
            self._items.pop(request.key, None)

    def multi(self, requests: Iterable[TransactionalStateRequest]) -> None:
        """Validate and encode every operation first, then apply them all or none."""
        planned: list[tuple[str, bytes | None]] = []
        for entry in requests:
            operation = StateOperation(entry.operation)
            if operation is StateOperation.UPSERT:
                if not isinstance(entry.request, SetRequest):
                    raise TypeError("upsert operation requires a SetRequest")
                planned.append((entry.request.key, _encode(entry.request.value)))
            else:
                if not isinstance(entry.request, DeleteRequest):
                    raise TypeError("delete operation requires a DeleteRequest")
                planned.append((entry.request.key, None))

        with self._lock:
            for key, encoded in planned:
                if encoded is None:
                    self._items.pop(key, None)
                else:
                    self._items[key] = encoded

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._items