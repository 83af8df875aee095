"""
In-process keyed store.

``MemoryStore`` keeps entities in a dict keyed by a string
identifier extracted with ``key_func``.  All access goes through the
methods below, each of which holds the store's lock for its whole
duration: FastAPI runs synchronous handlers on a thread pool, so two
requests can hit the same store at once.

Entities are pydantic models.  The store deep-copies on the way in
and on the way out, so callers never share an instance with the
collection.
"""

from __future__ import annotations

import logging
import threading
from contextlib import contextmanager
from typing import Callable, Dict, Generic, Iterator, List, TypeVar

from pydantic import BaseModel

from ..core.errors import AlreadyExistsError, NotFoundError, RegistryError, StorageError

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=BaseModel)


class MemoryStore(Generic[T]):
    """Lock-guarded mapping of identifier -> entity."""

    def __init__(self, name: str, key_func: Callable[[T], str]) -> None:
        self.name = name
        self._key_func = key_func
        self._items: Dict[str, T] = {}
        self._lock = threading.Lock()

    @contextmanager
    def _locked(self, operation: str) -> Iterator[None]:
        # NotFound/AlreadyExists pass through; anything else is opaque.
        with self._lock:
            try:
                yield
            except RegistryError:
                raise
            except Exception as exc:
                logger.error("%s store: %s failed: %s", self.name, operation, exc)
                raise StorageError(f"{self.name} store {operation} failed") from exc

    def _key(self, entity: T) -> str:
        key = self._key_func(entity)
        if not key:
            raise ValueError("entity has no identifier")
        return key

    def get(self, key: str) -> T:
        """Return a copy of the entity stored under ``key``.

        Raises ``NotFoundError`` when the key is absent.
        """
        with self._locked("get"):
            entity = self._items.get(key)
            if entity is None:
                raise NotFoundError(f"{self.name} {key} not found")
            return entity.model_copy(deep=True)

    def save(self, entity: T) -> None:
        """Insert or replace ``entity`` under its key."""
        with self._locked("save"):
            self._items[self._key(entity)] = entity.model_copy(deep=True)

    def add(self, entity: T) -> None:
        """Insert ``entity`` only if its key is free.

        The existence check and the insert happen under one lock
        acquisition, so of two concurrent adds with the same key exactly
        one succeeds.
        """
        with self._locked("add"):
            key = self._key(entity)
            if key in self._items:
                raise AlreadyExistsError(f"{self.name} {key} already exists")
            self._items[key] = entity.model_copy(deep=True)

    def delete(self, key: str) -> bool:
        """Remove the entity under ``key``.  Returns False if there was none."""
        with self._locked("delete"):
            return self._items.pop(key, None) is not None

    def list(self) -> List[T]:
        """Copies of every entity, in insertion order."""
        with self._locked("list"):
            return [entity.model_copy(deep=True) for entity in self._items.values()]

    def contains(self, key: str) -> bool:
        with self._lock:
            return key in self._items

    def clear(self) -> None:
        with self._lock:
            self._items.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)
