"""In-memory positional item store"""
from __future__ import annotations

import logging
import threading

from core.exceptions import EmptyItemError, ItemNotFoundError

logger = logging.getLogger(__name__)


class ItemStore:
    """
    Ordered sequence of text items addressed by 0-based position.

    Positions are not stable identifiers: deleting index k shifts every
    later item down by one. All access is serialized behind a single lock
    so bounds checks and the mutation that follows them are atomic.
    """

    def __init__(self):
        self._items: list[str] = []
        self._lock = threading.Lock()

    @staticmethod
    def _validate(item: str | None) -> str:
        if item is None or not item.strip():
            raise EmptyItemError()
        return item

    def _check_index(self, index: int) -> None:
        # Caller must hold the lock
        if index < 0 or index >= len(self._items):
            raise ItemNotFoundError(index)

    def add(self, item: str | None) -> int:
        """Append an item and return its position"""
        item = self._validate(item)
        with self._lock:
            self._items.append(item)
            index = len(self._items) - 1
        logger.debug(f"Item added at index {index}")
        return index

    def list_items(self) -> list[str]:
        """Return a snapshot copy of all items"""
        with self._lock:
            return list(self._items)

    def get(self, index: int) -> str:
        with self._lock:
            self._check_index(index)
            return self._items[index]

    def update(self, index: int, item: str | None) -> None:
        """Replace the item at a position (emptiness is checked before bounds)"""
        item = self._validate(item)
        with self._lock:
            self._check_index(index)
            self._items[index] = item
        logger.debug(f"Item updated at index {index}")

    def delete(self, index: int) -> None:
        """Remove the item at a position, shifting later items down"""
        with self._lock:
            self._check_index(index)
            del self._items[index]
        logger.debug(f"Item deleted at index {index}")

    def count(self) -> int:
        with self._lock:
            return len(self._items)

    def __len__(self) -> int:
        return self.count()
