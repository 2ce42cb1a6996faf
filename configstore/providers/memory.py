import threading
from typing import Iterable, List

from configstore.core.item import Item, ItemList
from .base import Provider


class InMemoryProvider(Provider):
    """
    Runtime provider that keeps its items in memory.

    Also the backing store of file and environment sources, so that a
    refresh can swap the items in place while readers keep working.
    """

    kind = "memory"

    def __init__(self, items: Iterable[Item] = ()):
        self._items: List[Item] = list(items)
        self._lock = threading.Lock()

    def add(self, *items: Item) -> "InMemoryProvider":
        """Append items. Returns self so calls can be chained."""
        with self._lock:
            self._items.extend(items)
        return self

    def replace(self, items: Iterable[Item]):
        """Swap the whole item list in one step."""
        new_items = list(items)
        with self._lock:
            self._items = new_items

    def items(self) -> ItemList:
        """Snapshot of the current items. Never carries an error."""
        with self._lock:
            return ItemList.of(self._items)

    def __len__(self):
        with self._lock:
            return len(self._items)
