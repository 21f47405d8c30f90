# history.py
"""Session history of evaluated expressions (newest first, in memory only)."""

import time
from collections import namedtuple

HistoryItem = namedtuple("HistoryItem", ["id", "expression", "result", "timestamp"])

DEFAULT_HISTORY_SIZE = 50


class History:
    def __init__(self, size=DEFAULT_HISTORY_SIZE):
        self.size = size
        self._items = []
        self._counter = 0

    def record(self, expression, result):
        """Store one (expression, result) pair and return the new entry."""
        self._counter += 1
        item = HistoryItem(self._counter, expression, result, time.time())
        self._items.insert(0, item)
        del self._items[self.size:]
        return item

    def items(self):
        return list(self._items)

    def clear(self):
        self._items.clear()

    def __len__(self):
        return len(self._items)
