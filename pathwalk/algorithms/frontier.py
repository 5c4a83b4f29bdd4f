"""Mutable min-priority queue with decrease-key for traversal frontiers.

`PriorityFrontier` wraps a ``heapq`` binary heap. Re-keying an item pushes a
fresh heap entry and marks the previous one stale; stale entries are discarded
lazily when they reach the top of the heap. Ties on equal keys are broken by
insertion order, where a re-key counts as a new insertion.
"""

from __future__ import annotations

from dataclasses import dataclass
from heapq import heappop, heappush
from itertools import count
from typing import Any, Dict, Hashable, List

from pathwalk.types.base import Cost


@dataclass(frozen=True)
class FrontierEntry:
    """An item popped from the frontier together with its key."""

    item: Hashable
    key: Cost


class PriorityFrontier:
    """Min-priority queue over hashable items keyed by numeric cost."""

    def __init__(self) -> None:
        # Heap entries are [key, seq, item, live]; ``live`` is cleared when
        # the entry is superseded by update_key.
        self._heap: List[List[Any]] = []
        self._entries: Dict[Hashable, List[Any]] = {}
        self._seq = count()

    @property
    def count(self) -> int:
        """Number of queued items."""
        return len(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, item: object) -> bool:
        return item in self._entries

    def insert(self, item: Hashable, key: Cost) -> None:
        """Queue ``item`` with priority ``key``.

        Raises:
            ValueError: If ``item`` is already queued.
        """
        if item in self._entries:
            raise ValueError(f"Item '{item}' is already in the frontier.")
        self._push(item, key)

    def update_key(self, item: Hashable, new_key: Cost) -> None:
        """Change the priority of a queued item.

        Raises:
            KeyError: If ``item`` is not queued.
        """
        entry = self._entries.get(item)
        if entry is None:
            raise KeyError(f"Item '{item}' is not in the frontier.")
        entry[3] = False
        self._push(item, new_key)

    def pop(self) -> FrontierEntry:
        """Remove and return the entry with the smallest key.

        Raises:
            IndexError: If the frontier is empty.
        """
        self._drop_stale()
        if not self._heap:
            raise IndexError("pop from an empty frontier")
        key, _, item, _ = heappop(self._heap)
        del self._entries[item]
        return FrontierEntry(item, key)

    def peek(self) -> FrontierEntry:
        """Return the entry with the smallest key without removing it.

        Raises:
            IndexError: If the frontier is empty.
        """
        self._drop_stale()
        if not self._heap:
            raise IndexError("peek at an empty frontier")
        key, _, item, _ = self._heap[0]
        return FrontierEntry(item, key)

    def _push(self, item: Hashable, key: Cost) -> None:
        entry = [key, next(self._seq), item, True]
        self._entries[item] = entry
        heappush(self._heap, entry)

    def _drop_stale(self) -> None:
        while self._heap and not self._heap[0][3]:
            heappop(self._heap)
