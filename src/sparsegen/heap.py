"""
Indexed Binary Max-Heap
=======================

Priority structure over integer keys used by the Havel-Hakimi realizer to
track residual degrees. Besides extract-max it supports changing the
priority of an arbitrary key that is still in the heap and O(1)
membership checks, which ``heapq`` does not offer.

Ties between equal priorities go to the smaller key, so extraction order
is a deterministic function of the inserted (key, priority) pairs.
"""

from typing import Dict, Iterable, List, Tuple


class IndexedMaxHeap:
    """
    Binary max-heap of ``(key, priority)`` pairs addressable by key.

    Examples
    --------
    >>> h = IndexedMaxHeap([(0, 2), (1, 5), (2, 5)])
    >>> h.pop()
    (1, 5)
    >>> h.decrease(2, 1)
    >>> h.pop()
    (0, 2)
    """

    def __init__(self, items: Iterable[Tuple[int, int]] = ()):
        self._keys: List[int] = []
        self._prio: Dict[int, int] = {}
        self._pos: Dict[int, int] = {}
        for key, priority in items:
            self.push(key, priority)

    def __len__(self) -> int:
        return len(self._keys)

    def __bool__(self) -> bool:
        return bool(self._keys)

    def __contains__(self, key: int) -> bool:
        return key in self._pos

    def priority(self, key: int) -> int:
        """Current priority of ``key``."""
        return self._prio[key]

    def push(self, key: int, priority: int) -> None:
        """Insert ``key``; raises ``KeyError`` if it is already present."""
        if key in self._pos:
            raise KeyError(f"key {key} is already in the heap")
        self._prio[key] = priority
        self._pos[key] = len(self._keys)
        self._keys.append(key)
        self._sift_up(len(self._keys) - 1)

    def peek(self) -> Tuple[int, int]:
        """Return the maximum ``(key, priority)`` without removing it."""
        if not self._keys:
            raise IndexError("peek from an empty heap")
        key = self._keys[0]
        return key, self._prio[key]

    def pop(self) -> Tuple[int, int]:
        """Remove and return the maximum ``(key, priority)``."""
        if not self._keys:
            raise IndexError("pop from an empty heap")
        top = self._keys[0]
        last = self._keys.pop()
        if self._keys:
            self._keys[0] = last
            self._pos[last] = 0
            self._sift_down(0)
        del self._pos[top]
        return top, self._prio.pop(top)

    def update(self, key: int, priority: int) -> None:
        """Set the priority of a key already in the heap, in either direction."""
        old = self._prio[key]
        self._prio[key] = priority
        if priority > old:
            self._sift_up(self._pos[key])
        elif priority < old:
            self._sift_down(self._pos[key])

    def decrease(self, key: int, priority: int) -> None:
        """Lower the priority of ``key``; raises ``ValueError`` on an increase."""
        if priority > self._prio[key]:
            raise ValueError(
                f"new priority {priority} exceeds current {self._prio[key]} for key {key}"
            )
        self.update(key, priority)

    def _before(self, a: int, b: int) -> bool:
        # max-heap on priority, smaller key first on ties
        pa, pb = self._prio[a], self._prio[b]
        return pa > pb or (pa == pb and a < b)

    def _swap(self, i: int, j: int) -> None:
        keys = self._keys
        keys[i], keys[j] = keys[j], keys[i]
        self._pos[keys[i]] = i
        self._pos[keys[j]] = j

    def _sift_up(self, i: int) -> None:
        keys = self._keys
        while i > 0:
            parent = (i - 1) // 2
            if not self._before(keys[i], keys[parent]):
                break
            self._swap(i, parent)
            i = parent

    def _sift_down(self, i: int) -> None:
        keys = self._keys
        size = len(keys)
        while True:
            best = i
            for child in (2 * i + 1, 2 * i + 2):
                if child < size and self._before(keys[child], keys[best]):
                    best = child
            if best == i:
                break
            self._swap(i, best)
            i = best
