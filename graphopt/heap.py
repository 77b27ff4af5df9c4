"""
Mergeable priority queues for the relaxation engines.

The path generators meld whole edge queues into a working queue every round,
so the queue has to support a cheap union. A binomial-tree forest gives
O(log n) insert, extract and meld.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
import math
import numbers
from typing import Any, Dict, Iterable, List, Optional, Tuple

from .errors import (
    EmptyQueueError,
    InvalidParameterError,
    ModeMismatchError,
    QueueConsumedError,
)


@dataclass(frozen=True)
class QueueEntry:
    """A (key, item) pair held by a priority queue."""

    key: float
    item: Any


class PriorityQueue(ABC):
    """
    Interface for a mergeable min- or max-priority queue.

    ``ascending=True`` orders by smallest key first, ``False`` by largest.
    """

    def __init__(self, ascending: bool = True) -> None:
        self._ascending = bool(ascending)

    @property
    def ascending(self) -> bool:
        return self._ascending

    def better(self, key1: float, key2: float) -> bool:
        """True if ``key1`` comes strictly before ``key2`` in this queue's order."""
        return key1 < key2 if self._ascending else key1 > key2

    @abstractmethod
    def insert(self, key: float, item: Any) -> None:
        raise NotImplementedError

    @abstractmethod
    def extremum(self) -> QueueEntry:
        """Return the extremal entry without removing it."""
        raise NotImplementedError

    @abstractmethod
    def extract_extremum(self) -> QueueEntry:
        """Remove and return the extremal entry."""
        raise NotImplementedError

    @abstractmethod
    def meld(self, other: "PriorityQueue") -> None:
        """
        Move every entry of ``other`` into this queue.

        ``other`` is consumed: it holds nothing afterwards and any further
        use of it raises :class:`~graphopt.errors.QueueConsumedError`.
        """
        raise NotImplementedError

    @abstractmethod
    def is_empty(self) -> bool:
        raise NotImplementedError

    @abstractmethod
    def __len__(self) -> int:
        raise NotImplementedError


@dataclass
class _BinomialTree:
    key: float
    item: Any
    children: List["_BinomialTree"] = field(default_factory=list)

    @property
    def degree(self) -> int:
        return len(self.children)


class BinomialTreePriorityQueue(PriorityQueue):
    """
    Priority queue backed by a forest of binomial trees.

    The forest holds at most one tree per degree, kept sorted by degree.
    Each tree is heap-ordered: a parent's key is never worse than its
    children's keys under the queue's mode.
    """

    def __init__(
        self,
        ascending: bool = True,
        entries: Optional[Iterable[Tuple[float, Any]]] = None,
    ) -> None:
        super().__init__(ascending)
        self._roots: List[_BinomialTree] = []
        self._size = 0
        self._consumed = False

        for key, item in entries or ():
            self.insert(key, item)

    # --- Internal helpers ---------------------------------------------------

    def _check_usable(self) -> None:
        if self._consumed:
            raise QueueConsumedError("Queue was melded into another queue and can no longer be used")

    def _link(self, tree1: _BinomialTree, tree2: _BinomialTree) -> _BinomialTree:
        # Equal-degree trees only; the root with the better key adopts the other.
        if self.better(tree2.key, tree1.key):
            tree1, tree2 = tree2, tree1
        tree1.children.append(tree2)
        return tree1

    def _union(self, trees: Iterable[_BinomialTree]) -> List[_BinomialTree]:
        by_degree: Dict[int, _BinomialTree] = {}
        for tree in trees:
            while tree.degree in by_degree:
                tree = self._link(by_degree.pop(tree.degree), tree)
            by_degree[tree.degree] = tree
        return [by_degree[degree] for degree in sorted(by_degree)]

    def _extremal_root_index(self) -> int:
        best = 0
        for index in range(1, len(self._roots)):
            if self.better(self._roots[index].key, self._roots[best].key):
                best = index
        return best

    # --- PriorityQueue interface ---------------------------------------------

    def insert(self, key: float, item: Any) -> None:
        self._check_usable()
        if isinstance(key, bool) or not isinstance(key, numbers.Real) or math.isnan(key):
            raise InvalidParameterError(f"Queue key must be a number, got {key!r}")

        self._roots = self._union(self._roots + [_BinomialTree(float(key), item)])
        self._size += 1

    def extremum(self) -> QueueEntry:
        self._check_usable()
        if not self._roots:
            raise EmptyQueueError("extremum() called on an empty queue")

        root = self._roots[self._extremal_root_index()]
        return QueueEntry(root.key, root.item)

    def extract_extremum(self) -> QueueEntry:
        self._check_usable()
        if not self._roots:
            raise EmptyQueueError("extract_extremum() called on an empty queue")

        root = self._roots.pop(self._extremal_root_index())
        self._roots = self._union(self._roots + root.children)
        self._size -= 1
        return QueueEntry(root.key, root.item)

    def meld(self, other: PriorityQueue) -> None:
        self._check_usable()
        if other is self:
            raise InvalidParameterError("A queue cannot be melded into itself")
        if not isinstance(other, BinomialTreePriorityQueue):
            raise InvalidParameterError(
                f"Cannot meld {type(other).__name__} into BinomialTreePriorityQueue"
            )
        other._check_usable()
        if other.ascending != self.ascending:
            raise ModeMismatchError(
                f"Cannot meld a queue with ascending={other.ascending} "
                f"into one with ascending={self.ascending}"
            )

        self._roots = self._union(self._roots + other._roots)
        self._size += other._size

        other._roots = []
        other._size = 0
        other._consumed = True

    def is_empty(self) -> bool:
        self._check_usable()
        return self._size == 0

    def __len__(self) -> int:
        self._check_usable()
        return self._size
