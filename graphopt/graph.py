"""
Directed, weighted graph abstraction for graphopt.

Vertices are identified by name. Edges are directed: source -> destination
with a finite float weight (negative weights are allowed) and a stable id
used as the priority-queue payload.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
import math
import numbers
from typing import AbstractSet, Mapping, Sequence

from .errors import InvalidEdgeError
from .heap import PriorityQueue


def is_valid_name(name: object) -> bool:
    """True for a non-empty string."""
    return isinstance(name, str) and name != ""


@dataclass(frozen=True)
class Edge:
    """Directed arc ``source -> destination``."""

    id: str
    source: str
    destination: str
    weight: float

    def __post_init__(self) -> None:
        for label in ("id", "source", "destination"):
            if not is_valid_name(getattr(self, label)):
                raise InvalidEdgeError(f"Edge {label} must be a non-empty string")
        if (
            isinstance(self.weight, bool)
            or not isinstance(self.weight, numbers.Real)
            or not math.isfinite(self.weight)
        ):
            raise InvalidEdgeError(f"Edge '{self.id}' weight must be finite, got {self.weight!r}")


class Graph(ABC):
    """Read-only directed, weighted graph over named vertices."""

    @abstractmethod
    def vertex_name_set(self) -> AbstractSet[str]:
        """Return the names of all vertices in the graph."""
        raise NotImplementedError

    @abstractmethod
    def edge_map(self) -> Mapping[str, Edge]:
        """Return every edge keyed by its id."""
        raise NotImplementedError

    @abstractmethod
    def outgoing(self, vertex_name: str) -> Sequence[Edge]:
        """Edges leaving ``vertex_name``."""
        raise NotImplementedError

    @abstractmethod
    def incoming(self, vertex_name: str) -> Sequence[Edge]:
        """Edges arriving at ``vertex_name``."""
        raise NotImplementedError

    @abstractmethod
    def edge_priority_queue(self, ascending: bool) -> PriorityQueue:
        """
        A freshly built queue of (weight, edge id) for every edge.

        A new queue is returned on each call since melding consumes it.
        """
        raise NotImplementedError

    @abstractmethod
    def vertex_edge_priority_queue(
        self, vertex_name: str, ascending: bool, outgoing: bool = True
    ) -> PriorityQueue:
        """Fresh queue of (weight, edge id) over one vertex's outgoing or incoming edges."""
        raise NotImplementedError
