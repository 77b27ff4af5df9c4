"""
Per-vertex relaxation state for the path generators.

A VertexAugmentor tracks, for every vertex, the best path weight found so
far from the source and the edge that reached it. Generators feed it edges;
it decides whether each edge relaxes its destination.
"""
from __future__ import annotations

from dataclasses import dataclass
import math
from typing import AbstractSet, Dict, List, Mapping, Optional, Tuple

from .errors import InvalidEdgeError, InvalidVertexError, NegativeCycleError
from .graph import Edge, is_valid_name


@dataclass(frozen=True)
class AugmentedVertex:
    """
    Relaxation state of one vertex.

    ``weight`` is infinite (``+inf`` for shortest paths, ``-inf`` for
    longest) until the vertex is reached. ``preceding_edge`` is ``None`` for
    the source and for unreached vertices.
    """

    weight: float
    preceding_edge: Optional[Edge] = None

    @property
    def reached(self) -> bool:
        return math.isfinite(self.weight)


@dataclass(frozen=True)
class OptimalPath:
    """A source -> destination path read back from the predecessor chain."""

    vertex_names: Tuple[str, ...]
    edges: Tuple[Edge, ...]
    weight: float

    @property
    def source(self) -> str:
        return self.vertex_names[0]

    @property
    def destination(self) -> str:
        return self.vertex_names[-1]


class VertexAugmentor:
    """
    Best-known path weights and predecessor edges from a single source.

    Relaxation only ever replaces a vertex's state on strict improvement, so
    for equal-weight alternatives the first edge seen keeps the predecessor.
    """

    def __init__(
        self,
        source_vertex_name: str,
        vertex_names: AbstractSet[str],
        shortest_path: bool = True,
    ) -> None:
        if not is_valid_name(source_vertex_name):
            raise InvalidVertexError(
                f"Source vertex name must be a non-empty string, got {source_vertex_name!r}"
            )
        if source_vertex_name not in vertex_names:
            raise InvalidVertexError(f"Source vertex '{source_vertex_name}' is not in the graph")

        self._source_vertex_name = source_vertex_name
        self._shortest_path = bool(shortest_path)

        unreached = math.inf if self._shortest_path else -math.inf
        self._vertices: Dict[str, AugmentedVertex] = {
            name: AugmentedVertex(unreached) for name in vertex_names
        }
        self._vertices[source_vertex_name] = AugmentedVertex(0.0)

    @property
    def source_vertex_name(self) -> str:
        return self._source_vertex_name

    @property
    def shortest_path(self) -> bool:
        return self._shortest_path

    def _improves(self, candidate: float, current: float) -> bool:
        return candidate < current if self._shortest_path else candidate > current

    def update_augmented_vertex(self, edge: Edge) -> bool:
        """
        Relax ``edge.destination`` through ``edge``.

        Returns True if the destination's weight strictly improved. "No
        improvement" is the common case and is not an error.

        Raises:
            InvalidEdgeError: ``edge`` is not an Edge or an endpoint is unknown.
        """
        if not isinstance(edge, Edge):
            raise InvalidEdgeError(f"Expected an Edge, got {type(edge).__name__}")
        if edge.source not in self._vertices or edge.destination not in self._vertices:
            raise InvalidEdgeError(
                f"Edge '{edge.id}' ({edge.source} -> {edge.destination}) "
                "references a vertex that is not tracked"
            )

        source_vertex = self._vertices[edge.source]
        if not source_vertex.reached:
            return False

        candidate = source_vertex.weight + edge.weight
        if not self._improves(candidate, self._vertices[edge.destination].weight):
            return False

        self._vertices[edge.destination] = AugmentedVertex(candidate, edge)
        return True

    # --- Result accessors -----------------------------------------------------

    def augmented_vertex(self, vertex_name: str) -> AugmentedVertex:
        try:
            return self._vertices[vertex_name]
        except KeyError:
            raise InvalidVertexError(f"Unknown vertex '{vertex_name}'") from None

    def augmented_vertex_map(self) -> Mapping[str, AugmentedVertex]:
        return dict(self._vertices)

    def weight(self, vertex_name: str) -> float:
        return self.augmented_vertex(vertex_name).weight

    def preceding_edge(self, vertex_name: str) -> Optional[Edge]:
        return self.augmented_vertex(vertex_name).preceding_edge

    def weights(self) -> Dict[str, float]:
        """Path weight per vertex, unreached vertices included as infinities."""
        return {name: vertex.weight for name, vertex in self._vertices.items()}

    def path_to(self, destination: str) -> OptimalPath:
        """
        Walk predecessor edges back from ``destination`` to the source.

        Raises:
            InvalidVertexError: ``destination`` is unknown or unreached.
            NegativeCycleError: the predecessor chain loops, which only happens
                when relaxation ran over an improving cycle.
        """
        target = self.augmented_vertex(destination)
        if not target.reached:
            raise InvalidVertexError(
                f"Vertex '{destination}' is not reachable from '{self._source_vertex_name}'"
            )

        edges: List[Edge] = []
        visited = {destination}
        current = destination
        while current != self._source_vertex_name:
            edge = self._vertices[current].preceding_edge
            if edge is None:
                break
            edges.append(edge)
            current = edge.source
            if current in visited:
                raise NegativeCycleError(
                    f"Predecessor chain of '{destination}' loops at '{current}'", current
                )
            visited.add(current)

        edges.reverse()
        vertex_names = tuple([self._source_vertex_name] + [edge.destination for edge in edges])
        return OptimalPath(vertex_names, tuple(edges), target.weight)
