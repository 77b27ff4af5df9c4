"""
Concrete directed graph implementation for graphopt.

Implements the Graph interface with per-vertex adjacency lists built once at
construction; the graph is immutable afterwards.
"""
from __future__ import annotations

from typing import Dict, FrozenSet, Iterable, List, Mapping, Sequence, Tuple

from .errors import InvalidEdgeError, InvalidVertexError
from .graph import Edge, Graph, is_valid_name
from .heap import BinomialTreePriorityQueue


class DirectedGraph(Graph):
    """
    Directed, weighted graph backed by vertex -> edges adjacency lists.
    """

    def __init__(self, vertex_names: Iterable[str], edges: Iterable[Edge] = ()) -> None:
        names: List[str] = []
        seen = set()
        for name in vertex_names:
            if not is_valid_name(name):
                raise InvalidVertexError(f"Vertex name must be a non-empty string, got {name!r}")
            if name in seen:
                raise InvalidVertexError(f"Duplicate vertex name '{name}'")
            seen.add(name)
            names.append(name)

        edge_map: Dict[str, Edge] = {}
        outgoing: Dict[str, List[Edge]] = {name: [] for name in names}
        incoming: Dict[str, List[Edge]] = {name: [] for name in names}

        for edge in edges:
            if not isinstance(edge, Edge):
                raise InvalidEdgeError(f"Expected an Edge, got {type(edge).__name__}")
            if edge.id in edge_map:
                raise InvalidEdgeError(f"Duplicate edge id '{edge.id}'")
            if edge.source not in seen or edge.destination not in seen:
                raise InvalidEdgeError(
                    f"Edge '{edge.id}' ({edge.source} -> {edge.destination}) "
                    "references an unknown vertex"
                )
            edge_map[edge.id] = edge
            outgoing[edge.source].append(edge)
            incoming[edge.destination].append(edge)

        self._vertex_names: FrozenSet[str] = frozenset(names)
        self._edge_map = edge_map
        self._outgoing: Dict[str, Tuple[Edge, ...]] = {n: tuple(e) for n, e in outgoing.items()}
        self._incoming: Dict[str, Tuple[Edge, ...]] = {n: tuple(e) for n, e in incoming.items()}

    @classmethod
    def from_edges(
        cls,
        triples: Iterable[Tuple[str, str, float]],
        vertex_names: Iterable[str] = (),
    ) -> "DirectedGraph":
        """
        Build a graph from ``(source, destination, weight)`` triples.

        Endpoints are added as vertices automatically, after any explicitly
        listed ``vertex_names`` (useful for isolated vertices). Edge ids are
        generated as ``e0``, ``e1``, ... in input order.
        """
        names: List[str] = list(dict.fromkeys(vertex_names))
        known = set(names)
        edges: List[Edge] = []

        for index, (source, destination, weight) in enumerate(triples):
            edge = Edge(f"e{index}", source, destination, weight)
            for name in (edge.source, edge.destination):
                if name not in known:
                    known.add(name)
                    names.append(name)
            edges.append(edge)

        return cls(names, edges)

    def _check_vertex(self, vertex_name: str) -> None:
        if vertex_name not in self._vertex_names:
            raise InvalidVertexError(f"Unknown vertex '{vertex_name}'")

    # --- Graph interface -----------------------------------------------------

    def vertex_name_set(self) -> FrozenSet[str]:
        return self._vertex_names

    def edge_map(self) -> Mapping[str, Edge]:
        return dict(self._edge_map)  # defensive copy

    def outgoing(self, vertex_name: str) -> Sequence[Edge]:
        self._check_vertex(vertex_name)
        return self._outgoing[vertex_name]

    def incoming(self, vertex_name: str) -> Sequence[Edge]:
        self._check_vertex(vertex_name)
        return self._incoming[vertex_name]

    def edge_priority_queue(self, ascending: bool) -> BinomialTreePriorityQueue:
        return BinomialTreePriorityQueue(
            ascending, ((edge.weight, edge.id) for edge in self._edge_map.values())
        )

    def vertex_edge_priority_queue(
        self, vertex_name: str, ascending: bool, outgoing: bool = True
    ) -> BinomialTreePriorityQueue:
        """Queue of (weight, edge id) over one vertex's outgoing or incoming edges."""
        edges = self.outgoing(vertex_name) if outgoing else self.incoming(vertex_name)
        return BinomialTreePriorityQueue(ascending, ((edge.weight, edge.id) for edge in edges))

    def __len__(self) -> int:
        return len(self._vertex_names)

    def __repr__(self) -> str:
        return f"DirectedGraph(vertices={len(self._vertex_names)}, edges={len(self._edge_map)})"
