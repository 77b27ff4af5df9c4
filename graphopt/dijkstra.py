"""
Heap-based Dijkstra path generator.

Uses Python's heapq for the frontier and records results in a
VertexAugmentor, so callers read it exactly like a Bellman-Ford result.
"""
from __future__ import annotations

import heapq
from typing import List, Tuple

import structlog

from .algorithms import OptimalPathGenerator
from .augmentor import VertexAugmentor
from .errors import InvalidEdgeError, InvalidParameterError
from .graph import Graph

logger = structlog.get_logger()


class DijkstraGenerator(OptimalPathGenerator):
    """
    Single-source Dijkstra using a binary heap.

    Only defined for shortest paths over non-negative edge weights; both are
    checked at construction.

    Complexity:
        O(E log V) over the vertices reachable from the source.
    """

    def __init__(self, graph: Graph, shortest_path: bool = True) -> None:
        super().__init__(graph, shortest_path)
        if not self.shortest_path:
            raise InvalidParameterError("DijkstraGenerator only supports shortest paths")

        for edge in graph.edge_map().values():
            if edge.weight < 0.0:
                raise InvalidEdgeError(
                    f"Edge '{edge.id}' has negative weight {edge.weight}; "
                    "use BellmanFordGenerator instead"
                )

    def augment_vertexes(self, source_vertex_name: str) -> VertexAugmentor:
        augmentor = VertexAugmentor(source_vertex_name, self.graph.vertex_name_set(), True)
        pq: List[Tuple[float, str]] = [(0.0, source_vertex_name)]
        settled = 0

        while pq:
            d_u, u = heapq.heappop(pq)

            # Skip outdated entries
            if d_u != augmentor.weight(u):
                continue
            settled += 1

            for edge in self.graph.outgoing(u):
                if augmentor.update_augmented_vertex(edge):
                    heapq.heappush(pq, (augmentor.weight(edge.destination), edge.destination))

        logger.debug("dijkstra.finish", source=source_vertex_name, settled=settled)
        return augmentor
