"""
Path generator interface.

Keeps the relaxation strategies separate from the graph model and from the
per-vertex bookkeeping in VertexAugmentor.
"""
from __future__ import annotations

from abc import ABC, abstractmethod

from .augmentor import OptimalPath, VertexAugmentor
from .errors import InvalidParameterError
from .graph import Graph


class OptimalPathGenerator(ABC):
    """
    Interface for single-source optimal-path computation over a Graph.

    ``shortest_path=True`` minimises path weight; ``False`` maximises it.
    """

    def __init__(self, graph: Graph, shortest_path: bool = True) -> None:
        if not isinstance(graph, Graph):
            raise InvalidParameterError(f"Expected a Graph, got {type(graph).__name__}")

        self._graph = graph
        self._shortest_path = bool(shortest_path)

    @property
    def graph(self) -> Graph:
        return self._graph

    @property
    def shortest_path(self) -> bool:
        return self._shortest_path

    @abstractmethod
    def augment_vertexes(self, source_vertex_name: str) -> VertexAugmentor:
        """
        Compute optimal path weights from the source to every vertex.

        Returns:
            A VertexAugmentor holding, per vertex, the path weight and the
            predecessor edge from which paths are reconstructed.

        Raises:
            InvalidVertexError: source is empty or not in the graph.
        """
        raise NotImplementedError

    def optimal_path(self, source_vertex_name: str, destination_vertex_name: str) -> OptimalPath:
        """Optimal path from source to destination, read from a fresh augmentation."""
        return self.augment_vertexes(source_vertex_name).path_to(destination_vertex_name)
