"""Graph optimisation core: mergeable queues, path generators, A* weighting and selection."""

from .algorithms import OptimalPathGenerator
from .astar import CallableVertexFunction, VertexContext, VertexContextWeightHeuristic, VertexFunction
from .augmentor import AugmentedVertex, OptimalPath, VertexAugmentor
from .bellman_ford import BellmanFordGenerator
from .config import RelaxationSettings
from .dijkstra import DijkstraGenerator
from .directed_graph import DirectedGraph
from .errors import (
    EmptyQueueError,
    GraphOptError,
    InvalidEdgeError,
    InvalidParameterError,
    InvalidRangeError,
    InvalidVertexError,
    ModeMismatchError,
    NegativeCycleError,
    QueueConsumedError,
)
from .graph import Edge, Graph
from .heap import BinomialTreePriorityQueue, PriorityQueue, QueueEntry
from .selection import QuickSelect

__all__ = [
    "OptimalPathGenerator",
    "BellmanFordGenerator",
    "DijkstraGenerator",
    "RelaxationSettings",
    "AugmentedVertex",
    "OptimalPath",
    "VertexAugmentor",
    "Graph",
    "DirectedGraph",
    "Edge",
    "PriorityQueue",
    "BinomialTreePriorityQueue",
    "QueueEntry",
    "VertexFunction",
    "CallableVertexFunction",
    "VertexContext",
    "VertexContextWeightHeuristic",
    "QuickSelect",
    "GraphOptError",
    "EmptyQueueError",
    "ModeMismatchError",
    "QueueConsumedError",
    "InvalidEdgeError",
    "InvalidVertexError",
    "InvalidParameterError",
    "InvalidRangeError",
    "NegativeCycleError",
]
