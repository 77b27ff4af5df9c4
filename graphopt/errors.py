"""
Exception hierarchy for the graph optimisation core.

Every error is raised at the call boundary that detected it; no operation
leaves partially applied state behind when it raises.
"""


class GraphOptError(Exception):
    """Base class for all graphopt errors."""


class EmptyQueueError(GraphOptError, LookupError):
    """Extremum requested from a queue that holds no entries."""


class ModeMismatchError(GraphOptError, ValueError):
    """Two queues with different ordering modes were melded."""


class QueueConsumedError(GraphOptError, RuntimeError):
    """A queue was used after its contents were melded into another queue."""


class InvalidEdgeError(GraphOptError, ValueError):
    """Edge is malformed or references vertices outside the tracked set."""


class InvalidVertexError(GraphOptError, ValueError):
    """Vertex name is missing, empty, or unknown to the graph."""


class InvalidParameterError(GraphOptError, ValueError):
    """Constructor or settings parameter is out of its valid domain."""


class InvalidRangeError(GraphOptError, IndexError):
    """Index range or rank lies outside the array being selected over."""


class NegativeCycleError(GraphOptError):
    """
    A relaxation round after the Bellman-Ford bound still improved a vertex.

    In shortest-path mode this means a negative-weight cycle is reachable
    from the source; in longest-path mode, a positive-weight one.
    """

    def __init__(self, message: str, vertex_name: str) -> None:
        super().__init__(message)
        self.vertex_name = vertex_name
