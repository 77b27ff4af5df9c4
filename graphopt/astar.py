"""
Vertex-context weighting for the A* heuristic family.

Implements the Reese (1999) epsilon-admissible weight: the heuristic
estimate is scaled by a small lambda while the search is catching up (the
parent looks no worse than the most recently expanded vertex) and by a big
lambda while it is falling behind. With both lambdas at 1 this reduces to
plain A*.
"""
from __future__ import annotations

from dataclasses import dataclass
import math
import numbers
from typing import Any, Callable, Protocol, runtime_checkable

from .errors import InvalidParameterError


@runtime_checkable
class VertexFunction(Protocol):
    """Scalar function over vertices, e.g. a cost-to-go estimate."""

    def evaluate(self, vertex: Any) -> float:
        ...


@dataclass(frozen=True)
class CallableVertexFunction:
    """Adapts a plain ``vertex -> float`` callable to VertexFunction."""

    function: Callable[[Any], float]

    def evaluate(self, vertex: Any) -> float:
        return self.function(vertex)


@dataclass(frozen=True)
class VertexContext:
    """The parent of the vertex under evaluation and the last vertex expanded."""

    parent: Any
    most_recently_expanded: Any

    def __post_init__(self) -> None:
        if self.parent is None or self.most_recently_expanded is None:
            raise InvalidParameterError("VertexContext needs both a parent and a most recently expanded vertex")


def _is_finite_number(value: object) -> bool:
    return (
        not isinstance(value, bool)
        and isinstance(value, numbers.Real)
        and math.isfinite(value)
    )


class VertexContextWeightHeuristic:
    """
    Epsilon-admissible weight selected from the vertex context.

    Args:
        g_heuristic: VertexFunction giving the cost estimate per vertex.
        small_lambda: weight used when the parent's estimate is no larger
            than the most recently expanded vertex's.
        big_lambda: weight used otherwise; must be ``>= small_lambda``.
    """

    def __init__(self, g_heuristic: VertexFunction, small_lambda: float, big_lambda: float) -> None:
        if not isinstance(g_heuristic, VertexFunction):
            raise InvalidParameterError("g_heuristic must provide evaluate(vertex)")
        if not _is_finite_number(small_lambda) or not _is_finite_number(big_lambda):
            raise InvalidParameterError(
                f"Lambdas must be finite numbers, got {small_lambda!r} and {big_lambda!r}"
            )
        if small_lambda > big_lambda:
            raise InvalidParameterError(
                f"small_lambda ({small_lambda}) must not exceed big_lambda ({big_lambda})"
            )

        self._g_heuristic = g_heuristic
        self._small_lambda = float(small_lambda)
        self._big_lambda = float(big_lambda)

    @property
    def g_heuristic(self) -> VertexFunction:
        return self._g_heuristic

    @property
    def small_lambda(self) -> float:
        return self._small_lambda

    @property
    def big_lambda(self) -> float:
        return self._big_lambda

    def evaluate(self, vertex_context: VertexContext) -> float:
        """Return ``small_lambda`` if g(parent) <= g(most recently expanded), else ``big_lambda``."""
        if not isinstance(vertex_context, VertexContext):
            raise InvalidParameterError("evaluate() expects a VertexContext")

        parent_estimate = self._g_heuristic.evaluate(vertex_context.parent)
        expanded_estimate = self._g_heuristic.evaluate(vertex_context.most_recently_expanded)
        if math.isnan(parent_estimate) or math.isnan(expanded_estimate):
            raise InvalidParameterError("g_heuristic returned NaN")

        return self._small_lambda if parent_estimate <= expanded_estimate else self._big_lambda
