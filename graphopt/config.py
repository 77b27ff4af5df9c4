"""
Settings for the relaxation-based path generators.

The defaults reproduce the classic fixed-round schedule: exactly one round
per vertex, no early exit and no negative-cycle check.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .errors import InvalidParameterError


@dataclass(frozen=True)
class RelaxationSettings:
    """
    Attributes:
        max_rounds:
            Upper bound on relaxation rounds. ``None`` uses the vertex count.
            A smaller cap trades exactness for a bounded running time.
        early_exit:
            Stop as soon as a full round performs no relaxation.
        detect_negative_cycles:
            Run one extra round after the main loop and raise
            :class:`~graphopt.errors.NegativeCycleError` if it still improves
            any vertex.
    """

    max_rounds: Optional[int] = None
    early_exit: bool = False
    detect_negative_cycles: bool = False

    def __post_init__(self) -> None:
        if self.max_rounds is not None:
            if isinstance(self.max_rounds, bool) or not isinstance(self.max_rounds, int):
                raise InvalidParameterError("max_rounds must be an int or None")
            if self.max_rounds < 1:
                raise InvalidParameterError("max_rounds must be at least 1")

    def round_count(self, vertex_count: int) -> int:
        """Number of rounds to run over a graph with ``vertex_count`` vertices."""
        if self.max_rounds is None:
            return vertex_count
        return min(self.max_rounds, vertex_count)


DEFAULT_SETTINGS = RelaxationSettings()
