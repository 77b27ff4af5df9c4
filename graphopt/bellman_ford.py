"""
Bellman-Ford path generator.

Operates over the whole edge set in rounds and returns the final
VertexAugmentor.
"""
from __future__ import annotations

from typing import Mapping, Optional

import structlog

from .algorithms import OptimalPathGenerator
from .augmentor import VertexAugmentor
from .config import DEFAULT_SETTINGS, RelaxationSettings
from .errors import InvalidParameterError, NegativeCycleError
from .graph import Edge, Graph
from .heap import BinomialTreePriorityQueue

logger = structlog.get_logger()


class BellmanFordGenerator(OptimalPathGenerator):
    """
    Round-based Bellman-Ford relaxation.

    Each round melds every vertex's outgoing-edge queue into one working
    queue and drains it in weight order (ascending for shortest paths,
    descending for longest), relaxing each edge through the augmentor. By
    default exactly one round per vertex is run, with no early exit and no
    negative-cycle check; see :class:`~graphopt.config.RelaxationSettings`.

    Complexity:
        O(V * E log E) with the default schedule.
    """

    def __init__(
        self,
        graph: Graph,
        shortest_path: bool = True,
        settings: Optional[RelaxationSettings] = None,
    ) -> None:
        super().__init__(graph, shortest_path)
        if settings is None:
            settings = DEFAULT_SETTINGS
        if not isinstance(settings, RelaxationSettings):
            raise InvalidParameterError(
                f"Expected RelaxationSettings, got {type(settings).__name__}"
            )
        self._settings = settings

    @property
    def settings(self) -> RelaxationSettings:
        return self._settings

    def _relaxation_round(
        self, augmentor: VertexAugmentor, edge_map: Mapping[str, Edge]
    ) -> int:
        """Run one full pass over the edges; return how many relaxed a vertex."""
        working_queue = BinomialTreePriorityQueue(self.shortest_path)
        for vertex_name in sorted(self.graph.vertex_name_set()):
            working_queue.meld(
                self.graph.vertex_edge_priority_queue(vertex_name, self.shortest_path)
            )

        relaxed = 0
        while not working_queue.is_empty():
            edge = edge_map[working_queue.extract_extremum().item]
            if augmentor.update_augmented_vertex(edge):
                relaxed += 1
        return relaxed

    def augment_vertexes(self, source_vertex_name: str) -> VertexAugmentor:
        vertex_names = self.graph.vertex_name_set()
        augmentor = VertexAugmentor(source_vertex_name, vertex_names, self.shortest_path)

        vertex_count = len(vertex_names)
        edge_map = self.graph.edge_map()
        rounds = self._settings.round_count(vertex_count)

        if self._settings.detect_negative_cycles and rounds < vertex_count - 1:
            raise InvalidParameterError(
                f"Negative-cycle detection needs at least {vertex_count - 1} rounds, "
                f"max_rounds={self._settings.max_rounds}"
            )

        log = logger.bind(source=source_vertex_name, shortest_path=self.shortest_path)
        log.info(
            "bellman_ford.start",
            vertex_count=vertex_count,
            edge_count=len(edge_map),
            rounds=rounds,
        )

        rounds_run = 0
        for round_index in range(rounds):
            relaxed = self._relaxation_round(augmentor, edge_map)
            rounds_run += 1
            log.debug("bellman_ford.round", round=round_index, relaxed=relaxed)

            if relaxed == 0 and self._settings.early_exit:
                log.info("bellman_ford.converged", rounds_run=rounds_run)
                break

        if self._settings.detect_negative_cycles:
            self._check_negative_cycle(augmentor, edge_map, log)

        log.info("bellman_ford.finish", rounds_run=rounds_run)
        return augmentor

    def _check_negative_cycle(
        self,
        augmentor: VertexAugmentor,
        edge_map: Mapping[str, Edge],
        log: structlog.typing.FilteringBoundLogger,
    ) -> None:
        # Any further improvement after the bound means an improving cycle.
        for edge in edge_map.values():
            if augmentor.update_augmented_vertex(edge):
                log.warning(
                    "bellman_ford.negative_cycle",
                    edge=edge.id,
                    vertex=edge.destination,
                )
                raise NegativeCycleError(
                    f"Edge '{edge.id}' still relaxes '{edge.destination}' after "
                    "the Bellman-Ford bound; an improving cycle is reachable from "
                    f"'{augmentor.source_vertex_name}'",
                    edge.destination,
                )
