"""
Unit tests for BellmanFordGenerator.
"""

import math
import random

import pytest
from structlog.testing import capture_logs

from graphopt.bellman_ford import BellmanFordGenerator
from graphopt.config import RelaxationSettings
from graphopt.directed_graph import DirectedGraph
from graphopt.errors import InvalidParameterError, InvalidVertexError, NegativeCycleError


def reference_bellman_ford(graph, source):
    """Textbook V-1 pass relaxation in arbitrary edge order."""
    dist = {name: math.inf for name in graph.vertex_name_set()}
    dist[source] = 0.0
    for _ in range(len(dist) - 1):
        for edge in graph.edge_map().values():
            if dist[edge.source] + edge.weight < dist[edge.destination]:
                dist[edge.destination] = dist[edge.source] + edge.weight
    return dist


def test_concrete_shortest_paths():
    # A -> B (1), B -> C (2), A -> C (5), C -> D (1)
    g = DirectedGraph.from_edges(
        [("A", "B", 1.0), ("B", "C", 2.0), ("A", "C", 5.0), ("C", "D", 1.0)]
    )

    aug = BellmanFordGenerator(g).augment_vertexes("A")

    assert aug.weights() == {"A": 0.0, "B": 1.0, "C": 3.0, "D": 4.0}
    # Predecessor chain D <- C <- B <- A
    assert aug.path_to("D").vertex_names == ("A", "B", "C", "D")


def test_longest_paths_on_dag():
    g = DirectedGraph.from_edges(
        [("A", "B", 1.0), ("B", "C", 2.0), ("A", "C", 5.0), ("C", "D", 1.0)]
    )

    aug = BellmanFordGenerator(g, shortest_path=False).augment_vertexes("A")

    assert aug.weights() == {"A": 0.0, "B": 1.0, "C": 5.0, "D": 6.0}
    assert aug.path_to("D").vertex_names == ("A", "C", "D")


def test_negative_weights_without_cycle():
    g = DirectedGraph.from_edges(
        [("A", "B", 4.0), ("A", "C", 2.0), ("C", "B", -3.0), ("B", "D", 1.0)]
    )

    aug = BellmanFordGenerator(g).augment_vertexes("A")

    assert aug.weight("B") == -1.0
    assert aug.weight("D") == 0.0
    assert aug.path_to("D").vertex_names == ("A", "C", "B", "D")


def test_unreachable_vertex_stays_infinite():
    g = DirectedGraph.from_edges([("A", "B", 2.0)], vertex_names=["C"])

    aug = BellmanFordGenerator(g).augment_vertexes("A")

    assert aug.weight("B") == 2.0
    assert aug.weight("C") == math.inf
    assert aug.preceding_edge("C") is None


def test_optimal_path_helper():
    g = DirectedGraph.from_edges([("A", "B", 1.0), ("B", "C", 1.0), ("A", "C", 3.0)])

    path = BellmanFordGenerator(g).optimal_path("A", "C")

    assert path.vertex_names == ("A", "B", "C")
    assert path.weight == 2.0


@pytest.mark.parametrize("source", [None, "", "missing"])
def test_invalid_source_raises(source):
    g = DirectedGraph.from_edges([("A", "B", 1.0)])

    with pytest.raises(InvalidVertexError):
        BellmanFordGenerator(g).augment_vertexes(source)


def test_generator_requires_a_graph():
    with pytest.raises(InvalidParameterError):
        BellmanFordGenerator({"A": {"B": 1.0}})
    with pytest.raises(InvalidParameterError):
        BellmanFordGenerator(DirectedGraph(["A"]), settings={"max_rounds": 1})


def test_random_dags_with_negative_weights_match_reference():
    """Acyclic graphs cannot hold negative cycles, so any weights are fair game."""
    rng = random.Random(3)

    for _ in range(25):
        n = rng.randint(2, 9)
        names = [f"v{i}" for i in range(n)]
        triples = [
            (names[i], names[j], float(rng.randint(-5, 10)))
            for i in range(n)
            for j in range(i + 1, n)
            if rng.random() < 0.4
        ]
        g = DirectedGraph.from_edges(triples, vertex_names=names)

        aug = BellmanFordGenerator(g).augment_vertexes("v0")

        assert aug.weights() == reference_bellman_ford(g, "v0")


def negative_cycle_graph():
    # B -> C -> B has total weight -1
    return DirectedGraph.from_edges([("A", "B", 1.0), ("B", "C", -2.0), ("C", "B", 1.0)])


def test_negative_cycle_not_detected_by_default():
    aug = BellmanFordGenerator(negative_cycle_graph()).augment_vertexes("A")

    # Three rounds ran over the cycle; distances are returned as computed
    assert aug.weight("B") == -1.0
    assert aug.weight("C") == -2.0
    with pytest.raises(NegativeCycleError):
        aug.path_to("B")


def test_negative_cycle_detection_raises():
    settings = RelaxationSettings(detect_negative_cycles=True)
    gen = BellmanFordGenerator(negative_cycle_graph(), settings=settings)

    with pytest.raises(NegativeCycleError) as excinfo:
        gen.augment_vertexes("A")
    assert excinfo.value.vertex_name in {"B", "C"}


def test_negative_cycle_detection_passes_clean_graph():
    g = DirectedGraph.from_edges([("A", "B", 4.0), ("A", "C", 2.0), ("C", "B", -3.0)])
    settings = RelaxationSettings(detect_negative_cycles=True, early_exit=True)

    aug = BellmanFordGenerator(g, settings=settings).augment_vertexes("A")

    assert aug.weight("B") == -1.0


def test_negative_cycle_detection_unreachable_cycle_ignored():
    g = DirectedGraph.from_edges(
        [("A", "B", 1.0), ("C", "D", -2.0), ("D", "C", 1.0)]
    )
    settings = RelaxationSettings(detect_negative_cycles=True)

    aug = BellmanFordGenerator(g, settings=settings).augment_vertexes("A")

    assert aug.weight("C") == math.inf


def test_detection_needs_full_round_budget():
    g = DirectedGraph.from_edges([("A", "B", 1.0), ("B", "C", 1.0), ("C", "D", 1.0)])
    settings = RelaxationSettings(max_rounds=1, detect_negative_cycles=True)

    with pytest.raises(InvalidParameterError):
        BellmanFordGenerator(g, settings=settings).augment_vertexes("A")


def test_round_cap_limits_relaxation():
    # Weights grow towards the source, so each round reaches one more hop
    g = DirectedGraph.from_edges([("C", "D", 1.0), ("B", "C", 2.0), ("A", "B", 3.0)])
    settings = RelaxationSettings(max_rounds=1)

    aug = BellmanFordGenerator(g, settings=settings).augment_vertexes("A")

    # Ascending order drains C->D, B->C, A->B, so only B is reached in one round
    assert aug.weight("B") == 3.0
    assert aug.weight("C") == math.inf


def test_early_exit_stops_after_quiet_round():
    g = DirectedGraph.from_edges([("A", "B", 1.0), ("B", "C", 2.0)])

    with capture_logs() as logs:
        BellmanFordGenerator(g, settings=RelaxationSettings(early_exit=True)).augment_vertexes("A")
    finish = [entry for entry in logs if entry["event"] == "bellman_ford.finish"]
    assert finish[0]["rounds_run"] == 2

    with capture_logs() as logs:
        BellmanFordGenerator(g).augment_vertexes("A")
    finish = [entry for entry in logs if entry["event"] == "bellman_ford.finish"]
    assert finish[0]["rounds_run"] == 3


def test_relaxation_settings_validation():
    assert RelaxationSettings().round_count(5) == 5
    assert RelaxationSettings(max_rounds=2).round_count(5) == 2
    assert RelaxationSettings(max_rounds=10).round_count(5) == 5

    with pytest.raises(InvalidParameterError):
        RelaxationSettings(max_rounds=0)
    with pytest.raises(InvalidParameterError):
        RelaxationSettings(max_rounds=2.5)
    with pytest.raises(InvalidParameterError):
        RelaxationSettings(max_rounds=True)
