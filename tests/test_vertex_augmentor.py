"""
Unit tests for VertexAugmentor relaxation and path reconstruction.
"""

import math

import pytest

from graphopt.augmentor import VertexAugmentor
from graphopt.errors import InvalidEdgeError, InvalidVertexError
from graphopt.graph import Edge

VERTICES = frozenset({"A", "B", "C"})


def test_initial_state():
    aug = VertexAugmentor("A", VERTICES)

    assert aug.weight("A") == 0.0
    assert aug.weight("B") == math.inf
    assert aug.preceding_edge("A") is None
    assert not aug.augmented_vertex("C").reached


def test_longest_path_mode_starts_at_negative_infinity():
    aug = VertexAugmentor("A", VERTICES, shortest_path=False)

    assert aug.weight("B") == -math.inf
    assert aug.update_augmented_vertex(Edge("e0", "A", "B", 2.0))
    # A heavier edge improves in longest-path mode
    assert aug.update_augmented_vertex(Edge("e1", "A", "B", 3.0))
    assert not aug.update_augmented_vertex(Edge("e2", "A", "B", 1.0))
    assert aug.weight("B") == 3.0


def test_relaxation_improves_and_records_predecessor():
    aug = VertexAugmentor("A", VERTICES)
    ab = Edge("e0", "A", "B", 4.0)
    ab_cheaper = Edge("e1", "A", "B", 1.5)

    assert aug.update_augmented_vertex(ab)
    assert aug.weight("B") == 4.0
    assert aug.update_augmented_vertex(ab_cheaper)
    assert aug.weight("B") == 1.5
    assert aug.preceding_edge("B") == ab_cheaper


def test_tie_keeps_earlier_predecessor():
    aug = VertexAugmentor("A", VERTICES)
    first = Edge("e0", "A", "B", 2.0)
    second = Edge("e1", "A", "B", 2.0)

    assert aug.update_augmented_vertex(first)
    assert not aug.update_augmented_vertex(second)
    assert aug.preceding_edge("B") == first


def test_edge_from_unreached_vertex_is_a_no_op():
    aug = VertexAugmentor("A", VERTICES)

    assert not aug.update_augmented_vertex(Edge("e0", "B", "C", -10.0))
    assert aug.weight("C") == math.inf


def test_unknown_endpoints_raise_without_mutation():
    aug = VertexAugmentor("A", VERTICES)
    before = aug.weights()

    with pytest.raises(InvalidEdgeError):
        aug.update_augmented_vertex(Edge("e0", "A", "Z", 1.0))
    with pytest.raises(InvalidEdgeError):
        aug.update_augmented_vertex(("A", "B", 1.0))

    assert aug.weights() == before


@pytest.mark.parametrize("source", [None, "", "Z"])
def test_invalid_source_raises(source):
    with pytest.raises(InvalidVertexError):
        VertexAugmentor(source, VERTICES)


def test_path_to_walks_predecessors():
    aug = VertexAugmentor("A", VERTICES)
    ab = Edge("e0", "A", "B", 1.0)
    bc = Edge("e1", "B", "C", 2.0)
    aug.update_augmented_vertex(ab)
    aug.update_augmented_vertex(bc)

    path = aug.path_to("C")
    assert path.vertex_names == ("A", "B", "C")
    assert path.edges == (ab, bc)
    assert path.weight == 3.0
    assert path.source == "A" and path.destination == "C"

    trivial = aug.path_to("A")
    assert trivial.vertex_names == ("A",)
    assert trivial.edges == ()
    assert trivial.weight == 0.0


def test_path_to_unreached_vertex_raises():
    aug = VertexAugmentor("A", VERTICES)

    with pytest.raises(InvalidVertexError):
        aug.path_to("B")
    with pytest.raises(InvalidVertexError):
        aug.path_to("Z")


def test_augmented_vertex_map_returns_copy():
    aug = VertexAugmentor("A", VERTICES)

    m = aug.augmented_vertex_map()
    m.clear()

    assert set(aug.augmented_vertex_map()) == set(VERTICES)
