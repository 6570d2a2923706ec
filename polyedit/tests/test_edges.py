import math

import numpy as np
import pytest

from polyedit.core.edges import EdgeRef, check_edge_for_point, find_nearest_edge, iter_edges
from polyedit.core.polygon import Polygon


@pytest.fixture
def polygons():
    a = Polygon(1, [(0, 0), (10, 0), (10, 10), (0, 10)], completed=True)
    b = Polygon(2, [(20, 0), (30, 0), (25, 8)], completed=True)
    return [a, b]


def test_iter_edges_wraps_around(square):
    edges = list(iter_edges(square))
    assert len(edges) == 4
    assert edges[-1] == (3, (0, 10), (0, 0))


def test_iter_edges_incomplete_polygon_has_none():
    assert list(iter_edges(Polygon(1, [(0, 0), (1, 0), (1, 1)]))) == []
    assert list(iter_edges(Polygon(2, [(0, 0)], completed=True))) == []


def test_two_vertex_polygon_is_a_doubled_segment():
    seg = Polygon(1, [(0, 0), (10, 0)], completed=True)
    assert seg.edge_count == 2
    assert list(iter_edges(seg)) == [(0, (0, 0), (10, 0)), (1, (10, 0), (0, 0))]
    # both edges are equidistant; the first one wins
    assert find_nearest_edge((5, 1), [seg], 10) == EdgeRef(1, 0, (0, 0), (10, 0))
    assert check_edge_for_point((5, 1), [seg]) == EdgeRef(1, 0, (0, 0), (10, 0))
    assert find_nearest_edge((5, 20), [seg], 10) is None


def test_find_nearest_edge_picks_closest(polygons):
    edge = find_nearest_edge((5, 1), polygons, 10)
    assert edge == EdgeRef(1, 0, (0, 0), (10, 0))
    edge = find_nearest_edge((19, 1), polygons, 10)
    assert edge.polygon_id == 2
    assert edge.edge_index == 2  # closing edge (25,8)->(20,0)


def test_find_nearest_edge_respects_max_distance(polygons):
    assert find_nearest_edge((5, 50), polygons, 10) is None
    # inclusive cutoff
    assert find_nearest_edge((5, 13), polygons, 3) is not None


def test_find_nearest_edge_zero_tolerance_off_edge(polygons):
    assert find_nearest_edge((5, 5), polygons, 0) is None
    on_edge = find_nearest_edge((5, 0), polygons, 0)
    assert on_edge is not None and on_edge.edge_index == 0


def test_infinite_tolerance_matches_check_edge_for_point(polygons):
    rng = np.random.default_rng(3)
    for _ in range(200):
        p = tuple(rng.uniform(-20, 50, size=2))
        assert find_nearest_edge(p, polygons, math.inf) == check_edge_for_point(p, polygons)


def test_tie_goes_to_first_edge_in_iteration_order():
    a = Polygon(1, [(0, 0), (10, 0), (10, 10), (0, 10)], completed=True)
    b = Polygon(2, [(0, 0), (10, 0), (10, 10), (0, 10)], completed=True)
    # (5, 5) is equidistant from all four edges of both squares
    edge = check_edge_for_point((5, 5), [a, b])
    assert (edge.polygon_id, edge.edge_index) == (1, 0)
    edge = find_nearest_edge((5, 5), [a, b], 5)
    assert (edge.polygon_id, edge.edge_index) == (1, 0)


def test_check_edge_ignores_incomplete_and_tiny_polygons():
    polys = [Polygon(1, [(0, 0), (10, 0), (10, 10)]), Polygon(2, [(3, 3)], completed=True)]
    assert check_edge_for_point((0, 0), polys) is None
    assert check_edge_for_point((0, 0), []) is None


def test_degenerate_edge_measures_to_vertex():
    # repeated vertex produces a zero-length edge
    poly = Polygon(1, [(0, 0), (0, 0), (10, 0), (10, 10)], completed=True)
    edge = check_edge_for_point((-1, -1), [poly])
    assert edge is not None
    assert edge.start == (0, 0)


def test_adhoc_edge_ref():
    e = EdgeRef.adhoc((0, 0), (1, 1))
    assert e.is_adhoc
    assert e.as_segment() == ((0.0, 0.0), (1.0, 1.0))
    assert not EdgeRef(1, 0, (0, 0), (1, 1)).is_adhoc
