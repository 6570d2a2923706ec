import math

import numpy as np
import pytest

from polyedit.core import transform as tf
from polyedit.core.polygon import Polygon
from polyedit.core.vectors import Point


def _random_polygon(rng, n=7):
    return Polygon(1, [tuple(v) for v in rng.uniform(-100, 100, size=(n, 2))], completed=True)


def _coords(poly):
    return np.asarray(poly.vertices, dtype=float)


class TestMatrices:

    def test_translation_matrix(self):
        m = tf.translation_matrix(3, -4)
        assert m.shape == (2, 3)
        assert np.allclose(m, [[1, 0, 3], [0, 1, -4]])

    def test_rotation_about_pivot_keeps_pivot_fixed(self):
        m = tf.rotation_matrix((2, 3), 37.0)
        fixed = m[:, :2] @ np.array([2.0, 3.0]) + m[:, 2]
        assert np.allclose(fixed, [2, 3])

    def test_scaling_about_pivot_keeps_pivot_fixed(self):
        m = tf.scaling_matrix((-1, 4), 2.5)
        fixed = m[:, :2] @ np.array([-1.0, 4.0]) + m[:, 2]
        assert np.allclose(fixed, [-1, 4])


class TestPolygonTransforms:

    def test_translate_round_trip(self):
        rng = np.random.default_rng(11)
        poly = _random_polygon(rng)
        before = _coords(poly)
        tf.translate(poly, 12.5, -7.25)
        assert np.allclose(_coords(poly), before + [12.5, -7.25])
        tf.translate(poly, -12.5, 7.25)
        assert np.allclose(_coords(poly), before)

    def test_rotate_quarter_turn_about_origin(self):
        poly = Polygon(1, [(1, 0), (0, 1)], completed=True)
        tf.rotate(poly, (0, 0), 90)
        assert np.allclose(_coords(poly), [[0, 1], [-1, 0]], atol=1e-12)

    def test_rotate_around_center_full_turn_is_identity(self):
        rng = np.random.default_rng(5)
        for _ in range(10):
            poly = _random_polygon(rng, int(rng.integers(1, 10)))
            before = _coords(poly)
            tf.rotate_around_center(poly, 360)
            assert np.allclose(_coords(poly), before, atol=1e-9)

    def test_rotate_around_center_keeps_centroid(self, square):
        tf.rotate_around_center(square, 45)
        c = tf.centroid(square)
        assert c == pytest.approx((5.0, 5.0))

    def test_scale_around_center_unit_factor_is_identity(self):
        rng = np.random.default_rng(8)
        poly = _random_polygon(rng)
        before = list(poly.vertices)
        tf.scale_around_center(poly, 1.0)
        assert poly.vertices == before

    def test_scale_about_pivot(self, square):
        tf.scale(square, (0, 0), 0.5)
        assert np.allclose(_coords(square), [[0, 0], [5, 0], [5, 5], [0, 5]])

    def test_scale_zero_collapses_to_pivot(self, square):
        tf.scale(square, (3, 4), 0.0)
        assert all(v == pytest.approx((3.0, 4.0)) for v in square.vertices)

    def test_scale_around_center_grows(self, square):
        tf.scale_around_center(square, 2.0)
        assert np.allclose(_coords(square), [[-5, -5], [15, -5], [15, 15], [-5, 15]])

    def test_in_place_keeps_list_identity_and_length(self, square):
        verts = square.vertices
        tf.rotate(square, (1, 1), 33)
        assert square.vertices is verts
        assert len(verts) == 4
        assert all(isinstance(v, Point) for v in verts)

    def test_transforms_accept_bare_vertex_list(self):
        verts = [Point(0, 0), Point(2, 0)]
        tf.translate(verts, 1, 1)
        assert verts == [(1, 1), (3, 1)]

    def test_empty_polygon(self):
        poly = Polygon(1)
        tf.rotate_around_center(poly, 90)
        tf.scale_around_center(poly, 3)
        assert poly.vertices == []


def test_centroid_square(square):
    assert tf.centroid(square) == (5.0, 5.0)


def test_centroid_empty_is_origin():
    assert tf.centroid(Polygon(1)) == (0.0, 0.0)


def test_centroid_is_vertex_mean_not_area_centroid():
    # clustered vertices pull the mean away from the area centroid
    poly = Polygon(1, [(0, 0), (1, 0), (2, 0), (10, 0), (10, 10), (0, 10)], completed=True)
    c = tf.centroid(poly)
    assert c.x == pytest.approx(23 / 6)
    assert c.y == pytest.approx(20 / 6)


def test_apply_transform_with_custom_matrix(square):
    shear = [[1, 1, 0], [0, 1, 0]]
    square.apply_transform(shear)
    assert square.vertices[2] == pytest.approx((20.0, 10.0))
    assert math.isclose(square.vertices[3].x, 10.0)
