"""Affine transforms of vertex sets.

Every transform is a fresh 2x3 float64 matrix ``[[a, b, c], [d, e, f]]``
mapping ``(x, y) -> (a*x + b*y + c, d*x + e*y + f)``. Matrices are applied
immediately and never composed or cached.

The polygon-level functions accept either an object exposing a mutable
``vertices`` list (a :class:`~polyedit.core.polygon.Polygon`) or the list
itself. Vertex positions are rewritten in place; the list object and its
length are unchanged.
"""
from __future__ import annotations

import math
from typing import MutableSequence

import numpy as np

from .vectors import Point, as_point, mean_point, points_from_array, points_to_array

__all__ = [
    'translation_matrix', 'rotation_matrix', 'scaling_matrix', 'apply_transform',
    'centroid', 'translate', 'rotate', 'rotate_around_center', 'scale', 'scale_around_center'
]


def _vertex_list(target) -> MutableSequence:
    return target.vertices if hasattr(target, 'vertices') else target


def translation_matrix(dx: float, dy: float) -> np.ndarray:
    return np.array([[1.0, 0.0, dx],
                     [0.0, 1.0, dy]], dtype=np.float64)


def rotation_matrix(pivot, angle_degrees: float) -> np.ndarray:
    """Rotation by ``angle_degrees`` (counter-clockwise for a y-up frame) about ``pivot``."""
    cx, cy = as_point(pivot)
    rad = math.radians(angle_degrees)
    c = math.cos(rad)
    s = math.sin(rad)
    return np.array([[c, -s, cx - cx * c + cy * s],
                     [s, c, cy - cx * s - cy * c]], dtype=np.float64)


def scaling_matrix(pivot, factor: float) -> np.ndarray:
    """Uniform scaling by ``factor`` about ``pivot``. No sign or zero check."""
    cx, cy = as_point(pivot)
    return np.array([[factor, 0.0, cx - cx * factor],
                     [0.0, factor, cy - cy * factor]], dtype=np.float64)


def apply_transform(vertices: MutableSequence, matrix) -> None:
    """Apply a 2x3 affine ``matrix`` to ``vertices`` in place."""
    if len(vertices) == 0:
        return
    m = np.asarray(matrix, dtype=np.float64)
    pts = points_to_array(vertices)
    out = pts @ m[:, :2].T + m[:, 2]
    vertices[:] = points_from_array(out)


def centroid(target) -> Point:
    """Vertex mean of a polygon (not the area-weighted centroid); ``(0, 0)`` when empty."""
    return mean_point(_vertex_list(target))


def translate(target, dx: float, dy: float) -> None:
    apply_transform(_vertex_list(target), translation_matrix(dx, dy))


def rotate(target, pivot, angle_degrees: float) -> None:
    apply_transform(_vertex_list(target), rotation_matrix(pivot, angle_degrees))


def rotate_around_center(target, angle_degrees: float) -> None:
    verts = _vertex_list(target)
    rotate(verts, mean_point(verts), angle_degrees)


def scale(target, pivot, factor: float) -> None:
    apply_transform(_vertex_list(target), scaling_matrix(pivot, factor))


def scale_around_center(target, factor: float) -> None:
    verts = _vertex_list(target)
    scale(verts, mean_point(verts), factor)
