"""Point classification: containment, side-of-edge and point/segment distance."""
from __future__ import annotations

from enum import Enum
from typing import Iterable, List

import numpy as np

from .constants import MIN_CLOSED_VERTICES
from .vectors import add, as_point, cross, distance, dot, mul, sub

__all__ = [
    'Side', 'contains_point', 'classify_point_to_edge', 'point_to_segment_distance',
    'segment_distances', 'polygons_containing'
]


class Side(Enum):
    LEFT = 'left'
    RIGHT = 'right'
    ON = 'on'


def _vertices(polygon):
    return polygon.vertices if hasattr(polygon, 'vertices') else polygon


def contains_point(polygon, x, y=None) -> bool:
    """Even-odd (ray casting) containment test.

    ``polygon`` is a Polygon or a sequence of points; the query is either a
    point or ``x, y``. Polygons with fewer than three vertices contain
    nothing. The polygon is always treated as closed (last vertex back to the
    first). Points exactly on the boundary get whatever parity the crossing
    count gives them; no attempt is made to make that consistent.
    """
    if y is None:
        x, y = as_point(x)
    verts = _vertices(polygon)
    n = len(verts)
    if n < MIN_CLOSED_VERTICES:
        return False
    inside = False
    j = n - 1
    for i in range(n):
        xi, yi = verts[i]
        xj, yj = verts[j]
        if ((yi > y) != (yj > y)) and (x < (xj - xi) * (y - yi) / (yj - yi) + xi):
            inside = not inside
        j = i
    return inside


def classify_point_to_edge(point, edge_start, edge_end) -> Side:
    """Side of ``point`` relative to the directed line ``edge_start -> edge_end``.

    Uses the sign of the cross product with an exact zero test: collinear
    points classify as ``Side.ON`` only when the product is exactly 0.0.
    """
    c = cross(sub(edge_end, edge_start), sub(point, edge_start))
    if c > 0:
        return Side.LEFT
    if c < 0:
        return Side.RIGHT
    return Side.ON


def point_to_segment_distance(p, a, b) -> float:
    """Euclidean distance from ``p`` to the closed segment ``a-b``.

    The projection parameter is clamped to [0, 1]. A degenerate segment
    (``a == b``) gives the distance to ``a``.
    """
    v = sub(b, a)
    l2 = dot(v, v)
    if l2 == 0:
        return distance(p, a)
    t = dot(sub(p, a), v) / l2
    t = max(0.0, min(1.0, t))
    return distance(p, add(a, mul(v, t)))


def segment_distances(p, starts, ends) -> np.ndarray:
    """Vectorized distance from one point to many segments.

    starts, ends : (M,2) array-like
    Returns (M,) float64 array; degenerate segments measure to their start.
    """
    s = np.asarray(starts, dtype=np.float64).reshape(-1, 2)
    e = np.asarray(ends, dtype=np.float64).reshape(-1, 2)
    if s.shape[0] == 0:
        return np.empty((0,), dtype=np.float64)
    q = np.asarray(p, dtype=np.float64)
    d = e - s
    l2 = np.einsum('ij,ij->i', d, d)
    num = np.einsum('ij,ij->i', q - s, d)
    t = np.divide(num, l2, out=np.zeros_like(num), where=l2 != 0)
    t = np.clip(t, 0.0, 1.0)
    proj = s + t[:, None] * d
    return np.hypot(q[0] - proj[:, 0], q[1] - proj[:, 1])


def polygons_containing(point, polygons: Iterable) -> List:
    """Completed polygons (three or more vertices) containing ``point``, in input order."""
    p = as_point(point)
    return [poly for poly in polygons
            if poly.completed and len(poly.vertices) >= MIN_CLOSED_VERTICES
            and contains_point(poly, p.x, p.y)]
