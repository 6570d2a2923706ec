"""Point value type and small vector helpers.

Points are immutable ``(x, y)`` named tuples so they can be passed straight to
``numpy.asarray``. Arrays of points use the canonical ``(N, 2)`` float64 shape.
"""
from __future__ import annotations

import math
from typing import Iterable, List, NamedTuple, Sequence

import numpy as np

__all__ = [
    'Point', 'as_point', 'add', 'sub', 'mul', 'dot', 'cross', 'hypot', 'distance',
    'mean_point', 'points_to_array', 'points_from_array', 'ORIGIN'
]


class Point(NamedTuple):
    x: float
    y: float


ORIGIN = Point(0.0, 0.0)


def as_point(p) -> Point:
    """Coerce a Point, 2-sequence or 2-element array into a :class:`Point`."""
    if isinstance(p, Point):
        return p
    x, y = p
    return Point(float(x), float(y))


def add(a, b) -> Point:
    return Point(a[0] + b[0], a[1] + b[1])


def sub(a, b) -> Point:
    return Point(a[0] - b[0], a[1] - b[1])


def mul(a, s: float) -> Point:
    return Point(a[0] * s, a[1] * s)


def dot(a, b) -> float:
    return a[0] * b[0] + a[1] * b[1]


def cross(a, b) -> float:
    """z-component of the 2D cross product ``a × b``."""
    return a[0] * b[1] - a[1] * b[0]


def hypot(dx: float, dy: float) -> float:
    return math.hypot(dx, dy)


def distance(a, b) -> float:
    return hypot(a[0] - b[0], a[1] - b[1])


def mean_point(points: Sequence) -> Point:
    """Arithmetic mean of ``points``; the origin for an empty sequence."""
    n = len(points)
    if n == 0:
        return ORIGIN
    sx = 0.0
    sy = 0.0
    for p in points:
        sx += p[0]
        sy += p[1]
    return Point(sx / n, sy / n)


def points_to_array(points: Iterable) -> np.ndarray:
    arr = np.asarray(list(points), dtype=np.float64)
    if arr.size == 0:
        return np.empty((0, 2), dtype=np.float64)
    return arr.reshape(-1, 2)


def points_from_array(arr) -> List[Point]:
    a = np.asarray(arr, dtype=np.float64).reshape(-1, 2)
    return [Point(float(x), float(y)) for x, y in a]
