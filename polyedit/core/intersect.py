"""Bounded segment-segment intersection via parametric line equations."""
from __future__ import annotations

from typing import Optional

from .constants import EPS_PARALLEL
from .vectors import Point

__all__ = ['segment_intersection', 'intersect']


def segment_intersection(p1, p2, p3, p4) -> Optional[Point]:
    """Intersection point of segments ``p1-p2`` and ``p3-p4``, or ``None``.

    Solves ``p1 + ua*(p2-p1) == p3 + ub*(p4-p3)``. Parallel and near-parallel
    pairs (``|denom| < EPS_PARALLEL``) return ``None``, collinear overlaps
    included. Parameters outside [0, 1] mean the carrier lines cross outside a
    segment and also return ``None``; endpoints touching count as a hit.
    """
    x1, y1 = p1[0], p1[1]
    x2, y2 = p2[0], p2[1]
    x3, y3 = p3[0], p3[1]
    x4, y4 = p4[0], p4[1]
    denom = (y4 - y3) * (x2 - x1) - (x4 - x3) * (y2 - y1)
    if abs(denom) < EPS_PARALLEL:
        return None
    ua = ((x4 - x3) * (y1 - y3) - (y4 - y3) * (x1 - x3)) / denom
    ub = ((x2 - x1) * (y1 - y3) - (y2 - y1) * (x1 - x3)) / denom
    if ua < 0 or ua > 1 or ub < 0 or ub > 1:
        return None
    return Point(x1 + ua * (x2 - x1), y1 + ua * (y2 - y1))


def _endpoints(edge):
    if hasattr(edge, 'start'):
        return edge.start, edge.end
    start, end = edge
    return start, end


def intersect(edge1, edge2) -> Optional[Point]:
    """Intersection of two edges (EdgeRef or ``(start, end)`` pairs).

    Either operand may be ``None`` ("not picked yet"), which yields ``None``.
    """
    if edge1 is None or edge2 is None:
        return None
    a, b = _endpoints(edge1)
    c, d = _endpoints(edge2)
    return segment_intersection(a, b, c, d)
