"""Edge references and nearest-edge queries over polygon collections."""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable, Iterator, Optional, Tuple

import numpy as np

from .classify import segment_distances
from .constants import MIN_EDGE_VERTICES
from .logging_utils import get_logger
from .vectors import Point, as_point

logger = get_logger('polyedit.edges')

__all__ = ['EdgeRef', 'iter_edges', 'find_nearest_edge', 'check_edge_for_point']


@dataclass(frozen=True)
class EdgeRef:
    """A located segment.

    Bound to edge ``edge_index`` of the polygon with id ``polygon_id``, or
    ad-hoc (both ``None``) for a free-floating probe segment.
    """
    polygon_id: Optional[int]
    edge_index: Optional[int]
    start: Point
    end: Point

    @property
    def is_adhoc(self) -> bool:
        return self.polygon_id is None and self.edge_index is None

    @classmethod
    def adhoc(cls, start, end) -> 'EdgeRef':
        return cls(None, None, as_point(start), as_point(end))

    def as_segment(self) -> Tuple[Point, Point]:
        return self.start, self.end


def _scannable(polygon) -> bool:
    return polygon.completed and len(polygon.vertices) >= MIN_EDGE_VERTICES


def iter_edges(polygon) -> Iterator[Tuple[int, Point, Point]]:
    """Yield ``(index, start, end)`` for each edge of a completed polygon.

    Edge ``i`` joins vertex ``i`` to vertex ``(i + 1) % n``. Incomplete polygons
    and polygons with fewer than two vertices have no edges.
    """
    if not _scannable(polygon):
        return
    verts = polygon.vertices
    n = len(verts)
    for i in range(n):
        yield i, verts[i], verts[(i + 1) % n]


def _nearest_in_polygon(point, polygon) -> Tuple[int, float]:
    pts = np.asarray(polygon.vertices, dtype=np.float64).reshape(-1, 2)
    dists = segment_distances(point, pts, np.roll(pts, -1, axis=0))
    # argmin returns the first index on ties
    i = int(np.argmin(dists))
    return i, float(dists[i])


def _edge_ref(polygon, i: int) -> EdgeRef:
    verts = polygon.vertices
    return EdgeRef(polygon.id, i, verts[i], verts[(i + 1) % len(verts)])


def find_nearest_edge(point, polygons: Iterable, max_distance: float) -> Optional[EdgeRef]:
    """Closest edge to ``point`` among completed polygons, within ``max_distance``.

    Returns ``None`` when no edge lies within ``max_distance`` (inclusive).
    Ties go to the first edge in polygon order, then edge order.
    """
    p = as_point(point)
    best_dist = math.inf
    best = None
    for polygon in polygons:
        if not _scannable(polygon):
            continue
        i, d = _nearest_in_polygon(p, polygon)
        if d < best_dist and d <= max_distance:
            best_dist = d
            best = _edge_ref(polygon, i)
    if best is not None:
        logger.debug('picked edge %d of polygon %s at distance %.6g', best.edge_index, best.polygon_id, best_dist)
    return best


def check_edge_for_point(point, polygons: Iterable) -> Optional[EdgeRef]:
    """Closest edge to ``point`` among completed polygons, with no distance cutoff.

    Returns ``None`` only when no completed polygon has an edge.
    """
    p = as_point(point)
    best_dist = math.inf
    best = None
    for polygon in polygons:
        if not _scannable(polygon):
            continue
        i, d = _nearest_in_polygon(p, polygon)
        if d < best_dist:
            best_dist = d
            best = _edge_ref(polygon, i)
    return best
