"""Polygon entity: an ordered vertex list with a completion flag.

While incomplete a polygon is an open polyline that accepts vertex appends and
pops. Once completed the vertex count is frozen and the polygon is a closed
loop; vertex positions can still be moved by the affine transforms.
"""
from __future__ import annotations

from typing import Iterable, List, Optional

from . import transform as _tf
from .classify import (Side, classify_point_to_edge, contains_point,
                       point_to_segment_distance)
from .constants import MIN_CLOSED_VERTICES
from .edges import EdgeRef, iter_edges
from .logging_utils import get_logger
from .vectors import Point, as_point, distance

logger = get_logger('polyedit.polygon')

__all__ = ['Polygon']


class Polygon:
    """Ordered vertex list with a completion flag.

    Parameters
    ----------
    polygon_id : int, optional
        Identifier, stored as ``id``; unique within a session.
    vertices : iterable of points
        Initial vertices, coerced to :class:`Point`.
    completed : bool
        Whether the polygon is already closed.
    """

    def __init__(self, polygon_id: Optional[int] = None, vertices: Iterable = (), completed: bool = False):
        self.id = polygon_id
        self.vertices: List[Point] = [as_point(v) for v in vertices]
        self.completed = completed

    def __repr__(self) -> str:
        state = 'completed' if self.completed else 'open'
        return f'Polygon(id={self.id!r}, {len(self.vertices)} vertices, {state})'

    def __len__(self) -> int:
        return len(self.vertices)

    # -- authoring -------------------------------------------------------

    def add_vertex(self, point) -> bool:
        if self.completed:
            logger.debug('polygon %s is completed; vertex append ignored', self.id)
            return False
        self.vertices.append(as_point(point))
        return True

    def pop_vertex(self) -> Optional[Point]:
        if self.completed or not self.vertices:
            return None
        return self.vertices.pop()

    def complete(self) -> None:
        self.completed = True

    # -- edges -----------------------------------------------------------

    @property
    def edge_count(self) -> int:
        return len(self.vertices) if self.completed and len(self.vertices) >= 2 else 0

    def edges(self) -> List[EdgeRef]:
        return [EdgeRef(self.id, i, a, b) for i, a, b in iter_edges(self)]

    def edge(self, index: int) -> Optional[EdgeRef]:
        n = self.edge_count
        if not 0 <= index < n:
            return None
        return EdgeRef(self.id, index, self.vertices[index], self.vertices[(index + 1) % n])

    # -- queries ---------------------------------------------------------

    def contains_point(self, x, y=None) -> bool:
        return contains_point(self, x, y)

    @staticmethod
    def classify_point_to_edge(point, edge_start, edge_end) -> Side:
        return classify_point_to_edge(point, edge_start, edge_end)

    def centroid(self) -> Point:
        return _tf.centroid(self)

    def hit_test(self, point, tolerance: float) -> bool:
        """True if ``point`` is inside, near a vertex, or near an edge of this polygon.

        Containment only counts for completed polygons with at least three
        vertices. The segment check walks consecutive vertices including the
        closing segment, regardless of completion.
        """
        p = as_point(point)
        verts = self.vertices
        if self.completed and len(verts) >= MIN_CLOSED_VERTICES and contains_point(verts, p.x, p.y):
            return True
        if any(distance(p, v) <= tolerance for v in verts):
            return True
        n = len(verts)
        return any(point_to_segment_distance(p, verts[i], verts[(i + 1) % n]) <= tolerance
                   for i in range(n))

    # -- transforms (in place) -------------------------------------------

    def apply_transform(self, matrix) -> None:
        _tf.apply_transform(self.vertices, matrix)

    def translate(self, dx: float, dy: float) -> None:
        _tf.translate(self, dx, dy)

    def rotate(self, pivot, angle_degrees: float) -> None:
        _tf.rotate(self, pivot, angle_degrees)

    def rotate_around_center(self, angle_degrees: float) -> None:
        _tf.rotate_around_center(self, angle_degrees)

    def scale(self, pivot, factor: float) -> None:
        _tf.scale(self, pivot, factor)

    def scale_around_center(self, factor: float) -> None:
        _tf.scale_around_center(self, factor)
