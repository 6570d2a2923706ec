"""Editing session: explicit state plus an enumerated mode machine.

A :class:`Session` bundles everything an interactive caller needs between
events (the polygon collection, the polygon being authored, the selection and
the per-mode probe results). Mode changes go through the pure
:func:`transition` function, so at most one tool is active at a time and
switching tools never needs sibling flags to be reset by hand.

Nothing here raises for "not applicable right now" situations (no selection,
too few vertices, wrong mode); operations return ``False``/``None`` and log.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from .classify import Side, classify_point_to_edge, polygons_containing
from .config import SessionConfig
from .edges import EdgeRef, check_edge_for_point, find_nearest_edge
from .intersect import intersect
from .logging_utils import get_logger
from .polygon import Polygon
from .vectors import Point, as_point, distance

logger = get_logger('polyedit.session')

__all__ = [
    'Mode', 'Event', 'TOOL_MODES', 'transition', 'EdgeCheck', 'IntersectState',
    'SelectionInfo', 'Session'
]


class Mode(Enum):
    IDLE = 'idle'
    AUTHORING = 'authoring'
    POINT_PROBE = 'point_probe'
    EDGE_PROBE = 'edge_probe'
    SELECTING = 'selecting'
    EDGE_INTERSECTING = 'edge_intersecting'
    SCALING_AT_POINT = 'scaling_at_point'
    SCALING_AT_CENTER = 'scaling_at_center'


class Event(Enum):
    TOGGLE_POINT_PROBE = 'toggle_point_probe'
    TOGGLE_EDGE_PROBE = 'toggle_edge_probe'
    TOGGLE_SELECT = 'toggle_select'
    TOGGLE_EDGE_INTERSECT = 'toggle_edge_intersect'
    TOGGLE_SCALE_AT_POINT = 'toggle_scale_at_point'
    TOGGLE_SCALE_AT_CENTER = 'toggle_scale_at_center'
    START_POLYGON = 'start_polygon'
    FINISH_POLYGON = 'finish_polygon'
    SCALE_APPLIED = 'scale_applied'
    RESET = 'reset'


_TOGGLES = {
    Event.TOGGLE_POINT_PROBE: Mode.POINT_PROBE,
    Event.TOGGLE_EDGE_PROBE: Mode.EDGE_PROBE,
    Event.TOGGLE_SELECT: Mode.SELECTING,
    Event.TOGGLE_EDGE_INTERSECT: Mode.EDGE_INTERSECTING,
    Event.TOGGLE_SCALE_AT_POINT: Mode.SCALING_AT_POINT,
    Event.TOGGLE_SCALE_AT_CENTER: Mode.SCALING_AT_CENTER,
}

TOOL_MODES = frozenset(_TOGGLES.values())


def _base(authoring: bool) -> Mode:
    return Mode.AUTHORING if authoring else Mode.IDLE


def transition(mode: Mode, event: Event, authoring: bool = False) -> Mode:
    """Next mode after ``event``.

    ``authoring`` says whether a polygon is currently being authored; it picks
    the base mode (AUTHORING or IDLE) that a tool falls back to when it is
    switched off, and the mode reached on START_POLYGON and FINISH_POLYGON.
    """
    if event is Event.RESET:
        return Mode.IDLE
    target = _TOGGLES.get(event)
    if target is not None:
        return _base(authoring) if mode is target else target
    if event is Event.SCALE_APPLIED:
        return _base(authoring) if mode is Mode.SCALING_AT_POINT else mode
    if mode in TOOL_MODES:
        return mode
    if event in (Event.START_POLYGON, Event.FINISH_POLYGON):
        return _base(authoring)
    return mode


@dataclass
class EdgeCheck:
    edge: EdgeRef
    point: Point
    side: Side


@dataclass
class IntersectState:
    """Picks of the edge-intersection tool.

    ``temp_start``/``temp_end`` describe an ad-hoc edge being drawn; it
    becomes ``first_edge`` or ``second_edge`` on the click that finishes it.
    """
    first_edge: Optional[EdgeRef] = None
    second_edge: Optional[EdgeRef] = None
    temp_start: Optional[Point] = None
    temp_end: Optional[Point] = None
    point: Optional[Point] = None

    @property
    def pending_edge(self) -> Optional[EdgeRef]:
        if self.temp_start is None or self.temp_end is None:
            return None
        return EdgeRef.adhoc(self.temp_start, self.temp_end)


@dataclass
class SelectionInfo:
    polygon_id: int
    centroid: Point
    vertex_count: int


@dataclass
class Session:
    config: SessionConfig = field(default_factory=SessionConfig)
    polygons: List[Polygon] = field(default_factory=list)
    current: Optional[Polygon] = None
    selected_id: Optional[int] = None
    next_id: int = 1
    mode: Mode = Mode.IDLE
    test_point: Optional[Point] = None
    highlighted: List[Polygon] = field(default_factory=list)
    edge_check: Optional[EdgeCheck] = None
    intersection: IntersectState = field(default_factory=IntersectState)

    # -- mode handling ---------------------------------------------------

    def _clear_probes(self) -> None:
        self.test_point = None
        self.highlighted = []
        self.edge_check = None
        self.intersection = IntersectState()

    def _apply(self, event: Event) -> Mode:
        new = transition(self.mode, event, self.current is not None)
        if new is not self.mode:
            logger.debug('mode %s -> %s on %s', self.mode.value, new.value, event.value)
            self.mode = new
        return new

    def toggle(self, event: Event) -> Mode:
        """Switch a tool mode on or off; probe results are dropped on any change.

        Only the TOGGLE_* events are accepted. Lifecycle events belong to
        new_polygon, complete_polygon and clear_all; passing one here logs a
        warning and leaves the mode unchanged.
        """
        if event not in _TOGGLES:
            logger.warning('cannot toggle on %s: not a tool event', event.value)
            return self.mode
        old = self.mode
        new = self._apply(event)
        if new is not old:
            self._clear_probes()
        return new

    # -- authoring -------------------------------------------------------

    def new_polygon(self) -> Polygon:
        """Close the authored polygon (if it has any vertex) and start a fresh one."""
        cur = self.current
        if cur is not None and cur.vertices:
            cur.complete()
            self.polygons.append(cur)
            self.selected_id = cur.id
        self.current = Polygon(self.next_id)
        self.next_id += 1
        self._apply(Event.START_POLYGON)
        return self.current

    def complete_polygon(self) -> bool:
        cur = self.current
        if cur is None:
            return False
        if len(cur.vertices) < self.config.min_complete_vertices:
            logger.warning('polygon %s needs at least %d vertices to complete (has %d)',
                           cur.id, self.config.min_complete_vertices, len(cur.vertices))
            return False
        cur.complete()
        self.polygons.append(cur)
        self.selected_id = cur.id
        self.current = None
        self._apply(Event.FINISH_POLYGON)
        return True

    def delete_last(self) -> Optional[Point]:
        if self.current is None:
            return None
        return self.current.pop_vertex()

    def clear_all(self) -> None:
        self.polygons = []
        self.current = None
        self.selected_id = None
        self.next_id = 1
        self._clear_probes()
        self._apply(Event.RESET)

    # -- pointer input ---------------------------------------------------

    def click(self, point):
        """Dispatch a click according to the current mode.

        Returns the mode's result: the highlighted polygons (point probe), the
        :class:`EdgeCheck` (edge probe), the selected polygon (selecting), the
        intersection point (edge intersecting), the scaled polygon (scaling)
        or whether a vertex was appended (idle/authoring).
        """
        p = as_point(point)
        mode = self.mode
        if mode is Mode.POINT_PROBE:
            self.test_point = p
            self.highlighted = polygons_containing(p, self.polygons)
            self.edge_check = None
            return self.highlighted
        if mode is Mode.EDGE_PROBE:
            self.test_point = p
            edge = check_edge_for_point(p, self.polygons)
            self.edge_check = None if edge is None else EdgeCheck(
                edge, p, classify_point_to_edge(p, edge.start, edge.end))
            return self.edge_check
        if mode is Mode.SELECTING:
            return self.select_polygon_at(p)
        if mode is Mode.EDGE_INTERSECTING:
            self._intersect_click(p)
            return self.intersection.point
        if mode is Mode.SCALING_AT_POINT:
            polygon = self._require_selected('scale')
            if polygon is None:
                return None
            polygon.scale(p, self.config.scale_factor)
            if self.config.exit_scale_mode_after_apply:
                self._apply(Event.SCALE_APPLIED)
            return polygon
        if mode is Mode.SCALING_AT_CENTER:
            polygon = self._require_selected('scale')
            if polygon is None:
                return None
            polygon.scale_around_center(self.config.scale_factor)
            return polygon
        if self.current is None:
            logger.debug('click at (%g, %g) ignored: no polygon is being authored', p.x, p.y)
            return False
        return self.current.add_vertex(p)

    def _intersect_click(self, p: Point) -> None:
        st = self.intersection
        tol = self.config.edge_pick_tolerance
        picked = find_nearest_edge(p, self.polygons, tol)
        if st.first_edge is None:
            if picked is not None:
                st.first_edge = picked
                st.temp_start = st.temp_end = None
                st.point = None
            elif st.temp_start is None:
                st.temp_start = st.temp_end = p
                st.point = None
            else:
                st.first_edge = EdgeRef.adhoc(st.temp_start, p)
                st.temp_start = st.temp_end = None
                st.point = None
            return
        if picked is not None:
            st.second_edge = picked
            st.temp_start = st.temp_end = None
        elif st.temp_start is None:
            st.temp_start = st.temp_end = p
            return
        else:
            st.second_edge = EdgeRef.adhoc(st.temp_start, p)
            st.temp_start = st.temp_end = None
        st.point = intersect(st.first_edge, st.second_edge)
        logger.debug('edge intersection: %s', st.point)

    def move(self, point) -> Optional[Point]:
        """Track the pointer while an ad-hoc edge is being drawn.

        Updates the free end of the pending edge and the live intersection
        with the first edge. Returns the live intersection (or ``None``).
        """
        st = self.intersection
        if self.mode is not Mode.EDGE_INTERSECTING or st.temp_start is None or st.second_edge is not None:
            return None
        st.temp_end = as_point(point)
        st.point = intersect(st.first_edge, st.pending_edge)
        return st.point

    def wheel(self, point, delta_y: float) -> bool:
        """Scale the selection by one wheel notch; only active in the scaling modes.

        Scrolling up (``delta_y < 0``) grows by ``wheel_scale_factor``, down
        shrinks by its inverse; a zero delta does nothing.
        """
        if self.mode not in (Mode.SCALING_AT_POINT, Mode.SCALING_AT_CENTER) or delta_y == 0:
            return False
        polygon = self._require_selected('scale')
        if polygon is None:
            return False
        w = self.config.wheel_scale_factor
        factor = w if delta_y < 0 else 1.0 / w
        if self.mode is Mode.SCALING_AT_POINT:
            polygon.scale(as_point(point), factor)
        else:
            polygon.scale_around_center(factor)
        return True

    # -- selection -------------------------------------------------------

    def select_polygon_at(self, point) -> Optional[Polygon]:
        """Select the topmost polygon under ``point``; clears the selection on a miss.

        Stored polygons are tried newest first; then the vertices of the
        polygon being authored.
        """
        p = as_point(point)
        tol = self.config.select_tolerance
        found = None
        for polygon in reversed(self.polygons):
            if polygon.hit_test(p, tol):
                found = polygon
                break
        if found is None and self.current is not None:
            if any(distance(p, v) <= tol for v in self.current.vertices):
                found = self.current
        self.selected_id = None if found is None else found.id
        return found

    def selected_polygon(self) -> Optional[Polygon]:
        if self.selected_id is None:
            return None
        for polygon in self.polygons:
            if polygon.id == self.selected_id:
                return polygon
        if self.current is not None and self.current.id == self.selected_id:
            return self.current
        return None

    def selection_info(self) -> Optional[SelectionInfo]:
        polygon = self.selected_polygon()
        if polygon is None:
            return None
        return SelectionInfo(polygon.id, polygon.centroid(), len(polygon.vertices))

    def _require_selected(self, action: str) -> Optional[Polygon]:
        polygon = self.selected_polygon()
        if polygon is None:
            logger.warning('cannot %s: no polygon selected', action)
        return polygon

    # -- transforms of the selection -------------------------------------

    def translate_selected(self, dx: float, dy: float) -> bool:
        polygon = self._require_selected('translate')
        if polygon is None:
            return False
        polygon.translate(dx, dy)
        return True

    def rotate_selected(self, pivot, angle_degrees: float) -> bool:
        polygon = self._require_selected('rotate')
        if polygon is None:
            return False
        polygon.rotate(pivot, angle_degrees)
        return True

    def rotate_selected_around_center(self, angle_degrees: float) -> bool:
        polygon = self._require_selected('rotate')
        if polygon is None:
            return False
        polygon.rotate_around_center(angle_degrees)
        return True

    def scale_selected(self, pivot, factor: float) -> bool:
        polygon = self._require_selected('scale')
        if polygon is None:
            return False
        polygon.scale(pivot, factor)
        return True

    def scale_selected_around_center(self, factor: float) -> bool:
        polygon = self._require_selected('scale')
        if polygon is None:
            return False
        polygon.scale_around_center(factor)
        return True
