"""Public package API for the polyedit planar geometry engine.

This facade provides a stable, flat import surface on top of the internal
implementation package ``polyedit.core``.

Example
-------
    from polyedit import Polygon, contains_point, find_nearest_edge, intersect

The deeper modules (``polyedit.core.*``) are considered internal and may
change; rely on this layer for public symbols.
"""
from importlib import import_module as _imp

try:
    from importlib.metadata import PackageNotFoundError as _NotFound, version as _pkg_version
    __version__ = _pkg_version("polyedit")
except _NotFound:  # pragma: no cover - running from a source checkout
    __version__ = "0.0.0+dev"


_const = _imp('polyedit.core.constants')
_vec = _imp('polyedit.core.vectors')
_tf = _imp('polyedit.core.transform')
_cls = _imp('polyedit.core.classify')
_edges = _imp('polyedit.core.edges')
_isect = _imp('polyedit.core.intersect')
_poly = _imp('polyedit.core.polygon')
_sess = _imp('polyedit.core.session')
_conf = _imp('polyedit.core.config')
_log = _imp('polyedit.core.logging_utils')

# Value types and entities
Point = _vec.Point
Polygon = _poly.Polygon
EdgeRef = _edges.EdgeRef
Side = _cls.Side

# Classification and queries
contains_point = _cls.contains_point
classify_point_to_edge = _cls.classify_point_to_edge
point_to_segment_distance = _cls.point_to_segment_distance
polygons_containing = _cls.polygons_containing
find_nearest_edge = _edges.find_nearest_edge
check_edge_for_point = _edges.check_edge_for_point
intersect = _isect.intersect
segment_intersection = _isect.segment_intersection

# Affine transforms (in place)
translate = _tf.translate
rotate = _tf.rotate
rotate_around_center = _tf.rotate_around_center
scale = _tf.scale
scale_around_center = _tf.scale_around_center
centroid = _tf.centroid
apply_transform = _tf.apply_transform

# Session / mode machine
Mode = _sess.Mode
Event = _sess.Event
Session = _sess.Session
transition = _sess.transition
SessionConfig = _conf.SessionConfig

# Logging
get_logger = _log.get_logger
configure_logging = _log.configure_logging

# Tolerances
EPS_PARALLEL = _const.EPS_PARALLEL
EDGE_PICK_EPS = _const.EDGE_PICK_EPS
SELECT_PICK_EPS = _const.SELECT_PICK_EPS

# Namespace submodules for exploratory users
constants = _const
vectors = _vec
transform = _tf
classify = _cls
edges = _edges
session = _sess

__all__ = [
    '__version__',
    # types
    'Point', 'Polygon', 'EdgeRef', 'Side',
    # queries
    'contains_point', 'classify_point_to_edge', 'point_to_segment_distance', 'polygons_containing',
    'find_nearest_edge', 'check_edge_for_point', 'intersect', 'segment_intersection',
    # transforms
    'translate', 'rotate', 'rotate_around_center', 'scale', 'scale_around_center',
    'centroid', 'apply_transform',
    # session
    'Mode', 'Event', 'Session', 'transition', 'SessionConfig',
    # logging
    'get_logger', 'configure_logging',
    # tolerances
    'EPS_PARALLEL', 'EDGE_PICK_EPS', 'SELECT_PICK_EPS',
    # submodules
    'constants', 'vectors', 'transform', 'classify', 'edges', 'session',
]
