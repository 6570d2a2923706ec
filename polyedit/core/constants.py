"""Central numerical tolerances and interaction defaults.

This module centralizes tiny numeric thresholds and pick radii used across the
codebase so they can be tuned consistently and referenced without scattering
literals.
"""
from __future__ import annotations

# Geometry tolerances
EPS_PARALLEL: float = 1e-9        # |denominator| below which two segments are treated as parallel

# Vertex-count minimums
MIN_CLOSED_VERTICES: int = 3      # containment / completion need a closed loop
MIN_EDGE_VERTICES: int = 2        # edge scans need at least one segment

# Interaction defaults (canvas units)
EDGE_PICK_EPS: float = 10.0       # radius for picking a stored edge in intersect mode
SELECT_PICK_EPS: float = 8.0      # radius for hitting a vertex/edge when selecting
DEFAULT_SCALE_FACTOR: float = 1.2
WHEEL_SCALE_FACTOR: float = 1.2

__all__ = [
    'EPS_PARALLEL',
    'MIN_CLOSED_VERTICES',
    'MIN_EDGE_VERTICES',
    'EDGE_PICK_EPS',
    'SELECT_PICK_EPS',
    'DEFAULT_SCALE_FACTOR',
    'WHEEL_SCALE_FACTOR',
]
