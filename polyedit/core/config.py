"""Configuration objects for polyedit editing sessions."""
from __future__ import annotations

from dataclasses import dataclass

from .constants import (DEFAULT_SCALE_FACTOR, EDGE_PICK_EPS, MIN_CLOSED_VERTICES,
                        SELECT_PICK_EPS, WHEEL_SCALE_FACTOR)


@dataclass
class SessionConfig:
    """Interaction parameters for a :class:`~polyedit.core.session.Session`.

    Attributes
    ----------
    edge_pick_tolerance : float
        Maximum distance for a click to pick a stored edge in intersect mode.
    select_tolerance : float
        Maximum distance for a click to hit a vertex or edge when selecting.
    scale_factor : float
        Factor applied by a click in either scaling mode.
    wheel_scale_factor : float
        Factor applied per wheel notch (its inverse when scrolling down).
    min_complete_vertices : int
        Vertices required before the authored polygon may be completed.
    exit_scale_mode_after_apply : bool
        Leave point-scaling mode after one click has been applied.
    """
    edge_pick_tolerance: float = EDGE_PICK_EPS
    select_tolerance: float = SELECT_PICK_EPS
    scale_factor: float = DEFAULT_SCALE_FACTOR
    wheel_scale_factor: float = WHEEL_SCALE_FACTOR
    min_complete_vertices: int = MIN_CLOSED_VERTICES
    exit_scale_mode_after_apply: bool = True


__all__ = ['SessionConfig']
