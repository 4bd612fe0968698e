"""Descriptive metrics for a fixed waypoint route."""

import numpy as np
from typing import Sequence

from ..utils.math_utils import distance_3d


def _as_array(waypoints: Sequence) -> np.ndarray:
    return np.array([tuple(wp) for wp in waypoints], dtype=float).reshape(-1, 3)


def segment_distances(waypoints: Sequence) -> np.ndarray:
    """Lengths of the segments between consecutive waypoints.

    Args:
        waypoints: Ordered waypoints or (x, y, z) tuples

    Returns:
        Array of ``len(waypoints) - 1`` segment lengths (empty for fewer
        than two waypoints)
    """
    coords = _as_array(waypoints)
    if len(coords) < 2:
        return np.zeros(0)
    return np.sqrt(np.sum(np.diff(coords, axis=0) ** 2, axis=1))


def calculate_route_metrics(waypoints: Sequence) -> dict:
    """Calculate route metrics for an ordered waypoint sequence.

    Args:
        waypoints: Ordered waypoints or (x, y, z) tuples

    Returns:
        Dictionary containing route metrics
    """
    if len(waypoints) == 0:
        return {
            'waypoint_count': 0,
            'total_distance': 0.0,
            'avg_segment_length': 0.0,
            'direct_distance': 0.0,
            'route_efficiency': 0
        }

    segments = segment_distances(waypoints)
    total_distance = float(segments.sum())
    waypoint_count = len(waypoints)
    avg_segment_length = total_distance / max(1, waypoint_count - 1)
    direct_distance = distance_3d(waypoints[0], waypoints[-1])

    # Straight-line distance over flown distance (1.0 means no detour)
    if waypoint_count > 2:
        route_efficiency = direct_distance / total_distance if total_distance > 0 else 0
    else:
        route_efficiency = 1.0

    return {
        'waypoint_count': waypoint_count,
        'total_distance': total_distance,
        'avg_segment_length': avg_segment_length,
        'direct_distance': direct_distance,
        'route_efficiency': route_efficiency
    }
