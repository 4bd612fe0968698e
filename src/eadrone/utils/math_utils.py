"""Geometric helpers for waypoint routes."""

import math
from typing import Iterable, Sequence

Point = Sequence[float]


def distance_3d(p1: Point, p2: Point) -> float:
    """Calculate 3D Euclidean distance between two points.

    Args:
        p1: First point as (x, y, z) sequence or Waypoint
        p2: Second point as (x, y, z) sequence or Waypoint

    Returns:
        Euclidean distance between the points. Non-finite coordinates
        give a non-finite result.
    """
    x1, y1, z1 = p1
    x2, y2, z2 = p2
    return math.sqrt((x2 - x1)**2 + (y2 - y1)**2 + (z2 - z1)**2)


def calculate_route_distance(coordinates: Iterable[Point]) -> float:
    """Calculate total distance for a route through multiple points.

    Args:
        coordinates: Ordered points the route passes through

    Returns:
        Sum of the distances between consecutive points, 0.0 when
        fewer than two points are given
    """
    points = list(coordinates)
    if len(points) < 2:
        return 0.0

    total_distance = 0.0
    for i in range(len(points) - 1):
        total_distance += distance_3d(points[i], points[i + 1])

    return total_distance
