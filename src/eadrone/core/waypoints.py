"""Waypoint type and coordinate parsing."""

from dataclasses import dataclass
from typing import Iterator

from ..utils.math_utils import distance_3d


@dataclass(frozen=True)
class Waypoint:
    """A fixed point in 3D space the drone passes through (meters)."""
    x: float
    y: float
    z: float

    def __iter__(self) -> Iterator[float]:
        return iter((self.x, self.y, self.z))

    def distance_to(self, other: 'Waypoint') -> float:
        """Calculate distance to another waypoint."""
        return distance_3d(self, other)


def parse_coordinates(coord_str: str) -> Waypoint:
    """Parse coordinate string in format 'x,y,z' to a Waypoint.

    Args:
        coord_str: Coordinate string like "100.5,-200.0,150"

    Returns:
        Waypoint object

    Raises:
        ValueError: If the string is not three comma-separated numbers
    """
    try:
        parts = coord_str.split(',')
        if len(parts) != 3:
            raise ValueError(f"Coordinates must be in format 'x,y,z', got: {coord_str}")

        x, y, z = map(float, parts)
        return Waypoint(x, y, z)
    except ValueError as e:
        raise ValueError(f"Invalid coordinate format '{coord_str}': {e}")
