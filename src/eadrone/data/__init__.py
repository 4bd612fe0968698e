"""Waypoint file loading and validation."""

# Import submodules explicitly when needed:
#   from eadrone.data.loaders import load_waypoints
#   from eadrone.data.validators import validate_mission_data

__all__ = [
    "loaders",
    "validators",
]
