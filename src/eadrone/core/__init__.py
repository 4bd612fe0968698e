"""Core energy model and mission evaluation."""

# Import submodules explicitly when needed:
#   from eadrone.core.mission import evaluate_mission
#   from eadrone.core.optimizer import find_optimal_speed_and_altitude

__all__ = [
    "energy",
    "mission",
    "optimizer",
    "routing",
    "waypoints",
]
