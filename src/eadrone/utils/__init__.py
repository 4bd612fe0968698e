"""Utility functions and helpers."""

# Import submodules explicitly when needed:
#   from eadrone.utils.math_utils import distance_3d

__all__ = [
    "math_utils",
]
