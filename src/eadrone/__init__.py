"""
EAD - Energy Aware Drone

Waypoint distance accumulation and a closed-form velocity/altitude
energy model for estimating the energy a drone spends on a fixed route.
"""

try:
    from .__version__ import __version__
except ImportError:
    __version__ = "dev"

__author__ = "EAD Team"

# Submodules are available for import but not loaded at package level
# Import submodules explicitly when needed:
#   from eadrone.core import mission
#   from eadrone.configs import config_loader

__all__ = [
    "__version__",
]
