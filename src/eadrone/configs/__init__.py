"""Mission scenario configuration."""

# Import submodules explicitly when needed:
#   from eadrone.configs.base import MissionConfig
#   from eadrone.configs.config_loader import config_loader

__all__ = [
    "base",
    "config_loader",
]
