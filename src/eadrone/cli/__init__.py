"""Command line interfaces."""

# Import submodules explicitly when needed:
#   from eadrone.cli.main import main

__all__ = [
    "main",
]
