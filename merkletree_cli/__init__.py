"""Command line interface for merkletree."""
from merkletree import __version__

__all__ = ["__version__"]
