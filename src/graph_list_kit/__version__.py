"""Version information for graph-list-kit."""

__version__ = "0.1.0"
