"""Gift exchange rooms: membership rules and participant queries."""

__version__ = "1.0.0"
