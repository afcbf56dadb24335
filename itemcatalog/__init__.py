"""Item catalog service with recent-items and undo history."""

__version__ = "1.0.0"
