"""Core in-memory structures: recent-items ring, undo stack, activity log."""
