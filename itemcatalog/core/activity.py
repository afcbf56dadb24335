"""Append-only activity log kept in memory for the /activity-log endpoint."""

from __future__ import annotations

import structlog

logger = structlog.get_logger(__name__)


class ActivityLog:
    """Human-readable record of catalog activity, oldest entry first."""

    def __init__(self) -> None:
        self._entries: list[str] = []

    def __len__(self) -> int:
        return len(self._entries)

    def append(self, message: str) -> None:
        self._entries.append(message)
        logger.debug("activity_recorded", message=message)

    def entries(self) -> list[str]:
        return list(self._entries)
