"""Clock capability used for every wall-clock read in document generation."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Protocol


class Clock(Protocol):
    """Port definition for current-time retrieval."""

    def clock_now_utc(self) -> datetime:
        """Return the current instant as a timezone-aware UTC datetime.

        Returns:
            datetime: Current UTC instant.

        Raises:
            RuntimeError: Raised when the time source is unavailable.
        """


class SystemClock:
    """Clock backed by the host wall clock."""

    def clock_now_utc(self) -> datetime:
        return datetime.now(timezone.utc)


class FixedClock:
    """Clock that always reports one configured instant."""

    def __init__(self, moment: datetime):
        """Initialize fixed clock.

        Args:
            moment: Instant to report. Naive values are interpreted as UTC.

        Raises:
            ValueError: Raised when moment is None.
        """

        if moment is None:
            raise ValueError("moment must not be None")
        if moment.tzinfo is None:
            moment = moment.replace(tzinfo=timezone.utc)
        self._moment = moment.astimezone(timezone.utc)

    def clock_now_utc(self) -> datetime:
        return self._moment
