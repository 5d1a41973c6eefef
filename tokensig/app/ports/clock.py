"""Clock port interface."""

from typing import Protocol


class ClockPort(Protocol):
    """Source of the current time in whole Unix seconds."""

    def now(self) -> int:
        """Return the current Unix timestamp."""
        ...
