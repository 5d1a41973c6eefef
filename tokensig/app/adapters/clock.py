"""Clock adapters."""

from __future__ import annotations

import time
from dataclasses import dataclass


class SystemClock:
    """Wall clock truncated to whole seconds."""

    def now(self) -> int:
        return int(time.time())


@dataclass(slots=True)
class FixedClock:
    """Clock frozen at ``current`` until moved explicitly."""

    current: int

    def now(self) -> int:
        return self.current

    def advance(self, seconds: int) -> None:
        """Move the clock forward by ``seconds``."""

        self.current += seconds
