"""Concrete adapters wiring application ports to built-in implementations."""

from __future__ import annotations

from .clock import FixedClock, SystemClock
from .digest import CryptographyDigestAdapter, HashlibDigestAdapter, canonical_algorithm_name

__all__ = [
    "CryptographyDigestAdapter",
    "FixedClock",
    "HashlibDigestAdapter",
    "SystemClock",
    "canonical_algorithm_name",
]
