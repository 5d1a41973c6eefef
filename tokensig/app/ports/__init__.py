"""Port interfaces for the tokensig application layer.

These protocol interfaces define contracts for adapters.
The signature engine depends on these ports, never on concrete implementations.
"""

__all__ = [
    "ClockPort",
    "DigestPort",
]

from tokensig.app.ports.clock import ClockPort
from tokensig.app.ports.digest import DigestPort
