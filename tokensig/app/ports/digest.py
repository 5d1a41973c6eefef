"""Digest port interface for fixed-length hash providers."""

from typing import Protocol


class DigestPort(Protocol):
    """Port interface for cryptographic hash providers.

    Adapters implementing this port must provide:
    - A fixed set of supported algorithm names (lower-case)
    - Deterministic, fixed-length hexadecimal digests

    Side effects: None (pure computation).
    """

    name: str

    def supported_algorithms(self) -> frozenset[str]:
        """Return the algorithm names this provider can compute.

        Returns:
            Lower-case algorithm identifiers
        """
        ...

    def normalize(self, algorithm: str) -> str:
        """Normalize ``algorithm`` and ensure it is supported.

        Args:
            algorithm: Algorithm name in any letter case

        Returns:
            Canonical algorithm identifier

        Raises:
            UnsupportedAlgorithmError: If the provider lacks the algorithm
        """
        ...

    def digest(self, algorithm: str, data: bytes) -> str:
        """Hash ``data`` with ``algorithm``.

        Args:
            algorithm: Canonical algorithm identifier
            data: Bytes to hash

        Returns:
            Lower-case hexadecimal digest

        Raises:
            UnsupportedAlgorithmError: If the provider lacks the algorithm
        """
        ...
