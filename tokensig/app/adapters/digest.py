"""Digest adapters backed by hashlib and the cryptography package."""

from __future__ import annotations

import hashlib
import logging
from collections.abc import Callable, Iterable

from cryptography.exceptions import UnsupportedAlgorithm
from cryptography.hazmat.primitives import hashes

from tokensig.errors import UnsupportedAlgorithmError

logger = logging.getLogger(__name__)

# XOF digests have no fixed output length.
_VARIABLE_LENGTH_PREFIXES = ("shake",)


def canonical_algorithm_name(algorithm: str) -> str:
    """Return the canonical spelling of ``algorithm`` (lower case, ``_`` separators).

    PHP spellings such as ``sha3-256`` and ``sha512/256`` map onto the hashlib names.
    """

    return algorithm.strip().lower().replace("-", "_").replace("/", "_")


class _NamedDigestAdapter:
    """Shared name resolution for adapters with a fixed algorithm table."""

    name = "base"

    def __init__(self, algorithms: dict[str, str]) -> None:
        self._algorithms = algorithms

    def supported_algorithms(self) -> frozenset[str]:
        return frozenset(self._algorithms)

    def normalize(self, algorithm: str) -> str:
        canonical = canonical_algorithm_name(algorithm)
        if canonical not in self._algorithms:
            raise UnsupportedAlgorithmError(canonical)
        return canonical

    def _resolve(self, algorithm: str) -> str:
        try:
            return self._algorithms[canonical_algorithm_name(algorithm)]
        except KeyError:
            raise UnsupportedAlgorithmError(algorithm) from None


class HashlibDigestAdapter(_NamedDigestAdapter):
    """Digest provider over the interpreter's ``hashlib`` algorithms.

    ``hashlib.algorithms_available`` can list OpenSSL digests that the loaded
    provider refuses to construct (legacy digests under OpenSSL 3), so every
    candidate is probed once at construction time.
    """

    name = "hashlib"

    def __init__(self, algorithms: Iterable[str] | None = None) -> None:
        candidates = hashlib.algorithms_available if algorithms is None else algorithms
        table: dict[str, str] = {}
        for candidate in sorted(candidates):
            lowered = candidate.lower()
            if lowered.startswith(_VARIABLE_LENGTH_PREFIXES):
                continue
            try:
                hashlib.new(lowered, b"")
            except ValueError:
                logger.debug("Skipping unavailable hashlib digest %s", lowered)
                continue
            table.setdefault(canonical_algorithm_name(lowered), lowered)
        super().__init__(table)

    def digest(self, algorithm: str, data: bytes) -> str:
        return hashlib.new(self._resolve(algorithm), data).hexdigest()


_CRYPTOGRAPHY_ALGORITHMS: dict[str, Callable[[], hashes.HashAlgorithm]] = {
    "md5": hashes.MD5,
    "sha1": hashes.SHA1,
    "sha224": hashes.SHA224,
    "sha256": hashes.SHA256,
    "sha384": hashes.SHA384,
    "sha512": hashes.SHA512,
    "sha512_224": hashes.SHA512_224,
    "sha512_256": hashes.SHA512_256,
    "sha3_224": hashes.SHA3_224,
    "sha3_256": hashes.SHA3_256,
    "sha3_384": hashes.SHA3_384,
    "sha3_512": hashes.SHA3_512,
    "blake2b": lambda: hashes.BLAKE2b(64),
    "blake2s": lambda: hashes.BLAKE2s(32),
    "sm3": hashes.SM3,
}


class CryptographyDigestAdapter(_NamedDigestAdapter):
    """Digest provider backed by ``cryptography.hazmat.primitives.hashes``.

    BLAKE2 digests use their full default output size so results match
    ``hashlib.blake2b()`` and ``hashlib.blake2s()``. Digests the linked
    OpenSSL cannot compute (SM3 on some builds) are probed and skipped.
    """

    name = "cryptography"

    def __init__(self) -> None:
        table: dict[str, str] = {}
        for candidate, factory in _CRYPTOGRAPHY_ALGORITHMS.items():
            try:
                hashes.Hash(factory())
            except UnsupportedAlgorithm:
                logger.debug("Skipping unavailable cryptography digest %s", candidate)
                continue
            table[candidate] = candidate
        super().__init__(table)

    def digest(self, algorithm: str, data: bytes) -> str:
        hasher = hashes.Hash(_CRYPTOGRAPHY_ALGORITHMS[self._resolve(algorithm)]())
        hasher.update(data)
        return hasher.finalize().hex()
