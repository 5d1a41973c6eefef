"""Hashing utilities for iterated digest derivation."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:  # pragma: no cover
    from tokensig.app.ports import DigestPort


def iterate_digest(digest: "DigestPort", algorithm: str, value: str, rounds: int) -> str:
    """Feed a hex digest back through ``algorithm`` ``rounds`` times.

    Args:
        digest: Provider computing each round
        algorithm: Canonical algorithm identifier
        value: Hex digest to start from
        rounds: Number of self-compositions (0 returns ``value`` unchanged)

    Returns:
        Hexadecimal digest after the final round
    """
    for _ in range(rounds):
        value = digest.digest(algorithm, value.encode("utf-8"))
    return value


def salted_iterate_digest(
    digest: "DigestPort",
    algorithm: str,
    value: str,
    *,
    salt: str = "",
    rounds: int = 10,
) -> str:
    """Hash ``value`` ``rounds`` times, mixing in a round counter and ``salt``.

    Round ``i`` (counting from 1) hashes ``previous + md5(str(i)) + salt``.
    The counter digest is always MD5, whatever ``algorithm`` is.

    Args:
        digest: Provider computing each round (must offer ``md5``)
        algorithm: Canonical algorithm identifier
        value: Input for the first round
        salt: Text appended to every round's input
        rounds: Number of rounds, at least 1

    Returns:
        Hexadecimal digest after the final round

    Raises:
        ValueError: If ``rounds`` is less than 1
        UnsupportedAlgorithmError: If the provider lacks ``algorithm`` or ``md5``
    """
    if rounds < 1:
        raise ValueError(f"rounds must be at least 1, got {rounds}")

    for counter in range(1, rounds + 1):
        counter_hash = digest.digest("md5", str(counter).encode("utf-8"))
        value = digest.digest(algorithm, f"{value}{counter_hash}{salt}".encode("utf-8"))
    return value
