"""Caller-facing functions for issuing and verifying tokens."""

from __future__ import annotations

from tokensig.app import (
    CheckOutcome,
    CreateOutcome,
    RequestContext,
    SignatureEngine,
    SigningConfig,
)
from tokensig.app.adapters import HashlibDigestAdapter, SystemClock
from tokensig.app.ports import DigestPort

_default_engine: SignatureEngine | None = None


def default_engine() -> SignatureEngine:
    """Return a shared engine using hashlib and the system clock."""
    global _default_engine
    if _default_engine is None:
        _default_engine = SignatureEngine(digest=HashlibDigestAdapter(), clock=SystemClock())
    return _default_engine


def build_config(
    key: str | None,
    algorithm: str = "sha256",
    validity_period: int = 120,
    *,
    digest: DigestPort | None = None,
) -> SigningConfig:
    """Build a :class:`SigningConfig`, validating ``algorithm`` against ``digest``."""

    provider = digest if digest is not None else default_engine().digest
    return SigningConfig.build(key, algorithm, validity_period, digest=provider)


def create_token(
    config: SigningConfig,
    uri: str | None,
    timestamp: int | None,
    *,
    engine: SignatureEngine | None = None,
) -> CreateOutcome:
    """Issue a token for ``uri`` at ``timestamp``."""

    active = engine or default_engine()
    return active.create(config, RequestContext(uri=uri, timestamp=timestamp))


def check_token(
    config: SigningConfig,
    uri: str | None,
    timestamp: int | None,
    token: str | None,
    *,
    engine: SignatureEngine | None = None,
) -> CheckOutcome:
    """Verify ``token`` for ``uri`` at ``timestamp``."""

    active = engine or default_engine()
    return active.check(config, RequestContext(uri=uri, timestamp=timestamp, token=token))
