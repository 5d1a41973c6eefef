"""Application bootstrap wiring ports, adapters, and the signature engine."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from tokensig.app import SignatureEngine, SigningConfig
from tokensig.app.adapters import CryptographyDigestAdapter, HashlibDigestAdapter, SystemClock
from tokensig.app.ports import ClockPort, DigestPort
from tokensig.config import DigestBackend, Settings, get_settings
from tokensig.errors import ConfigurationError

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class ApplicationContainer:
    """Aggregates the wired engine, adapters and configuration for callers."""

    settings: Settings
    digest_port: DigestPort
    clock: ClockPort
    engine: SignatureEngine
    signing_config: SigningConfig


def create_digest_adapter(backend: DigestBackend) -> DigestPort:
    """Return the digest provider named by ``backend``."""

    if backend == "hashlib":
        return HashlibDigestAdapter()
    if backend == "cryptography":
        return CryptographyDigestAdapter()
    raise ConfigurationError(f"Unknown digest backend: {backend}")


def bootstrap_application(
    settings: Settings | None = None,
    *,
    clock: ClockPort | None = None,
) -> ApplicationContainer:
    """Create the application container from settings.

    Args:
        settings: Settings to wire (defaults to the global instance)
        clock: Clock override, e.g. a fixed clock for offline verification

    Raises:
        ConfigurationError: If the configured algorithm or backend is unusable
    """
    active_settings = settings or get_settings()
    digest_port = create_digest_adapter(active_settings.digest_backend)
    active_clock = clock or SystemClock()

    signing_config = SigningConfig.build(
        active_settings.get_signing_key(),
        active_settings.algorithm,
        active_settings.validity_period,
        digest=digest_port,
    )
    logger.debug(
        "Wired %s digest backend with %s, validity %ss",
        digest_port.name,
        signing_config.algorithm,
        signing_config.validity_period,
    )

    return ApplicationContainer(
        settings=active_settings,
        digest_port=digest_port,
        clock=active_clock,
        engine=SignatureEngine(digest=digest_port, clock=active_clock),
        signing_config=signing_config,
    )
