"""Pytest configuration and fixtures."""

import hashlib
from collections.abc import Generator

import pytest

from tokensig.app import SignatureEngine, SigningConfig
from tokensig.app.adapters import FixedClock, HashlibDigestAdapter
from tokensig.config import Settings

EXAMPLE_KEY = "secret"
EXAMPLE_URI = "/api/resource"
EXAMPLE_TIMESTAMP = 1000
EXAMPLE_NOW = 1050


def reference_token(key: str, uri: str, timestamp: int, algorithm: str = "sha256") -> str:
    """Derive a token directly with hashlib, independent of the engine."""

    def h(value: str) -> str:
        return hashlib.new(algorithm, value.encode("utf-8")).hexdigest()

    request_hash = h(f"{uri}@{timestamp}")
    for _ in range(10):
        request_hash = h(request_hash)

    key_hash = h(key)
    for _ in range(10):
        key_hash = h(key_hash)

    final_hash = h(f"{request_hash}-{key_hash}")
    for _ in range(100):
        final_hash = h(final_hash)
    return final_hash


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep developer TOKENSIG_* variables out of tests."""
    for name in (
        "TOKENSIG_KEY",
        "TOKENSIG_KEY_PATH",
        "TOKENSIG_ALGORITHM",
        "TOKENSIG_VALIDITY_PERIOD",
        "TOKENSIG_DIGEST_BACKEND",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def digest() -> HashlibDigestAdapter:
    return HashlibDigestAdapter()


@pytest.fixture
def clock() -> FixedClock:
    return FixedClock(EXAMPLE_NOW)


@pytest.fixture
def engine(digest: HashlibDigestAdapter, clock: FixedClock) -> SignatureEngine:
    return SignatureEngine(digest=digest, clock=clock)


@pytest.fixture
def config(digest: HashlibDigestAdapter) -> SigningConfig:
    return SigningConfig.build(EXAMPLE_KEY, "sha256", 120, digest=digest)


@pytest.fixture
def override_settings() -> Generator[Settings, None, None]:
    """Provide isolated tokensig settings scoped to tests."""

    import tokensig.config as config_module

    original_settings = getattr(config_module, "_settings", None)
    settings = config_module.Settings(key=EXAMPLE_KEY, algorithm="sha256", validity_period=120)
    config_module._settings = settings

    try:
        yield settings
    finally:
        config_module._settings = original_settings


@pytest.fixture
def reference():
    """Independent hashlib derivation used to pin the token construction."""
    return reference_token
