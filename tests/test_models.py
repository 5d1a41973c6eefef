"""Tests for signing configuration and outcome value objects."""

import dataclasses

import pytest

from tokensig.app import (
    CheckOutcome,
    CreateOutcome,
    ErrorKind,
    RequestContext,
    SignatureFailure,
    SignedToken,
    SigningConfig,
)
from tokensig.errors import ConfigurationError, UnsupportedAlgorithmError, ValidationError


def test_build_normalizes_algorithm(digest) -> None:
    config = SigningConfig.build("secret", "SHA256", 60, digest=digest)
    assert config.algorithm == "sha256"
    assert config.validity_period == 60


def test_build_rejects_unsupported_algorithm(digest) -> None:
    with pytest.raises(UnsupportedAlgorithmError):
        SigningConfig.build("secret", "rot13", 60, digest=digest)


def test_build_rejects_negative_validity_period(digest) -> None:
    with pytest.raises(ConfigurationError, match="Validity period"):
        SigningConfig.build("secret", "sha256", -1, digest=digest)


def test_config_is_immutable(config) -> None:
    with pytest.raises(dataclasses.FrozenInstanceError):
        config.key = "other"  # type: ignore[misc]


def test_config_repr_masks_key(config) -> None:
    assert "secret" not in repr(config)
    assert "sha256" in repr(config)


def test_request_context_defaults_to_empty() -> None:
    context = RequestContext()
    assert (context.uri, context.timestamp, context.token) == (None, None, None)


def test_create_outcome_failure() -> None:
    outcome = CreateOutcome(failure=SignatureFailure(ErrorKind.VALIDATION, "missing"))
    assert not outcome.ok
    assert outcome.error == "missing"
    with pytest.raises(ValidationError, match="missing"):
        outcome.raise_for_error()


def test_create_outcome_success() -> None:
    signed = SignedToken(token="ab", issued_at=1, uri="/")
    outcome = CreateOutcome(signed=signed)
    assert outcome.ok
    assert outcome.raise_for_error() is signed


def test_check_outcome_truthiness() -> None:
    assert CheckOutcome(valid=True)
    assert not CheckOutcome(valid=False, failure=SignatureFailure(ErrorKind.MISMATCH, "bad"))


def test_failure_kind_maps_to_exception() -> None:
    exc = SignatureFailure(ErrorKind.CONFIGURATION, "No private key has been set").to_exception()
    assert isinstance(exc, ConfigurationError)
    assert str(exc) == "No private key has been set"


def test_error_kind_values() -> None:
    assert [kind.value for kind in ErrorKind] == ["configuration", "validation", "expiry", "mismatch"]
