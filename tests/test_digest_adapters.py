"""Tests for digest and clock adapters."""

import hashlib

import pytest

from tokensig.app.adapters import (
    CryptographyDigestAdapter,
    FixedClock,
    HashlibDigestAdapter,
    SystemClock,
    canonical_algorithm_name,
)
from tokensig.errors import ConfigurationError, UnsupportedAlgorithmError


@pytest.fixture(params=[HashlibDigestAdapter, CryptographyDigestAdapter], ids=["hashlib", "cryptography"])
def adapter(request):
    return request.param()


def test_canonical_algorithm_name() -> None:
    assert canonical_algorithm_name(" SHA256 ") == "sha256"
    assert canonical_algorithm_name("SHA3-256") == "sha3_256"
    assert canonical_algorithm_name("sha512/256") == "sha512_256"
    assert canonical_algorithm_name("SHA512/224") == "sha512_224"


def test_common_algorithms_supported(adapter) -> None:
    supported = adapter.supported_algorithms()
    assert {"sha1", "sha256", "sha512", "sha3_256"} <= supported
    assert all(name == name.lower() for name in supported)


def test_normalize_is_case_insensitive(adapter) -> None:
    assert adapter.normalize("SHA256") == "sha256"
    assert adapter.normalize("Sha3-512") == "sha3_512"


def test_normalize_rejects_unknown_algorithm(adapter) -> None:
    with pytest.raises(UnsupportedAlgorithmError, match=r"The algorithm \(nope\) selected is not available"):
        adapter.normalize("nope")


def test_unsupported_algorithm_is_a_configuration_error(adapter) -> None:
    with pytest.raises(ConfigurationError):
        adapter.normalize("whirlpool-9000")
    with pytest.raises(ValueError):
        adapter.normalize("whirlpool-9000")


def test_digest_rejects_unknown_algorithm(adapter) -> None:
    with pytest.raises(UnsupportedAlgorithmError):
        adapter.digest("nope", b"data")


def test_digest_matches_hashlib(adapter) -> None:
    for name in ("md5", "sha1", "sha256", "sha512", "sha3_256", "blake2b", "blake2s"):
        if name not in adapter.supported_algorithms():
            continue
        assert adapter.digest(name, b"abc") == hashlib.new(name, b"abc").hexdigest()


def test_digest_is_lowercase_fixed_length_hex(adapter) -> None:
    first = adapter.digest("sha256", b"")
    second = adapter.digest("SHA256", b"a much longer input " * 50)
    assert len(first) == len(second) == 64
    assert first == first.lower()


def test_hashlib_adapter_skips_variable_length_digests() -> None:
    supported = HashlibDigestAdapter().supported_algorithms()
    assert not any(name.startswith("shake") for name in supported)


def test_hashlib_adapter_skips_unconstructible_digests() -> None:
    adapter = HashlibDigestAdapter(["sha256", "definitely-not-a-digest", "shake_128"])
    assert adapter.supported_algorithms() == frozenset({"sha256"})


def test_adapter_names() -> None:
    assert HashlibDigestAdapter.name == "hashlib"
    assert CryptographyDigestAdapter.name == "cryptography"


def test_fixed_clock_advances() -> None:
    clock = FixedClock(1000)
    assert clock.now() == 1000
    clock.advance(30)
    assert clock.now() == 1030


def test_system_clock_returns_whole_seconds() -> None:
    value = SystemClock().now()
    assert isinstance(value, int)
    assert value > 1_600_000_000


def test_normalize_accepts_php_slash_names(adapter) -> None:
    if "sha512_256" not in adapter.supported_algorithms():
        pytest.skip("sha512/256 unavailable in this build")
    assert adapter.normalize("sha512/256") == "sha512_256"
    assert adapter.digest("SHA512/256", b"abc") == adapter.digest("sha512_256", b"abc")


def test_cryptography_adapter_offers_sm3_when_openssl_does() -> None:
    if "sm3" not in HashlibDigestAdapter().supported_algorithms():
        pytest.skip("local OpenSSL build has no SM3")
    adapter = CryptographyDigestAdapter()
    assert "sm3" in adapter.supported_algorithms()
    assert adapter.digest("sm3", b"abc") == hashlib.new("sm3", b"abc").hexdigest()


def test_cryptography_adapter_skips_unavailable_digests(monkeypatch) -> None:
    from cryptography.exceptions import UnsupportedAlgorithm

    import tokensig.app.adapters.digest as digest_module

    def unavailable():
        raise UnsupportedAlgorithm("not in this build")

    monkeypatch.setitem(digest_module._CRYPTOGRAPHY_ALGORITHMS, "sm3", unavailable)

    assert "sm3" not in CryptographyDigestAdapter().supported_algorithms()
