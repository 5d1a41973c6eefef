"""Value objects shared by the signature engine and its callers."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Any

from tokensig.errors import ConfigurationError, ExpiryError, MismatchError, ValidationError

if TYPE_CHECKING:  # pragma: no cover
    from tokensig.app.ports import DigestPort


@dataclass(frozen=True, slots=True)
class SigningConfig:
    """Shared secret, digest algorithm and validity window for one deployment.

    Build instances through :meth:`build` so the algorithm is checked against
    the digest provider once, at configuration time. The key may be empty here;
    a missing key is reported by every signing or verification call instead.
    """

    key: str
    algorithm: str
    validity_period: int

    @classmethod
    def build(
        cls,
        key: str | None,
        algorithm: str,
        validity_period: int,
        *,
        digest: "DigestPort",
    ) -> "SigningConfig":
        """Validate inputs and return an immutable configuration.

        Args:
            key: Shared private key (``None`` is stored as empty)
            algorithm: Digest algorithm name, case-insensitive
            validity_period: Maximum accepted request age in seconds
            digest: Provider whose supported set the algorithm must belong to

        Raises:
            UnsupportedAlgorithmError: If ``digest`` lacks the algorithm
            ConfigurationError: If ``validity_period`` is negative
        """
        if validity_period < 0:
            raise ConfigurationError(
                f"Validity period must be zero or positive, got {validity_period}"
            )
        return cls(
            key=key or "",
            algorithm=digest.normalize(algorithm),
            validity_period=int(validity_period),
        )

    def __repr__(self) -> str:
        return (
            f"SigningConfig(key={'***' if self.key else ''!r}, "
            f"algorithm={self.algorithm!r}, validity_period={self.validity_period})"
        )


@dataclass(slots=True)
class RequestContext:
    """Per-request values supplied before a create or check call."""

    uri: str | None = None
    timestamp: int | None = None
    token: str | None = None


@dataclass(frozen=True, slots=True)
class SignedToken:
    """Token issued for a URI and timestamp."""

    token: str
    issued_at: int
    uri: str

    def as_dict(self) -> dict[str, Any]:
        """Return the payload shape exchanged with peers (``key``/``when``/``uri``)."""

        return {"key": self.token, "when": self.issued_at, "uri": self.uri}


class ErrorKind(str, Enum):
    """Category of a failed signing or verification call."""

    CONFIGURATION = "configuration"
    VALIDATION = "validation"
    EXPIRY = "expiry"
    MISMATCH = "mismatch"


_EXCEPTIONS: dict[ErrorKind, type[Exception]] = {
    ErrorKind.CONFIGURATION: ConfigurationError,
    ErrorKind.VALIDATION: ValidationError,
    ErrorKind.EXPIRY: ExpiryError,
    ErrorKind.MISMATCH: MismatchError,
}


@dataclass(frozen=True, slots=True)
class SignatureFailure:
    """Reason a call did not succeed."""

    kind: ErrorKind
    message: str

    def to_exception(self) -> Exception:
        return _EXCEPTIONS[self.kind](self.message)


@dataclass(frozen=True, slots=True)
class CreateOutcome:
    """Result of :meth:`SignatureEngine.create`."""

    signed: SignedToken | None = None
    failure: SignatureFailure | None = None

    @property
    def ok(self) -> bool:
        return self.failure is None and self.signed is not None

    @property
    def error(self) -> str:
        """Human-readable failure reason, empty on success."""

        return self.failure.message if self.failure is not None else ""

    def raise_for_error(self) -> SignedToken:
        """Return the signed token or raise the exception matching the failure."""

        if self.failure is not None:
            raise self.failure.to_exception()
        assert self.signed is not None
        return self.signed


@dataclass(frozen=True, slots=True)
class CheckOutcome:
    """Result of :meth:`SignatureEngine.check`."""

    valid: bool
    failure: SignatureFailure | None = None

    @property
    def ok(self) -> bool:
        return self.valid

    @property
    def error(self) -> str:
        """Human-readable failure reason, empty on success."""

        return self.failure.message if self.failure is not None else ""

    def __bool__(self) -> bool:
        return self.valid

    def raise_for_error(self) -> None:
        """Raise the exception matching the failure, if any."""

        if self.failure is not None:
            raise self.failure.to_exception()
