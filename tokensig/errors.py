"""Exception hierarchy for token signing and verification."""

from __future__ import annotations


class TokenSigError(Exception):
    """Base exception for tokensig errors."""


class ConfigurationError(TokenSigError, ValueError):
    """Raised when a signing configuration cannot be constructed."""


class UnsupportedAlgorithmError(ConfigurationError):
    """Raised when a digest provider does not offer the requested algorithm."""

    def __init__(self, algorithm: str) -> None:
        super().__init__(f"The algorithm ({algorithm}) selected is not available")
        self.algorithm = algorithm


class ValidationError(TokenSigError):
    """A required request value (URI, timestamp or token) was missing."""


class ExpiryError(TokenSigError):
    """The request timestamp is older than the validity period allows."""


class MismatchError(TokenSigError):
    """The supplied token does not match the derived token."""


class HeaderFormatError(TokenSigError, ValueError):
    """Raised when signature headers cannot be parsed."""
