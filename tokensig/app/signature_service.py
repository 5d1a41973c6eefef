"""Token derivation, signing and verification."""

from __future__ import annotations

import hmac
import logging
from dataclasses import dataclass

from tokensig.app.models import (
    CheckOutcome,
    CreateOutcome,
    ErrorKind,
    RequestContext,
    SignatureFailure,
    SignedToken,
    SigningConfig,
)
from tokensig.app.ports import ClockPort, DigestPort
from tokensig.utils.hashing import iterate_digest

logger = logging.getLogger(__name__)

# Fixed work factor; peers must use the same rounds to interoperate.
REQUEST_ROUNDS = 10
KEY_ROUNDS = 10
FINAL_ROUNDS = 100

NO_KEY_MESSAGE = "No private key has been set"
NO_TOKEN_MESSAGE = "An attempt to assign a null HMAC key was detected"
NO_URI_MESSAGE = "No URI was set when an HMAC check was attempted"
NO_TIMESTAMP_MESSAGE = "No TimeStamp was set when an HMAC check was attempted"
EXPIRED_MESSAGE = "The request has taken to long"
MISMATCH_MESSAGE = "HMAC is invalid"


@dataclass(slots=True)
class SignatureEngine:
    """Derive tokens for (URI, timestamp) pairs and verify received tokens.

    The engine holds no per-call state: failures are returned inside
    :class:`CreateOutcome` / :class:`CheckOutcome`, so a single instance may be
    shared across threads. Each call takes its own :class:`RequestContext`.
    """

    digest: DigestPort
    clock: ClockPort

    def derive(self, config: SigningConfig, uri: str, timestamp: int) -> str:
        """Derive the token for ``uri`` at ``timestamp`` under ``config``.

        The request branch hashes ``"<uri>@<timestamp>"`` and the key branch
        hashes the key; each is re-hashed independently before both are joined
        with ``"-"`` and re-hashed again.
        """
        algorithm = config.algorithm

        request_hash = self.digest.digest(algorithm, f"{uri}@{timestamp}".encode("utf-8"))
        request_hash = iterate_digest(self.digest, algorithm, request_hash, REQUEST_ROUNDS)

        key_hash = self.digest.digest(algorithm, config.key.encode("utf-8"))
        key_hash = iterate_digest(self.digest, algorithm, key_hash, KEY_ROUNDS)

        final_hash = self.digest.digest(
            algorithm, f"{request_hash}-{key_hash}".encode("utf-8")
        )
        return iterate_digest(self.digest, algorithm, final_hash, FINAL_ROUNDS)

    def create(self, config: SigningConfig, context: RequestContext) -> CreateOutcome:
        """Issue a token for the URI and timestamp held by ``context``."""

        failure = self._check_input(config, context, require_token=False)
        if failure is None:
            failure = self._check_window(config, context)
        if failure is not None:
            logger.debug("Token creation refused (%s): %s", failure.kind.value, failure.message)
            return CreateOutcome(failure=failure)

        assert context.uri is not None and context.timestamp is not None
        token = self.derive(config, context.uri, context.timestamp)
        return CreateOutcome(
            signed=SignedToken(token=token, issued_at=context.timestamp, uri=context.uri)
        )

    def check(self, config: SigningConfig, context: RequestContext) -> CheckOutcome:
        """Verify the token held by ``context`` against a fresh derivation."""

        failure = self._check_input(config, context, require_token=True)
        if failure is None:
            failure = self._check_window(config, context)
        if failure is None:
            assert context.uri is not None and context.timestamp is not None
            assert context.token is not None
            expected = self.derive(config, context.uri, context.timestamp)
            if not hmac.compare_digest(
                expected.encode("utf-8"), context.token.encode("utf-8")
            ):
                failure = SignatureFailure(ErrorKind.MISMATCH, MISMATCH_MESSAGE)

        if failure is not None:
            logger.debug(
                "Token verification failed for %s (%s): %s",
                context.uri,
                failure.kind.value,
                failure.message,
            )
            return CheckOutcome(valid=False, failure=failure)
        return CheckOutcome(valid=True)

    # ---------------------------------------------------------------------#
    # Internal helpers
    # ---------------------------------------------------------------------#

    @staticmethod
    def _check_input(
        config: SigningConfig, context: RequestContext, *, require_token: bool
    ) -> SignatureFailure | None:
        """Return the first missing-value failure, checked in a fixed order."""

        if not config.key:
            return SignatureFailure(ErrorKind.CONFIGURATION, NO_KEY_MESSAGE)
        if require_token and context.token is None:
            return SignatureFailure(ErrorKind.VALIDATION, NO_TOKEN_MESSAGE)
        if context.uri is None:
            return SignatureFailure(ErrorKind.VALIDATION, NO_URI_MESSAGE)
        if context.timestamp is None:
            return SignatureFailure(ErrorKind.VALIDATION, NO_TIMESTAMP_MESSAGE)
        return None

    def _check_window(
        self, config: SigningConfig, context: RequestContext
    ) -> SignatureFailure | None:
        # Applies to create() as well as check(); a stale timestamp cannot be signed.
        assert context.timestamp is not None
        elapsed = self.clock.now() - context.timestamp
        if elapsed > config.validity_period:
            return SignatureFailure(ErrorKind.EXPIRY, EXPIRED_MESSAGE)
        return None
