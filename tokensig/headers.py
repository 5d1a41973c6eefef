"""HTTP header transport for issued tokens."""

from __future__ import annotations

from collections.abc import Mapping

from tokensig.app import RequestContext, SignedToken
from tokensig.errors import HeaderFormatError

HEADER_TOKEN = "X-Hmac-Key"
HEADER_TIMESTAMP = "X-Hmac-Timestamp"
HEADER_URI = "X-Hmac-Uri"


def to_headers(signed: SignedToken) -> dict[str, str]:
    """Return the headers a client attaches to a signed request."""

    return {
        HEADER_TOKEN: signed.token,
        HEADER_TIMESTAMP: str(signed.issued_at),
        HEADER_URI: signed.uri,
    }


def context_from_headers(
    headers: Mapping[str, str],
    *,
    uri: str | None = None,
) -> RequestContext:
    """Build a verification context from received headers.

    Header names are matched case-insensitively. Missing headers leave the
    corresponding field unset so verification reports them.

    Args:
        headers: Received request headers
        uri: URI the server observed; overrides the ``X-Hmac-Uri`` header

    Raises:
        HeaderFormatError: If the timestamp header is not an integer
    """
    lowered = {name.lower(): value for name, value in headers.items()}

    timestamp: int | None = None
    raw_timestamp = lowered.get(HEADER_TIMESTAMP.lower())
    if raw_timestamp is not None:
        try:
            timestamp = int(raw_timestamp.strip())
        except ValueError as exc:
            raise HeaderFormatError(
                f"{HEADER_TIMESTAMP} must be an integer Unix timestamp, got {raw_timestamp!r}"
            ) from exc

    return RequestContext(
        uri=uri if uri is not None else lowered.get(HEADER_URI.lower()),
        timestamp=timestamp,
        token=lowered.get(HEADER_TOKEN.lower()),
    )
