"""Application layer for tokensig.

This layer holds the signing domain logic without direct clock or hash
library access. All side effects are delegated to adapters via port interfaces.
"""

__all__ = [
    "CheckOutcome",
    "CreateOutcome",
    "ErrorKind",
    "RequestContext",
    "SignatureEngine",
    "SignatureFailure",
    "SignedToken",
    "SigningConfig",
]

from tokensig.app.models import (
    CheckOutcome,
    CreateOutcome,
    ErrorKind,
    RequestContext,
    SignatureFailure,
    SignedToken,
    SigningConfig,
)
from tokensig.app.signature_service import SignatureEngine
