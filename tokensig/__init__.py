"""tokensig - Iterated-digest request signing and verification.

Issue tokens for a URI and timestamp from a shared key, and verify them
within a validity window.
"""

__version__ = "0.1.0"
__author__ = "tokensig Contributors"

from tokensig.config import Settings, get_settings

__all__ = ["Settings", "get_settings", "__version__"]
