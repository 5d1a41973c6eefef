"""Utilities for signing key files."""

from __future__ import annotations

import os
import secrets
from pathlib import Path


def _write_secure_file(path: Path, data: bytes, *, mode: int = 0o600) -> None:
    """Write ``data`` to ``path`` and restrict permissions.

    Args:
        path: Target file path
        data: Bytes to persist
        mode: File mode to apply (POSIX style)
    """
    path.parent.mkdir(parents=True, exist_ok=True)

    fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, mode)
    try:
        os.write(fd, data)
    finally:
        os.close(fd)

    try:
        os.chmod(path, mode)
    except PermissionError:
        # Windows may not support POSIX-style chmod; best effort only.
        pass


def load_or_create_signing_key(path: Path, *, length: int = 32) -> str:
    """Load a shared signing key from ``path`` or generate a new random one.

    Keys are stored as text; surrounding whitespace (such as a trailing
    newline added by an editor) is ignored.

    Args:
        path: Key file location
        length: Number of random bytes behind a newly generated hex key

    Returns:
        The key as a string.
    """
    try:
        return path.read_text(encoding="utf-8").strip()
    except FileNotFoundError:
        key = secrets.token_hex(length)
        _write_secure_file(path, key.encode("utf-8"))
        return key
