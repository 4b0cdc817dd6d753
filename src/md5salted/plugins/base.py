"""Boundary between a host authentication system and a password encryptor.

Only the two calls a host makes into a hashing strategy are described
here. Registration, storage and salt generation stay on the host side.
"""

from __future__ import annotations

from typing import Protocol, TypeAlias, runtime_checkable

EncryptorKey: TypeAlias = str


@runtime_checkable
class PasswordEncryptor(Protocol):
    """Hashing strategy a host calls to hash and re-hash credentials."""

    def default_factor(self) -> int:
        """Iteration factor to use when the host has none configured."""

    def encrypt(self, password: str, salt: str, factor: int) -> str:
        """Return the encoded hash for ``password`` under ``salt`` and ``factor``."""
