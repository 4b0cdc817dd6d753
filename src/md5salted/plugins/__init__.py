"""Interfaces a host system uses to call into password encryptors."""

from .base import EncryptorKey, PasswordEncryptor

__all__ = ["EncryptorKey", "PasswordEncryptor"]
