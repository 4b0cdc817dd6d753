"""PHP-compatible salted MD5 password encryptor.

Hashes are computed as::

    hash = md5(salt + password)
    repeat factor times: hash = md5(hash + password)
    encoded = encode64(hash, 16)

which is the body of a phpass "portable" hash, without the ``$P$`` prefix,
the log2 round marker or the salt.
"""

from __future__ import annotations

import hmac
import logging
from dataclasses import dataclass, field
from typing import ClassVar

import structlog

from ..core.config import HashingConfig
from ..plugins.base import EncryptorKey
from .digest import DIGEST_SIZE, digest_rounds, iterated_digest
from .encoding import encode64

logger = structlog.wrap_logger(logging.getLogger(__name__))


@dataclass(frozen=True, slots=True)
class PHPMD5SaltedPasswordEncryptor:
    """Iterated salted MD5 with the legacy ``./0-9A-Za-z`` packing."""

    name: ClassVar[EncryptorKey] = "example-salted-php-md5"

    config: HashingConfig = field(default_factory=HashingConfig.build_default)

    def default_factor(self) -> int:
        return self.config.default_factor

    def encrypt(self, password: str, salt: str, factor: int) -> str:
        """Return the 22 character encoded hash."""

        raw = iterated_digest(password, salt, factor)
        logger.debug("hashing.encrypt", factor=factor, rounds=digest_rounds(factor))
        return encode64(raw, DIGEST_SIZE)

    def verify(self, password: str, salt: str, factor: int, expected: str) -> bool:
        """Check ``password`` against a stored ``expected`` hash in constant time."""

        if not expected:
            return False
        computed = self.encrypt(password, salt, factor)
        return hmac.compare_digest(computed.encode("ascii"), expected.encode("utf-8"))


_default_encryptor: PHPMD5SaltedPasswordEncryptor | None = None


def _get_default() -> PHPMD5SaltedPasswordEncryptor:
    global _default_encryptor
    if _default_encryptor is None:
        _default_encryptor = PHPMD5SaltedPasswordEncryptor()
    return _default_encryptor


def default_factor() -> int:
    """Return the default iteration factor."""

    return _get_default().default_factor()


def encrypt(password: str, salt: str, factor: int) -> str:
    """Hash ``password`` with the module-level default encryptor."""

    return _get_default().encrypt(password, salt, factor)


__all__ = ["PHPMD5SaltedPasswordEncryptor", "default_factor", "encrypt"]
