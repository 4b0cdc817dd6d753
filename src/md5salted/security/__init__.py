"""Salted MD5 hashing: digest engine, encoder and the encryptor built on them."""

from .digest import iterated_digest, md5_factory
from .encoding import HASH_LENGTH, ITOA64, encode64
from .passwords import PHPMD5SaltedPasswordEncryptor, default_factor, encrypt

__all__ = [
    "HASH_LENGTH",
    "ITOA64",
    "PHPMD5SaltedPasswordEncryptor",
    "default_factor",
    "encode64",
    "encrypt",
    "iterated_digest",
    "md5_factory",
]
