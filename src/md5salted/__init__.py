"""Legacy PHP salted MD5 password hashing.

``encrypt(password, salt, factor)`` reproduces hashes created by the PHP
portable crypt scheme so hosts can keep verifying credentials migrated
from those systems.

Nothing is logged unless the host configures ``logging`` or calls
:func:`configure_logging`.
"""

from .logging import configure_logging
from .exceptions import AlgorithmUnavailable, HashingError, InvalidArgument
from .plugins import PasswordEncryptor
from .security import PHPMD5SaltedPasswordEncryptor, default_factor, encrypt

__all__ = [
    "AlgorithmUnavailable",
    "HashingError",
    "InvalidArgument",
    "PHPMD5SaltedPasswordEncryptor",
    "PasswordEncryptor",
    "configure_logging",
    "default_factor",
    "encrypt",
]
