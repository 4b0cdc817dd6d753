"""Error taxonomy for the salted MD5 password scheme."""

from __future__ import annotations

__all__ = [
    "HashingError",
    "InvalidArgument",
    "AlgorithmUnavailable",
    "ensure_factor",
]


class HashingError(Exception):
    """Base class for password hashing failures."""


class InvalidArgument(HashingError, ValueError):
    """Raised when a caller passes an out-of-contract value (e.g. ``factor <= 0``)."""


class AlgorithmUnavailable(HashingError, RuntimeError):
    """Raised when the runtime cannot provide the digest primitive."""


def ensure_factor(factor: object) -> int:
    """Return ``factor`` if it is a positive integer, otherwise raise :class:`InvalidArgument`."""

    if isinstance(factor, bool) or not isinstance(factor, int) or factor <= 0:
        raise InvalidArgument(f"Invalid factor value [{factor}]")
    return factor
