"""Iterated salted MD5 digest."""

from __future__ import annotations

import hashlib
import logging
from typing import Callable, Protocol

import structlog

from ..exceptions import AlgorithmUnavailable, InvalidArgument, ensure_factor

logger = structlog.wrap_logger(logging.getLogger(__name__))

DIGEST_ALGORITHM = "md5"
DIGEST_SIZE = 16


class _Digest(Protocol):
    def update(self, data: bytes, /) -> None: ...

    def digest(self) -> bytes: ...


def _to_bytes(value: str | bytes) -> bytes:
    if isinstance(value, str):
        return value.encode("utf-8")
    return bytes(value)


def md5_factory() -> Callable[[], _Digest]:
    """Return a constructor for fresh MD5 objects.

    Raises :class:`AlgorithmUnavailable` when the interpreter's hashlib
    backend refuses MD5 (FIPS-restricted OpenSSL builds, for instance).
    """

    try:
        hashlib.new(DIGEST_ALGORITHM, usedforsecurity=False)
    except (ValueError, TypeError) as exc:
        logger.error(
            "hashing.algorithm_unavailable",
            algorithm=DIGEST_ALGORITHM,
            error=str(exc),
        )
        raise AlgorithmUnavailable(f"No such algorithm [{DIGEST_ALGORITHM.upper()}]") from exc

    def _new() -> _Digest:
        return hashlib.new(DIGEST_ALGORITHM, usedforsecurity=False)

    return _new


def digest_rounds(factor: int) -> int:
    """Number of MD5 computations a single :func:`iterated_digest` call performs."""

    return ensure_factor(factor) + 1


def iterated_digest(password: str | bytes, salt: str | bytes, factor: int) -> bytes:
    """Return the 16-byte raw hash for ``password`` and ``salt``.

    The seed round hashes ``salt + password``; each of the ``factor``
    following rounds hashes ``previous + password``.
    """

    try:
        ensure_factor(factor)
    except InvalidArgument:
        logger.warning("hashing.invalid_factor", factor=factor)
        raise
    new_md5 = md5_factory()

    secret = _to_bytes(password)
    ctx = new_md5()
    ctx.update(_to_bytes(salt) + secret)
    raw = ctx.digest()
    for _ in range(factor):
        ctx = new_md5()
        ctx.update(raw + secret)
        raw = ctx.digest()
    return raw


__all__ = [
    "DIGEST_ALGORITHM",
    "DIGEST_SIZE",
    "digest_rounds",
    "iterated_digest",
    "md5_factory",
]
