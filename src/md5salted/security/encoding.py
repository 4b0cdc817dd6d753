"""Base64-like encoding used by PHP ``crypt`` style MD5 hashes.

The alphabet order and the group loop below must not change: existing
hashes in the wild were produced with exactly this packing, and any other
variant produces strings that no longer verify.
"""

from __future__ import annotations

from .digest import DIGEST_SIZE

ITOA64 = "./0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz"
HASH_LENGTH = 22


def encode64(src: bytes | bytearray | memoryview, count: int = DIGEST_SIZE) -> str:
    """Encode the first ``count`` bytes of ``src``.

    Input shorter than ``count`` is treated as if padded with zero bytes.
    Each group reads up to three bytes into a 24-bit accumulator (low byte
    first) and emits one character per six bits. A trailing partial group
    still emits the character covering the bits folded in so far.
    """

    if count < 0:
        raise ValueError(f"count must be non-negative, got {count}")
    if count == 0:
        return ""

    data = bytes(src[:count]).ljust(count, b"\x00")
    output: list[str] = []
    i = 0
    while i < count:
        value = data[i]
        i += 1
        output.append(ITOA64[value & 0x3F])
        if i < count:
            value |= data[i] << 8
        output.append(ITOA64[(value >> 6) & 0x3F])
        if i >= count:
            break
        i += 1
        if i < count:
            value |= data[i] << 16
        output.append(ITOA64[(value >> 12) & 0x3F])
        if i >= count:
            break
        i += 1
        output.append(ITOA64[(value >> 18) & 0x3F])
    return "".join(output)


__all__ = ["HASH_LENGTH", "ITOA64", "encode64"]
