"""Shared MD5 constants and low-level helpers: rotation, byte order, padding, output."""

from __future__ import annotations

import sys
from collections.abc import Iterable

MASK32 = 0xFFFFFFFF
MASK64 = 0xFFFFFFFFFFFFFFFF

S: tuple[int, ...] = (
    7, 12, 17, 22, 7, 12, 17, 22, 7, 12, 17, 22, 7, 12, 17, 22,
    5, 9, 14, 20, 5, 9, 14, 20, 5, 9, 14, 20, 5, 9, 14, 20,
    4, 11, 16, 23, 4, 11, 16, 23, 4, 11, 16, 23, 4, 11, 16, 23,
    6, 10, 15, 21, 6, 10, 15, 21, 6, 10, 15, 21, 6, 10, 15, 21,
)

K: tuple[int, ...] = (
    3614090360, 3905402710, 606105819, 3250441966, 4118548399, 1200080426,
    2821735955, 4249261313, 1770035416, 2336552879, 4294925233, 2304563134,
    1804603682, 4254626195, 2792965006, 1236535329, 4129170786, 3225465664,
    643717713, 3921069994, 3593408605, 38016083, 3634488961, 3889429448,
    568446438, 3275163606, 4107603335, 1163531501, 2850285829, 4243563512,
    1735328473, 2368359562, 4294588738, 2272392833, 1839030562, 4259657740,
    2763975236, 1272893353, 4139469664, 3200236656, 681279174, 3936430074,
    3572445317, 76029189, 3654602809, 3873151461, 530742520, 3299628645,
    4096336452, 1126891415, 2878612391, 4237533241, 1700485571, 2399980690,
    4293915773, 2240044497, 1873313359, 4264355552, 2734768916, 1309151649,
    4149444226, 3174756917, 718787259, 3951481745,
)

INITIAL_STATE: tuple[int, int, int, int] = (0x67452301, 0xEFCDAB89, 0x98BADCFE, 0x10325476)

SIGNATURE_SIZE = 16
CHUNK_SIZE = 64


def left_rotate_32bits(n: int, rotate: int) -> int:
    """Rotate a 32-bit word left; the rotation count is taken modulo 32."""
    n &= MASK32
    r = rotate % 32
    return ((n << r) | (n >> (32 - r))) & MASK32


def is_big_endian() -> bool:
    """Whether the host stores integers most significant byte first."""
    return sys.byteorder == "big"


def _byteswap(n: int, width: int) -> int:
    return int.from_bytes(n.to_bytes(width, "big"), "little")


def to_little_endian_32(n: int) -> int:
    """Swap the bytes of a 32-bit word on a little-endian host; unchanged otherwise."""
    n &= MASK32
    return n if is_big_endian() else _byteswap(n, 4)


def to_little_endian_64(n: int) -> int:
    """Swap the bytes of a 64-bit word on a little-endian host; unchanged otherwise."""
    n &= MASK64
    return n if is_big_endian() else _byteswap(n, 8)


def sig2hex(sig: Iterable[int]) -> str:
    """Render a 16-byte signature as lower-case hexadecimal."""
    raw = bytes(sig)
    if len(raw) != SIGNATURE_SIZE:
        raise ValueError(f"signature must be {SIGNATURE_SIZE} bytes, got {len(raw)}")
    return raw.hex()


def preprocess(data: bytes) -> bytes:
    """Pad a message to a multiple of 64 bytes: a 1 bit, zeros, then the bit length."""
    size = len(data)
    if size % CHUNK_SIZE < 56:
        padded_size = size + CHUNK_SIZE - size % CHUNK_SIZE
    else:
        padded_size = size + 2 * CHUNK_SIZE - size % CHUNK_SIZE
    zeros = padded_size - size - 1 - 8
    bit_length = to_little_endian_64(size * 8)
    return bytes(data) + b"\x80" + bytes(zeros) + bit_length.to_bytes(8, "big")


def build_signature(a0: int, b0: int, c0: int, d0: int) -> bytes:
    """Lay out the final four state words as the 16-byte signature."""
    return b"".join((word & MASK32).to_bytes(4, "little") for word in (a0, b0, c0, d0))