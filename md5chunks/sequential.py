"""Single-threaded MD5 over a padded message, one 64-byte chunk at a time."""

from __future__ import annotations

from md5chunks.utils import (
    CHUNK_SIZE,
    INITIAL_STATE,
    MASK32,
    K,
    S,
    build_signature,
    left_rotate_32bits,
    preprocess,
    to_little_endian_32,
)

State = tuple[int, int, int, int]


def process_chunk(padded_message: bytes, chunk_start: int, state: State) -> State:
    """Fold one 64-byte chunk into the state and return the new state."""
    chunk = padded_message[chunk_start:chunk_start + CHUNK_SIZE]
    if len(chunk) != CHUNK_SIZE:
        raise ValueError(f"chunk at offset {chunk_start} is shorter than {CHUNK_SIZE} bytes")
    blocks = [
        to_little_endian_32(int.from_bytes(chunk[offset:offset + 4], "big"))
        for offset in range(0, CHUNK_SIZE, 4)
    ]

    a, b, c, d = state
    for i, (k, shift) in enumerate(zip(K, S)):
        if i < 16:
            f = (b & c) | (~b & d)
            g = i
        elif i < 32:
            f = (d & b) | (~d & c)
            g = (5 * i + 1) % 16
        elif i < 48:
            f = b ^ c ^ d
            g = (3 * i + 5) % 16
        else:
            f = c ^ (b | (~d & MASK32))
            g = (7 * i) % 16
        f = (f + a + k + blocks[g]) & MASK32
        a, d, c = d, c, b
        b = (b + left_rotate_32bits(f, shift)) & MASK32

    a0, b0, c0, d0 = state
    return (
        (a0 + a) & MASK32,
        (b0 + b) & MASK32,
        (c0 + c) & MASK32,
        (d0 + d) & MASK32,
    )


def hash_sequential(data: bytes | bytearray | memoryview | str) -> bytes:
    """Return the 16-byte MD5 signature of the data; text is hashed as UTF-8."""
    raw = data.encode("utf-8") if isinstance(data, str) else bytes(data)
    padded = preprocess(raw)
    state: State = INITIAL_STATE
    for start in range(0, len(padded), CHUNK_SIZE):
        state = process_chunk(padded, start, state)
    return build_signature(*state)