"""
SEA-256 — Pure Python Keyed Mixing Hash

Experimental keyed byte-mixing hash. Not a cryptographic primitive: its
quality is measured by the statistical harness (see harness.py), not proven.

Structure:
  C1: 7-word 32-bit state, cloned per call from INITIAL_STATE
  C2: Byte mixer (rotl/rotr linear layer + masked nonlinear gamma)
  C3: Round amplifier (ROUNDS_PER_BYTE passes of the byte mixer)
  C4: Cross-word entangler (pairwise fold of all state words)
  C5: Cyclic keystream (key byte at position i mod len(key), i 1-indexed)
  C6: Big-endian serialization (7 x 32-bit words -> 28 bytes)

State words are updated in order 0..6 and every update reads the live state,
so word j sees the words 0..j-1 already rewritten for the same input byte.
"""

import struct

MASK32 = 0xFFFFFFFF
DIGEST_SIZE = 28

# Initial state: integer parts of a few physical quantities and square roots
# of primes just below 2**32.
INITIAL_STATE = (
    696342,       # solar radius, km
    4010821885,   # solar luminosity mod 0xFFFFFFFF
    144459,       # isqrt(4.5682 * 4568200000)
    1075349,      # isqrt(1156377600000)
    97266,        # isqrt(9460730472)
    65535,        # isqrt(4294967231)
    65535,        # isqrt(4294967279)
)

# Nonlinear layer constants
SCALE = 0xB7E15162
GROW = 0x9E3779B9
FLIP = 0x7F4A7C15
COLLAPSE = 0x243F6A88

ROT_LEFT = 5
ROT_RIGHT = 3
NL_SHIFT = 7
ROUNDS_PER_BYTE = 3

_STATE_PACK = struct.Struct('>%dI' % len(INITIAL_STATE)).pack


class InvalidKeyError(ValueError):
    """Raised when sea256 is called with an empty key."""


def _rotl32(x, r):
    r &= 31
    return ((x << r) | (x >> (32 - r))) & MASK32


def _rotr32(x, r):
    r &= 31
    return ((x >> r) | (x << (32 - r))) & MASK32


def _nonlinear(alpha, beta, u):
    zeta = (alpha ^ beta) + (alpha & beta)
    z = ((SCALE * zeta) << 3) & MASK32
    z = (z + u * GROW) & MASK32
    z = _rotl32(z ^ FLIP, NL_SHIFT)
    return z & COLLAPSE


def _mix_byte(b, u):
    alpha = _rotl32(b ^ u, ROT_LEFT)
    beta = _rotr32((b + u) & MASK32, ROT_RIGHT)
    gamma = _nonlinear(alpha, beta, u)
    return (alpha + beta + gamma) & MASK32


def _round_mix(b, u):
    for _ in range(ROUNDS_PER_BYTE):
        b = _mix_byte(b, u)
    return b


def _entangle(u, words):
    acc = words[0]
    for j in range(1, len(words)):
        acc = _round_mix((acc + words[j]) & MASK32, u)
    return acc


def _as_bytes(value, name):
    if isinstance(value, str):
        return value.encode('utf-8')
    if isinstance(value, (bytes, bytearray, memoryview)):
        return bytes(value)
    raise TypeError(f"{name} must be bytes or str, not {type(value).__name__}")


def sea256_raw(data: bytes, key: bytes) -> bytes:
    """Hash raw bytes under a raw key. Returns 28 bytes."""
    key_len = len(key)
    if key_len == 0:
        raise InvalidKeyError("sea256 requires a non-empty key")

    state = list(INITIAL_STATE)
    n_words = len(state)
    mask = MASK32
    entangle = _entangle

    for i, u in enumerate(data, 1):
        k = key[i % key_len]
        for j in range(n_words):
            state[j] = (entangle(u, state) + k) & mask

    return _STATE_PACK(*state)


def sea256(data, key, encoding=None):
    """
    Compute the SEA-256 digest of data under key.

    Args:
        data: Input bytes, or str (encoded as UTF-8)
        key: Non-empty key bytes, or str (encoded as UTF-8)
        encoding: None or 'raw' for bytes, 'hex' for a hex string

    Returns:
        28-byte digest, or 56-character hex string
    """
    if encoding not in (None, 'raw', 'hex'):
        raise ValueError(f"unsupported output encoding: {encoding!r}")
    digest = sea256_raw(_as_bytes(data, 'data'), _as_bytes(key, 'key'))
    if encoding == 'hex':
        return digest.hex()
    return digest


def sea256_hex(data, key) -> str:
    """Return hex string representation of SEA-256."""
    return sea256(data, key, 'hex')


if __name__ == '__main__':
    import sys
    if len(sys.argv) < 3:
        print("usage: sea256.py <input> <key>", file=sys.stderr)
        sys.exit(2)
    print(sea256_hex(sys.argv[1], sys.argv[2]))
