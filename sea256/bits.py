"""Bit-level helpers shared by the statistical harness."""


class LengthMismatchError(ValueError):
    """Raised when a Hamming distance is requested for unequal-length values."""


def popcount(x: int) -> int:
    return bin(x).count('1')


def flip_bit(data: bytes, bit_pos: int) -> bytes:
    """
    Return a copy of data with one bit toggled.

    Bit 0 is the most significant bit of the first byte; bit 8 is the most
    significant bit of the second byte, and so on.
    """
    if not 0 <= bit_pos < len(data) * 8:
        raise IndexError(f"bit position {bit_pos} out of range for {len(data)}-byte input")
    modified = bytearray(data)
    modified[bit_pos >> 3] ^= 0x80 >> (bit_pos & 7)
    return bytes(modified)


def hamming_distance(a: bytes, b: bytes) -> int:
    """Count differing bits between two equal-length byte strings."""
    if len(a) != len(b):
        raise LengthMismatchError(f"cannot compare {len(a)}-byte and {len(b)}-byte values")
    return popcount(int.from_bytes(a, 'big') ^ int.from_bytes(b, 'big'))


def bit_difference(a: bytes, b: bytes) -> int:
    """Count differing bits, treating missing trailing bytes of the shorter value as zero."""
    width = max(len(a), len(b))
    a = bytes(a).ljust(width, b'\x00')
    b = bytes(b).ljust(width, b'\x00')
    return popcount(int.from_bytes(a, 'big') ^ int.from_bytes(b, 'big'))
