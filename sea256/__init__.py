"""
SEA-256 — Python Implementation

Modules:
- sea256.py   — keyed mixing hash (zero dependencies)
- harness.py  — avalanche / diffusion / collision / preimage measurements
- cli.py      — command-line report (sea256-tester)

Usage:
    from sea256 import sea256, sea256_hex, HashTester

    digest = sea256(b"Hello", b"key")       # 28 bytes
    hex_str = sea256_hex("Hello", "key")    # hex string

    tester = HashTester(sea256)
    tester.avalanche(b"Hello, world", trials=100).average
"""

from .sea256 import DIGEST_SIZE, InvalidKeyError, sea256, sea256_hex, sea256_raw
from .bits import LengthMismatchError, bit_difference, flip_bit, hamming_distance
from .harness import AvalancheResult, CollisionResult, HashTester, PreimageResult

__all__ = [
    'sea256', 'sea256_hex', 'sea256_raw', 'DIGEST_SIZE', 'InvalidKeyError',
    'flip_bit', 'hamming_distance', 'bit_difference', 'LengthMismatchError',
    'HashTester', 'AvalancheResult', 'CollisionResult', 'PreimageResult',
]
__version__ = '1.0.0'
