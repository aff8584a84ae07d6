#!/usr/bin/env python3
"""
SEA-256 — Test Suite

Tests:
  1. Constants verification
  2. Primitives (rotations, mixer)
  3. Determinism
  4. Output size
  5. Uniqueness
  6. Key handling
  7. Avalanche effect
  8. Reference values
"""

import os
import sys

import pytest

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
from sea256.sea256 import (
    DIGEST_SIZE, INITIAL_STATE, MASK32, InvalidKeyError,
    _entangle, _mix_byte, _round_mix, _rotl32, _rotr32, sea256, sea256_hex, sea256_raw,
)
from sea256.bits import hamming_distance

KEY = b"test-key"


def test_constants():
    assert len(INITIAL_STATE) == 7
    assert DIGEST_SIZE == 4 * len(INITIAL_STATE)
    assert all(0 <= w <= MASK32 for w in INITIAL_STATE)
    assert isinstance(INITIAL_STATE, tuple)


def test_rotations():
    assert _rotl32(0x80000000, 1) == 1
    assert _rotr32(1, 1) == 0x80000000
    assert _rotl32(0xDEADBEEF, 0) == 0xDEADBEEF
    assert _rotl32(0xDEADBEEF, 32) == 0xDEADBEEF
    assert _rotr32(0xDEADBEEF, 37) == _rotr32(0xDEADBEEF, 5)
    assert _rotr32(_rotl32(0x12345678, 13), 13) == 0x12345678


def test_mixer_stays_32_bit():
    for b in (0, 1, 0x7FFFFFFF, MASK32):
        for u in (0, 0x41, 0xFF):
            assert 0 <= _mix_byte(b, u) <= MASK32
    assert 0 <= _entangle(0xFF, [MASK32] * 7) <= MASK32


def test_entangle_folds_every_word_in_order():
    words = [0x11111111, 0x22222222, 0x33333333, 0x44444444, 0x55555555, 0x66666666, 0x77777777]
    acc = words[0]
    for w in words[1:]:
        acc = _round_mix((acc + w) & MASK32, 0x61)
    assert _entangle(0x61, words) == acc
    assert _entangle(0x61, tuple(words)) == acc
    assert _entangle(0x61, words[:1]) == words[0]


def test_determinism():
    inputs = [b"", b"a", b"SEA-256", b"Hello, World!", b"\x00" * 100, os.urandom(64)]
    for data in inputs:
        assert sea256(data, KEY) == sea256(data, KEY)


@pytest.mark.parametrize("size", [0, 1, 7, 8, 15, 16, 28, 29, 64, 257])
def test_output_size(size):
    data = os.urandom(size)
    assert len(sea256(data, KEY)) == 28
    assert len(sea256_hex(data, KEY)) == 56


def test_uniqueness():
    inputs = [
        b"a", b"b", b"ab", b"ba", b"abc", b"SEA-256",
        b"SEA-256\x00", b"\x00SEA-256", b"sea-256",
        b"A" * 100, b"A" * 101,
    ]
    hashes = {sea256(data, KEY) for data in inputs}
    assert len(hashes) == len(inputs)


def test_str_and_bytes_agree():
    assert sea256("hello", "test-key") == sea256(b"hello", b"test-key")
    assert sea256("héllo", "k") == sea256("héllo".encode('utf-8'), b"k")
    assert sea256(bytearray(b"hello"), b"test-key") == sea256_raw(b"hello", b"test-key")


def test_output_encoding():
    raw = sea256("hello", "test-key")
    assert sea256("hello", "test-key", 'raw') == raw
    assert sea256("hello", "test-key", 'hex') == raw.hex()
    with pytest.raises(ValueError):
        sea256("hello", "test-key", 'base64')


def test_empty_input_is_initial_state():
    expected = b"".join(w.to_bytes(4, 'big') for w in INITIAL_STATE)
    assert sea256(b"", KEY) == expected
    assert sea256(b"", b"other") == expected
    assert sea256_hex(b"", KEY) == "000aa016ef1048fd0002344b0010689500017bf20000ffff0000ffff"


def test_empty_key_rejected():
    with pytest.raises(InvalidKeyError):
        sea256(b"hello", b"")
    with pytest.raises(InvalidKeyError):
        sea256(b"", "")


def test_wrong_type_rejected():
    with pytest.raises(TypeError):
        sea256(12345, KEY)


def test_key_cycling():
    h = sea256_hex("hello", "x")
    assert h == "5237be376fedab11eb90c684bb77386a2119a433051391f34523c689"
    assert sea256_hex("hello", "xx") == h
    assert sea256_hex("hello", "xxxxxx") == h


def test_key_changes_digest():
    assert sea256(b"hello", b"x") != sea256(b"hello", b"y")


def test_avalanche():
    base = b"SEA-256 avalanche test input"
    h_base = sea256(base, KEY)

    total_diff = 0
    num_flips = 0
    for byte_pos in range(len(base)):
        for bit_pos in range(8):
            modified = bytearray(base)
            modified[byte_pos] ^= (1 << bit_pos)
            total_diff += hamming_distance(h_base, sea256(bytes(modified), KEY))
            num_flips += 1

    avg_diff = total_diff / num_flips
    assert 0.2 * 224 < avg_diff < 0.8 * 224


@pytest.mark.parametrize("data, key, expected", [
    (b"hello", b"test-key", "c9e94976a2bbc2700810edecb5721e7d6c8108042daf67558aa0edd6"),
    (b"hellp", b"test-key", "deb5d1c642165c2712fd7646f7091fa50fe82f183db9a8d59aa0d081"),
    (b"a", b"k", "f906d23419a95272db28b3fae441000a7731d69fa62192235ae01598"),
    (b"abc", b"k", "9296a9efd9ed6ecb6d353c0809ed56350b837ded5faa2470092f3301"),
    (b"A" * 100, b"k", "7fce35e9c1d65b945150d3ee52da4ef73878bfa7fb2685b2719ce9aa"),
    (b"\x00", b"\x00", "004bf5c76c3b2f9e9b7bb0f17c1a1adea663e98b319a6e0af9594002"),
])
def test_reference_values(data, key, expected):
    assert sea256_hex(data, key) == expected


def test_reference_neighbours_differ():
    a = sea256("hello", "test-key")
    b = sea256("hellp", "test-key")
    assert hamming_distance(a, b) == 100
