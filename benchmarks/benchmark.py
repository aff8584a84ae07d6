#!/usr/bin/env python3
"""
SEA-256 — Benchmark Suite

Compares SEA-256 against common hash algorithms:
  Keyed / cryptographic: HMAC-SHA-256, BLAKE2b (keyed), SHA-224
  Non-cryptographic:     xxHash64, MurmurHash3 (seeded), CRC32

xxhash and mmh3 are optional (pip install .[bench]).
"""

import hashlib
import hmac
import os
import sys
import time
import zlib

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
from sea256 import sea256_raw

KEY = b"test-key"


def bench(name, func, data, iterations):
    for _ in range(min(3, iterations)):
        func(data)

    start = time.perf_counter()
    for _ in range(iterations):
        func(data)
    elapsed = time.perf_counter() - start

    ms_per_iter = (elapsed / iterations) * 1000
    bytes_per_sec = len(data) / (elapsed / iterations) if elapsed > 0 else 0

    return {
        'name': name,
        'ms_per_iter': ms_per_iter,
        'kb_per_sec': bytes_per_sec / 1024,
        'total_time': elapsed,
        'iterations': iterations,
    }


def hash_sea256(data): return sea256_raw(data, KEY)
def hash_hmac_sha256(data): return hmac.new(KEY, data, hashlib.sha256).digest()
def hash_blake2b(data): return hashlib.blake2b(data, key=KEY, digest_size=28).digest()
def hash_sha224(data): return hashlib.sha224(KEY + data).digest()
def hash_crc32(data): return zlib.crc32(data, zlib.crc32(KEY)).to_bytes(4, 'big')

def hash_xxh64(data):
    import xxhash
    return xxhash.xxh64(data, seed=zlib.crc32(KEY)).digest()

def hash_mmh3_128(data):
    import mmh3
    return mmh3.hash128(data, zlib.crc32(KEY)).to_bytes(16, 'big')


def run_benchmark(data_size_bytes, iterations):
    data = os.urandom(data_size_bytes)

    print(f"\n{'='*78}")
    print(f"  Benchmark: {format_size(data_size_bytes)} input | {iterations} iterations")
    print(f"{'='*78}")
    print(f"  {'Algorithm':<24} {'Output':>8} {'ms/iter':>10} {'KB/s':>14}")
    print(f"  {'-'*24} {'-'*8} {'-'*10} {'-'*14}")

    algorithms = [
        ('SEA-256 (Python)', hash_sea256, 224),
        ('HMAC-SHA-256', hash_hmac_sha256, 256),
        ('BLAKE2b-224 (keyed)', hash_blake2b, 224),
        ('SHA-224 (prefix key)', hash_sha224, 224),
    ]

    try:
        import xxhash  # noqa: F401
        algorithms.append(('xxHash64', hash_xxh64, 64))
    except ImportError:
        pass

    try:
        import mmh3  # noqa: F401
        algorithms.append(('MurmurHash3-128', hash_mmh3_128, 128))
    except ImportError:
        pass

    algorithms.append(('CRC32', hash_crc32, 32))

    results = []
    for name, func, bits in algorithms:
        # SEA-256 runs 126 mixer calls per input byte; scale its iterations down
        iters = max(1, iterations // 1000) if 'SEA' in name else iterations
        r = bench(name, func, data, iters)
        r['bits'] = bits
        results.append(r)
        marker = '***' if 'SEA' in name else '   '
        print(f"  {marker} {name:<21} {bits:>5} bit {r['ms_per_iter']:>9.4f}ms {r['kb_per_sec']:>12.1f}")

    return results


def format_size(n):
    if n >= 1024 * 1024:
        return f"{n / (1024*1024):.0f} MB"
    elif n >= 1024:
        return f"{n / 1024:.0f} KB"
    else:
        return f"{n} B"


def print_ranking(all_results):
    print(f"\n{'='*78}")
    print("  RANKING (by throughput)")
    print(f"{'='*78}")

    for size_label, results in all_results:
        print(f"\n  [{size_label}]")
        for r in sorted(results, key=lambda x: x['kb_per_sec'], reverse=True):
            print(f"    {r['name']:<24} {r['kb_per_sec']:>12.1f} KB/s")


if __name__ == '__main__':
    print("=" * 78)
    print("  SEA-256 — Performance Benchmark")
    print("=" * 78)

    all_results = []

    configs = [
        (16, 100000),
        (64, 50000),
        (1024, 10000),
    ]

    for data_size, iters in configs:
        results = run_benchmark(data_size, iters)
        all_results.append((format_size(data_size), results))

    print_ranking(all_results)

    print(f"\n{'='*78}")
    print("  Benchmark complete.")
    print(f"{'='*78}")
