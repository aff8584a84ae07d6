"""
SEA-256 — Statistical Harness

Measures the quality of any keyed hash function with the contract
``hash_fn(data: bytes, key: bytes) -> bytes``:

  - avalanche: Hamming distance after random single-bit flips
  - diffusion: fraction of digest bits changed by a sequential bit sweep
  - collision: repeated digests over random fixed-size inputs
  - preimage:  bounded brute-force search for a target digest

All measurements use one fixed testing key so results are comparable
between runs. Randomness comes from an injectable ``random.Random``; pass a
seeded instance for reproducible results.
"""

import logging
import random
from typing import Callable, List, NamedTuple, Optional

from .bits import bit_difference, flip_bit, hamming_distance

logger = logging.getLogger(__name__)

HashFunction = Callable[[bytes, bytes], bytes]

DEFAULT_TESTING_KEY = b"test-key"


class AvalancheResult(NamedTuple):
    average: float
    distances: List[int]

    def as_dict(self):
        return {'average': self.average, 'distances': list(self.distances)}


class CollisionResult(NamedTuple):
    collisions: int
    iterations: int

    def as_dict(self):
        return {'collisions': self.collisions, 'iterations': self.iterations}


class PreimageResult(NamedTuple):
    """found=False means the attempt budget was exhausted; tries is then the budget."""
    found: bool
    tries: int
    candidate: Optional[bytes] = None

    def as_dict(self):
        return {
            'found': self.found,
            'tries': self.tries,
            'candidate': self.candidate.hex() if self.candidate is not None else None,
        }


def _check_count(name, value):
    if value < 0:
        raise ValueError(f"{name} must be non-negative, got {value}")


class HashTester:
    """Runs quality measurements against a keyed hash function."""

    def __init__(self, hash_fn: HashFunction, testing_key=DEFAULT_TESTING_KEY,
                 rng: Optional[random.Random] = None):
        if isinstance(testing_key, str):
            testing_key = testing_key.encode('utf-8')
        self.hash_fn = hash_fn
        self.testing_key = bytes(testing_key)
        self.rng = rng if rng is not None else random.Random()

    def digest(self, data: bytes) -> bytes:
        """Hash data under the testing key, normalising hex-string digests to bytes."""
        result = self.hash_fn(data, self.testing_key)
        if isinstance(result, str):
            return bytes.fromhex(result)
        if not isinstance(result, (bytes, bytearray, memoryview)):
            raise TypeError(f"hash function returned {type(result).__name__}, expected bytes or hex str")
        return bytes(result)

    def _random_bytes(self, n):
        return self.rng.getrandbits(n * 8).to_bytes(n, 'big')

    def avalanche(self, data: bytes, trials: int = 100) -> AvalancheResult:
        _check_count('trials', trials)
        if trials == 0:
            return AvalancheResult(0.0, [])
        n_bits = len(data) * 8
        if n_bits == 0:
            raise ValueError("avalanche needs a non-empty input")

        baseline = self.digest(data)
        randrange = self.rng.randrange
        distances = []
        for _ in range(trials):
            flipped = flip_bit(data, randrange(n_bits))
            distances.append(hamming_distance(baseline, self.digest(flipped)))

        average = sum(distances) / trials
        logger.debug("avalanche: %d trials, average %.2f bits", trials, average)
        return AvalancheResult(average, distances)

    def diffusion(self, data: bytes, trials: int = 100) -> float:
        _check_count('trials', trials)
        if trials == 0:
            return 0.0
        n_bits = len(data) * 8
        if n_bits == 0:
            raise ValueError("diffusion needs a non-empty input")

        baseline = self.digest(data)
        digest_bits = len(baseline) * 8
        if digest_bits == 0:
            return 0.0

        total = 0
        for i in range(trials):
            total += bit_difference(baseline, self.digest(flip_bit(data, i % n_bits)))

        ratio = (total / trials) / digest_bits
        logger.debug("diffusion: %d trials, ratio %.4f", trials, ratio)
        return ratio

    def collision(self, iterations: int = 1_000_000, input_size: int = 8) -> CollisionResult:
        _check_count('iterations', iterations)
        seen = set()
        collisions = 0
        digest = self.digest
        random_bytes = self._random_bytes

        for _ in range(iterations):
            h = digest(random_bytes(input_size))
            if h in seen:
                collisions += 1
            else:
                seen.add(h)

        logger.debug("collision: %d in %d iterations", collisions, iterations)
        return CollisionResult(collisions, iterations)

    def preimage(self, target: bytes, input_length: int = 10,
                 attempts: int = 1_000_000) -> PreimageResult:
        _check_count('attempts', attempts)
        if isinstance(target, str):
            target = bytes.fromhex(target)
        digest = self.digest
        random_bytes = self._random_bytes

        for tries in range(1, attempts + 1):
            candidate = random_bytes(input_length)
            if digest(candidate) == target:
                logger.debug("preimage: found after %d tries", tries)
                return PreimageResult(True, tries, candidate)

        logger.debug("preimage: not found in %d attempts", attempts)
        return PreimageResult(False, attempts)

    def run_all(self, data: bytes, iterations: int, preimage_input: bytes = b"test"):
        """Run the four measurements in report order; returns a dict of results."""
        diffusion = self.diffusion(data, iterations)
        avalanche = self.avalanche(data, iterations)
        collision = self.collision(iterations)
        preimage = self.preimage(self.digest(preimage_input), len(data), iterations)
        return {
            'diffusion': diffusion,
            'avalanche': avalanche,
            'collision': collision,
            'preimage': preimage,
        }
