"""Miller–Rabin primality testing and random prime generation."""
from __future__ import annotations

import logging
import random
import secrets
import time
from dataclasses import dataclass
from typing import Optional

from rsa_sim.arithmetic import mod_exp
from rsa_sim.errors import InvalidInput, KeyGenerationFailed

logger = logging.getLogger(__name__)

# Rounds used when generating primes: error probability <= 4**-20 per prime.
DEFAULT_PRIME_ROUNDS = 20
DEFAULT_PRIME_ATTEMPTS = 100_000

_SMALL_PRIMES = (2, 3, 5, 7, 11, 13, 17, 19, 23, 29)

__all__ = [
    "DEFAULT_PRIME_ROUNDS",
    "DEFAULT_PRIME_ATTEMPTS",
    "PrimeSearch",
    "miller_rabin",
    "search_prime",
    "gen_prime",
]


@dataclass(frozen=True)
class PrimeSearch:
    """Telemetry for a single prime search."""

    prime: int
    bits: int
    attempts: int
    elapsed: float


def _system_rng() -> random.Random:
    return secrets.SystemRandom()


def miller_rabin(n: int, k: int = 40, *, rng: Optional[random.Random] = None) -> bool:
    """Return ``True`` when ``n`` is probably prime using Miller–Rabin.

    A prime is always accepted. A composite survives all ``k`` rounds with
    probability at most ``4 ** -k``.
    """

    if k < 1:
        raise InvalidInput(f"Miller-Rabin needs at least one round, got {k}")
    if n < 2:
        return False

    # Trial-divide by a few small primes first. This settles 2 and 3, every
    # even number and other cheap composites before any random base is drawn.
    for p in _SMALL_PRIMES:
        if n == p:
            return True
        if n % p == 0:
            return False

    # Write n-1 as (2**r) * d with d odd.
    d = n - 1
    r = 0
    while d % 2 == 0:
        d //= 2
        r += 1

    rng = rng or _system_rng()
    for _ in range(k):
        a = rng.randrange(2, n - 1)  # 2 <= a <= n-2
        x = mod_exp(a, d, n)
        if x in (1, n - 1):
            continue
        for _ in range(r - 1):
            x = mod_exp(x, 2, n)
            if x == n - 1:
                break
        else:
            return False
    return True


def search_prime(
    bits: int,
    rounds: int = DEFAULT_PRIME_ROUNDS,
    *,
    rng: Optional[random.Random] = None,
    max_attempts: Optional[int] = None,
) -> PrimeSearch:
    """Sample random odd ``bits``-bit candidates until one passes Miller–Rabin."""

    if bits < 2:
        raise InvalidInput("Prime size must be at least 2 bits")
    limit = DEFAULT_PRIME_ATTEMPTS if max_attempts is None else max_attempts
    if limit < 1:
        raise InvalidInput(f"max_attempts must be positive, got {limit}")

    rng = rng or _system_rng()
    start = time.perf_counter()
    for attempt in range(1, limit + 1):
        cand = rng.getrandbits(bits)
        # Ensure the number has the requested size and is odd.
        cand |= (1 << (bits - 1)) | 1
        if miller_rabin(cand, rounds, rng=rng):
            elapsed = time.perf_counter() - start
            logger.info("Found %d-bit prime after %d candidates", bits, attempt)
            return PrimeSearch(prime=cand, bits=bits, attempts=attempt, elapsed=elapsed)

    raise KeyGenerationFailed(f"No {bits}-bit prime found in {limit} candidates")


def gen_prime(
    bits: int,
    rounds: int = DEFAULT_PRIME_ROUNDS,
    *,
    rng: Optional[random.Random] = None,
    max_attempts: Optional[int] = None,
) -> int:
    """Generate a random probable prime with exactly ``bits`` bits."""

    return search_prime(bits, rounds, rng=rng, max_attempts=max_attempts).prime
