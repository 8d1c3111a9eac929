"""RSA key generation from two random primes."""
from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import Optional

from Crypto.PublicKey import RSA

from rsa_sim import events
from rsa_sim.arithmetic import egcd, inv_mod
from rsa_sim.errors import InvalidInput, KeyGenerationFailed
from rsa_sim.primes import DEFAULT_PRIME_ROUNDS, search_prime

logger = logging.getLogger(__name__)

DEFAULT_PUBLIC_EXPONENT = 65537
DEFAULT_KEY_ATTEMPTS = 100
# n >= 2**(bits - 2), so 10 bits is the smallest size whose modulus always
# exceeds 255 and can hold every one-byte block.
MIN_KEY_BITS = 10

__all__ = [
    "DEFAULT_PUBLIC_EXPONENT",
    "DEFAULT_KEY_ATTEMPTS",
    "MIN_KEY_BITS",
    "PublicKey",
    "PrivateKey",
    "Keypair",
    "generate_keypair",
    "verify_keypair",
]


@dataclass(frozen=True)
class PublicKey:
    n: int
    e: int


@dataclass(frozen=True)
class PrivateKey:
    n: int
    d: int


@dataclass(frozen=True)
class Keypair:
    """Public modulus ``n`` with exponents ``e`` and ``d``; p, q and φ(n) are not kept."""

    n: int
    e: int
    d: int

    @property
    def public(self) -> PublicKey:
        return PublicKey(n=self.n, e=self.e)

    @property
    def private(self) -> PrivateKey:
        return PrivateKey(n=self.n, d=self.d)

    @property
    def bit_length(self) -> int:
        return self.n.bit_length()


def generate_keypair(
    bits: int = 512,
    e: int = DEFAULT_PUBLIC_EXPONENT,
    *,
    rounds: int = DEFAULT_PRIME_ROUNDS,
    max_attempts: int = DEFAULT_KEY_ATTEMPTS,
    rng: Optional[random.Random] = None,
    observer: Optional[events.Observer] = None,
) -> Keypair:
    """Generate an RSA modulus ``n`` together with the public/secret exponents.

    ``bits`` is the target size of ``n``; the primes get ``bits // 2`` and
    ``bits - bits // 2`` bits. A prime pair is redrawn when ``p == q`` or when
    ``e`` shares a factor with ``φ(n)``. After ``max_attempts`` rejected pairs
    :class:`KeyGenerationFailed` is raised.
    """

    if bits < MIN_KEY_BITS:
        raise InvalidInput(
            f"Key size must be at least {MIN_KEY_BITS} bits so that n > 255, got {bits}"
        )
    if e < 3 or e % 2 == 0:
        raise InvalidInput(f"Public exponent must be odd and >= 3, got {e}")
    if max_attempts < 1:
        raise InvalidInput(f"max_attempts must be positive, got {max_attempts}")

    p_bits = bits // 2
    q_bits = bits - p_bits

    for attempt in range(1, max_attempts + 1):
        p_search = search_prime(p_bits, rounds, rng=rng)
        q_search = search_prime(q_bits, rounds, rng=rng)
        p, q = p_search.prime, q_search.prime
        if p == q:
            logger.debug("Attempt %d: p == q, redrawing", attempt)
            continue
        phi = (p - 1) * (q - 1)
        if egcd(e, phi)[0] != 1:
            logger.debug("Attempt %d: gcd(e, phi) != 1, redrawing", attempt)
            continue
        break
    else:
        raise KeyGenerationFailed(
            f"No valid prime pair for a {bits}-bit key with e={e} after {max_attempts} attempts"
        )

    events.emit(
        observer, events.PRIME_FOUND, label="p", value=p, bits=p_bits, attempts=p_search.attempts
    )
    events.emit(
        observer, events.PRIME_FOUND, label="q", value=q, bits=q_bits, attempts=q_search.attempts
    )

    n = p * q
    d = inv_mod(e, phi)
    logger.info("Assembled %d-bit key after %d attempt(s)", n.bit_length(), attempt)
    events.emit(observer, events.KEY_ASSEMBLED, n=n, phi=phi, e=e, d=d)
    return Keypair(n=n, e=e, d=d)


def verify_keypair(keypair: Keypair) -> None:
    """Cross-check ``keypair`` against pycryptodome's RSA consistency checks."""

    try:
        RSA.construct((keypair.n, keypair.e, keypair.d), consistency_check=True)
    except ValueError as exc:
        raise InvalidInput(f"Keypair failed consistency check: {exc}") from exc
