"""Modular arithmetic on Python integers: Bézout coefficients, inverses, powers."""
from __future__ import annotations

from typing import Tuple

from rsa_sim.errors import InvalidInput, NoInverseExists

__all__ = ["egcd", "inv_mod", "mod_exp"]


def egcd(a: int, b: int) -> Tuple[int, int, int]:
    """Extended Euclidean algorithm without recursion.

    Returns ``(g, x, y)`` such that ``a * x + b * y == g``. The loop carries
    the remainder and both Bézout coefficients as ``(old, current)`` pairs, so
    very large operands never approach Python's recursion limit. Division is
    floor division throughout.
    """

    if a < 0:
        raise InvalidInput(f"egcd expects a >= 0, got {a}")
    if a == 0 and b == 0:
        raise InvalidInput("egcd(0, 0) is undefined")

    old_r, r = a, b
    old_s, s = 1, 0
    old_t, t = 0, 1

    while r != 0:
        q = old_r // r
        old_r, r = r, old_r - q * r
        old_s, s = s, old_s - q * s
        old_t, t = t, old_t - q * t

    # a == 0 ends with (b, 0, 1).
    return old_r, old_s, old_t


def inv_mod(a: int, m: int) -> int:
    """Return ``x`` in ``[0, m)`` with ``a * x ≡ 1 (mod m)``."""

    if a <= 0:
        raise InvalidInput(f"Value to invert must be positive, got {a}")
    if m <= 0:
        raise InvalidInput(f"Modulus must be positive, got {m}")
    g, x, _ = egcd(a, m)
    if g != 1:
        raise NoInverseExists(f"{a} has no inverse modulo {m} (gcd={g})")
    return x % m


def mod_exp(base: int, exponent: int, modulus: int) -> int:
    """Compute ``base ** exponent % modulus`` by right-to-left square-and-multiply.

    Every intermediate product is reduced before the next multiplication.
    A modulus of 1 yields 0 because every integer is congruent to 0 mod 1.
    """

    if modulus < 1:
        raise InvalidInput(f"Modulus must be >= 1, got {modulus}")
    if exponent < 0:
        raise InvalidInput(f"Exponent must be non-negative, got {exponent}")
    if modulus == 1:
        return 0

    result = 1
    power = base % modulus
    while exponent > 0:
        if exponent & 1:
            result = (result * power) % modulus
        power = (power * power) % modulus
        exponent >>= 1
    return result
