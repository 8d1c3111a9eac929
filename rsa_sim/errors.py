"""Exceptions raised by the RSA simulation engine."""


class RsaSimError(Exception):
    """Base class for every error raised by :mod:`rsa_sim`."""


class InvalidInput(RsaSimError, ValueError):
    """Raised when an argument is outside the domain of an operation."""


class NoInverseExists(RsaSimError, ValueError):
    """Raised when ``gcd(a, m) != 1`` so ``a`` has no inverse modulo ``m``."""


class KeyGenerationFailed(RsaSimError, ValueError):
    """Raised when a bounded prime or key search exhausts its attempts."""


class DecodingFailed(RsaSimError, ValueError):
    """Raised when recovered blocks cannot be turned back into bytes or text."""


__all__ = [
    "RsaSimError",
    "InvalidInput",
    "NoInverseExists",
    "KeyGenerationFailed",
    "DecodingFailed",
]
