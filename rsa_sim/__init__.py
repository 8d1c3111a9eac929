"""Educational RSA simulation built on a from-scratch modular arithmetic engine."""
from __future__ import annotations

from rsa_sim.arithmetic import egcd, inv_mod, mod_exp
from rsa_sim.cipher import (
    decrypt_blocks,
    decrypt_int,
    decrypt_text,
    encrypt_blocks,
    encrypt_int,
    encrypt_text,
)
from rsa_sim.codec import blocks_to_bytes, blocks_to_text, bytes_to_blocks, text_to_blocks
from rsa_sim.errors import (
    DecodingFailed,
    InvalidInput,
    KeyGenerationFailed,
    NoInverseExists,
    RsaSimError,
)
from rsa_sim.keygen import Keypair, PrivateKey, PublicKey, generate_keypair, verify_keypair
from rsa_sim.primes import PrimeSearch, gen_prime, miller_rabin, search_prime
from rsa_sim.simulation import RoundTrip, rsa_roundtrip

__version__ = "0.1.0"

__all__ = [
    "egcd",
    "inv_mod",
    "mod_exp",
    "miller_rabin",
    "search_prime",
    "gen_prime",
    "PrimeSearch",
    "Keypair",
    "PublicKey",
    "PrivateKey",
    "generate_keypair",
    "verify_keypair",
    "bytes_to_blocks",
    "text_to_blocks",
    "blocks_to_bytes",
    "blocks_to_text",
    "encrypt_int",
    "decrypt_int",
    "encrypt_blocks",
    "decrypt_blocks",
    "encrypt_text",
    "decrypt_text",
    "RoundTrip",
    "rsa_roundtrip",
    "RsaSimError",
    "InvalidInput",
    "NoInverseExists",
    "KeyGenerationFailed",
    "DecodingFailed",
]
