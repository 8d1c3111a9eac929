"""End-to-end keygen, encrypt and decrypt round-trip."""
from __future__ import annotations

import random
from dataclasses import dataclass
from typing import List, Optional

from rsa_sim import events
from rsa_sim.cipher import decrypt_blocks, encrypt_blocks
from rsa_sim.codec import blocks_to_text, text_to_blocks
from rsa_sim.keygen import DEFAULT_KEY_ATTEMPTS, DEFAULT_PUBLIC_EXPONENT, Keypair, generate_keypair
from rsa_sim.primes import DEFAULT_PRIME_ROUNDS

__all__ = ["RoundTrip", "rsa_roundtrip"]


@dataclass(frozen=True)
class RoundTrip:
    keypair: Keypair
    message: str
    plaintext_blocks: List[int]
    ciphertext: List[int]
    recovered_blocks: List[int]
    recovered: str

    @property
    def ok(self) -> bool:
        return self.recovered == self.message


def rsa_roundtrip(
    bits: int = 512,
    message: str = "Ola!",
    *,
    e: int = DEFAULT_PUBLIC_EXPONENT,
    rounds: int = DEFAULT_PRIME_ROUNDS,
    max_attempts: int = DEFAULT_KEY_ATTEMPTS,
    rng: Optional[random.Random] = None,
    observer: Optional[events.Observer] = None,
) -> RoundTrip:
    """Generate a key, encrypt ``message`` block by block and decrypt it again.

    Errors from any stage propagate unchanged; a wrong-key decryption surfaces
    as :class:`~rsa_sim.errors.DecodingFailed` rather than a garbled string.
    """

    keypair = generate_keypair(
        bits, e, rounds=rounds, max_attempts=max_attempts, rng=rng, observer=observer
    )
    plaintext_blocks = text_to_blocks(message)
    ciphertext = encrypt_blocks(plaintext_blocks, keypair.public, observer=observer)
    recovered_blocks = decrypt_blocks(ciphertext, keypair.private, observer=observer)
    return RoundTrip(
        keypair=keypair,
        message=message,
        plaintext_blocks=plaintext_blocks,
        ciphertext=ciphertext,
        recovered_blocks=recovered_blocks,
        recovered=blocks_to_text(recovered_blocks),
    )
