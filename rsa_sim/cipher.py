"""Textbook RSA over one-byte blocks."""
from __future__ import annotations

import logging
from typing import Iterable, List, Optional

from rsa_sim import events
from rsa_sim.arithmetic import mod_exp
from rsa_sim.codec import blocks_to_text, text_to_blocks
from rsa_sim.errors import InvalidInput
from rsa_sim.keygen import PrivateKey, PublicKey

logger = logging.getLogger(__name__)

__all__ = [
    "encrypt_int",
    "decrypt_int",
    "encrypt_blocks",
    "decrypt_blocks",
    "encrypt_text",
    "decrypt_text",
]


def encrypt_int(m: int, e: int, n: int) -> int:
    if not (0 <= m < n):
        raise InvalidInput(f"Message representative {m} out of range [0, n)")
    return mod_exp(m, e, n)


def decrypt_int(c: int, d: int, n: int) -> int:
    if not (0 <= c < n):
        raise InvalidInput(f"Ciphertext representative {c} out of range [0, n)")
    return mod_exp(c, d, n)


def encrypt_blocks(
    blocks: Iterable[int],
    key: PublicKey,
    *,
    observer: Optional[events.Observer] = None,
) -> List[int]:
    """Encrypt each one-byte block independently under ``(e, n)``.

    Blocks outside ``[0, 255]`` raise :class:`InvalidInput` before anything is
    encrypted.
    """

    out: List[int] = []
    for index, m in enumerate(blocks):
        if not 0 <= m <= 255:
            raise InvalidInput(f"Block {index} holds {m}, outside the byte range 0-255")
        c = encrypt_int(m, key.e, key.n)
        logger.debug("Block %d encrypted", index)
        events.emit(observer, events.BLOCK_ENCRYPTED, index=index, input=m, output=c)
        out.append(c)
    return out


def decrypt_blocks(
    blocks: Iterable[int],
    key: PrivateKey,
    *,
    observer: Optional[events.Observer] = None,
) -> List[int]:
    """Decrypt each block independently under ``(d, n)``."""

    out: List[int] = []
    for index, c in enumerate(blocks):
        m = decrypt_int(c, key.d, key.n)
        logger.debug("Block %d decrypted", index)
        events.emit(observer, events.BLOCK_DECRYPTED, index=index, input=c, output=m)
        out.append(m)
    return out


def encrypt_text(
    text: str,
    key: PublicKey,
    *,
    encoding: str = "utf-8",
    observer: Optional[events.Observer] = None,
) -> List[int]:
    return encrypt_blocks(text_to_blocks(text, encoding), key, observer=observer)


def decrypt_text(
    blocks: Iterable[int],
    key: PrivateKey,
    *,
    encoding: str = "utf-8",
    observer: Optional[events.Observer] = None,
) -> str:
    return blocks_to_text(decrypt_blocks(blocks, key, observer=observer), encoding)
