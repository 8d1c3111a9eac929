"""Conversion between messages and one-byte integer blocks.

Each block holds a single byte, so the scheme only round-trips when the
modulus exceeds 255. Recovered values outside ``[0, 255]`` mean the wrong key
was used and are reported, never clamped.
"""
from __future__ import annotations

from typing import Iterable, List

from rsa_sim.errors import DecodingFailed

__all__ = ["bytes_to_blocks", "text_to_blocks", "blocks_to_bytes", "blocks_to_text"]


def bytes_to_blocks(data: bytes | bytearray | memoryview) -> List[int]:
    return list(bytes(data))


def text_to_blocks(text: str, encoding: str = "utf-8") -> List[int]:
    return bytes_to_blocks(text.encode(encoding))


def blocks_to_bytes(blocks: Iterable[int]) -> bytes:
    out = bytearray()
    for index, value in enumerate(blocks):
        if not 0 <= value <= 255:
            raise DecodingFailed(f"Block {index} holds {value}, outside the byte range 0-255")
        out.append(value)
    return bytes(out)


def blocks_to_text(blocks: Iterable[int], encoding: str = "utf-8") -> str:
    data = blocks_to_bytes(blocks)
    try:
        return data.decode(encoding)
    except UnicodeDecodeError as exc:
        raise DecodingFailed(f"Recovered bytes are not valid {encoding}: {exc}") from exc
