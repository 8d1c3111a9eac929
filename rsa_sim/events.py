"""Lifecycle events reported to an optional observer callback.

The engine never prints. Callers that want progress output pass an observer,
a callable taking the event name and a mapping of integer-valued details::

    def observer(event: str, details: Mapping[str, Any]) -> None:
        ...

``emit`` is a no-op when no observer was supplied.
"""
from __future__ import annotations

from typing import Any, Callable, Mapping, Optional

PRIME_FOUND = "prime_found"
KEY_ASSEMBLED = "key_assembled"
BLOCK_ENCRYPTED = "block_encrypted"
BLOCK_DECRYPTED = "block_decrypted"

Observer = Callable[[str, Mapping[str, Any]], None]

__all__ = [
    "PRIME_FOUND",
    "KEY_ASSEMBLED",
    "BLOCK_ENCRYPTED",
    "BLOCK_DECRYPTED",
    "Observer",
    "emit",
]


def emit(observer: Optional[Observer], event: str, **details: Any) -> None:
    if observer is not None:
        observer(event, details)
