"""Simulation settings with environment-variable overrides."""
from __future__ import annotations

import dataclasses
import os
from dataclasses import dataclass
from typing import Any, Mapping, Optional

from rsa_sim.errors import InvalidInput
from rsa_sim.keygen import DEFAULT_KEY_ATTEMPTS, DEFAULT_PUBLIC_EXPONENT
from rsa_sim.primes import DEFAULT_PRIME_ROUNDS

ENV_PREFIX = "RSA_SIM_"

_INT_FIELDS = {
    "bits": "BITS",
    "public_exponent": "EXPONENT",
    "rounds": "ROUNDS",
    "max_attempts": "MAX_ATTEMPTS",
}
_STR_FIELDS = {
    "message": "MESSAGE",
    "log_level": "LOG_LEVEL",
}

__all__ = ["ENV_PREFIX", "SimulationConfig"]


def _parse_int(value: str, *, field: str) -> int:
    text = value.strip().lower()
    if text.startswith("0x"):
        base = 16
        text = text[2:]
    else:
        base = 10
    try:
        return int(text, base)
    except ValueError as exc:
        raise InvalidInput(f"Invalid integer for {field}: {value!r}") from exc


@dataclass(frozen=True)
class SimulationConfig:
    bits: int = 512
    message: str = "Ola!"
    public_exponent: int = DEFAULT_PUBLIC_EXPONENT
    rounds: int = DEFAULT_PRIME_ROUNDS
    max_attempts: int = DEFAULT_KEY_ATTEMPTS
    log_level: str = "WARNING"

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "SimulationConfig":
        """Build a config from ``RSA_SIM_*`` variables, falling back to defaults."""

        env = os.environ if environ is None else environ
        values: dict[str, Any] = {}
        for field, suffix in _INT_FIELDS.items():
            raw = env.get(ENV_PREFIX + suffix)
            if raw:
                values[field] = _parse_int(raw, field=ENV_PREFIX + suffix)
        for field, suffix in _STR_FIELDS.items():
            raw = env.get(ENV_PREFIX + suffix)
            if raw:
                values[field] = raw
        return cls(**values)

    def with_overrides(self, **overrides: Any) -> "SimulationConfig":
        """Return a copy with every non-``None`` override applied."""

        changes = {key: value for key, value in overrides.items() if value is not None}
        return dataclasses.replace(self, **changes)
