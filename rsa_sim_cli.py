#!/usr/bin/env python3
"""
RSA simulation CLI – generate a keypair, encrypt a short message byte by byte,
and decrypt it again.

Usage:
  Interactive menu:
    python rsa_sim_cli.py

  Non-interactive:
    python rsa_sim_cli.py --run roundtrip --bits 512 --message "Ola!"
    python rsa_sim_cli.py --run prime --bits 256
    python rsa_sim_cli.py --run check --number 561 --rounds 20
    python rsa_sim_cli.py --run dashboard --out Visualizations/prime_search.png
"""

from __future__ import annotations

import argparse
import logging
import pathlib
import sys
import textwrap
import time
from typing import Any, Callable, Dict, List, Mapping, Optional

from rsa_sim import events
from rsa_sim.config import SimulationConfig
from rsa_sim.errors import InvalidInput, RsaSimError
from rsa_sim.primes import miller_rabin, search_prime
from rsa_sim.simulation import rsa_roundtrip
from rsa_sim.utils import console_ui

DEFAULT_DASHBOARD_PATH = pathlib.Path("Visualizations") / "prime_search.png"

logger = logging.getLogger("rsa_sim_cli")


def _configure_logging(level: str) -> None:
    value = logging.getLevelName(level.upper())
    if not isinstance(value, int):
        raise InvalidInput(f"Unknown log level: {level!r}")
    logging.basicConfig(
        level=value,
        format="[%(asctime)s] %(levelname)s %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )


def _print_lifecycle(event: str, details: Mapping[str, Any]) -> None:
    """Observer that prints key-generation values as they are produced."""

    if event == events.PRIME_FOUND:
        console_ui.number(f"Prime {details['label']}", details["value"])
        console_ui.kv(f"Candidates tried for {details['label']}", str(details["attempts"]))
    elif event == events.KEY_ASSEMBLED:
        console_ui.number("Modulus n (public)", details["n"])
        console_ui.number("Phi(n) (secret)", details["phi"])
        console_ui.number("Public exponent e", details["e"])
        console_ui.number("Private exponent d (secret)", details["d"])


def run_roundtrip(config: SimulationConfig) -> bool:
    console_ui.section("Key Generation")
    console_ui.kv("Requested modulus size", f"{config.bits} bits")
    start = time.perf_counter()
    result = rsa_roundtrip(
        config.bits,
        config.message,
        e=config.public_exponent,
        rounds=config.rounds,
        max_attempts=config.max_attempts,
        observer=_print_lifecycle,
    )
    console_ui.elapsed("Key generation and round-trip took", time.perf_counter() - start)

    console_ui.section("Encryption")
    console_ui.kv("Original message", repr(result.message))
    console_ui.blocks("Plaintext blocks", result.plaintext_blocks)
    console_ui.blocks("Ciphertext blocks", result.ciphertext)

    console_ui.section("Decryption")
    console_ui.blocks("Recovered blocks", result.recovered_blocks)
    console_ui.kv("Recovered message", repr(result.recovered))
    console_ui.kv("Round-trip OK", str(result.ok))
    if result.ok:
        console_ui.success("Decrypted message matches the original.")
    else:
        console_ui.error("Decrypted message differs from the original.")
    return result.ok


def default_prime_bits(config: SimulationConfig) -> int:
    """Prime size used when none is given: half the configured modulus, as in key generation."""

    return config.bits // 2


def run_prime(bits: int, config: SimulationConfig) -> bool:
    console_ui.section("Random Prime")
    found = search_prime(bits, config.rounds)
    console_ui.number("Prime", found.prime)
    console_ui.kv("Candidates tried", str(found.attempts))
    console_ui.kv("Miller-Rabin rounds", str(config.rounds))
    console_ui.elapsed("Search took", found.elapsed)
    return True


def run_check(number: int, config: SimulationConfig) -> bool:
    console_ui.section("Primality Check")
    verdict = miller_rabin(number, config.rounds)
    console_ui.number("Candidate", number)
    console_ui.kv("Miller-Rabin rounds", str(config.rounds))
    if verdict:
        console_ui.success(f"Probably prime (error <= 4^-{config.rounds})")
    else:
        console_ui.warning("Not prime")
    return True


def run_dashboard(out: pathlib.Path, config: SimulationConfig) -> bool:
    # matplotlib is only imported when a dashboard is requested.
    from rsa_sim.reports import make_prime_search_dashboard

    console_ui.section("Prime Search Dashboard")
    path = make_prime_search_dashboard(out, rounds=config.rounds)
    console_ui.success("Saved dashboard:")
    print(f"  {path.resolve()}")
    return True


def _guarded(task: Callable[[], bool]) -> bool:
    try:
        return task()
    except RsaSimError as exc:
        console_ui.error(f"{type(exc).__name__}: {exc}")
        return False


def _prompt_int(prompt: str, default: int) -> Optional[int]:
    raw = input(f"{prompt} (default {default}): ").strip()
    if not raw:
        return default
    try:
        return int(raw, 0)
    except ValueError:
        console_ui.warning(f"Not an integer: {raw!r}")
        return None


def menu() -> str:
    console_ui.banner("RSA Sim")
    console_ui.bullet("Choose a task to run:")
    print("  1) RSA round-trip (generate key, encrypt/decrypt a message)")
    print("  2) Generate a random prime")
    print("  3) Miller-Rabin primality check")
    print("  4) Export prime-search dashboard (PNG)")
    print("  0) Exit")
    return input("\nEnter choice: ").strip()


def interactive(config: SimulationConfig) -> None:
    while True:
        choice = menu()
        if choice == "1":
            bits = _prompt_int("Modulus size in bits", config.bits)
            if bits is None:
                continue
            message = input(f"Message (default {config.message!r}): ") or config.message
            _guarded(lambda: run_roundtrip(config.with_overrides(bits=bits, message=message)))
        elif choice == "2":
            bits = _prompt_int("Prime size in bits", default_prime_bits(config))
            if bits is None:
                continue
            _guarded(lambda: run_prime(bits, config))
        elif choice == "3":
            number = _prompt_int("Number to test", 561)
            if number is None:
                continue
            _guarded(lambda: run_check(number, config))
        elif choice == "4":
            _guarded(lambda: run_dashboard(DEFAULT_DASHBOARD_PATH, config))
        elif choice == "0" or choice.lower() in {"q", "quit", "exit"}:
            print("Goodbye!")
            break
        else:
            console_ui.warning("Invalid choice. Please select 0-4.")
        console_ui.line()


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    ap = argparse.ArgumentParser(
        description="Educational RSA simulation: keygen, block encryption and decryption.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=textwrap.dedent("""
        Environment:
          RSA_SIM_BITS, RSA_SIM_MESSAGE, RSA_SIM_EXPONENT, RSA_SIM_ROUNDS,
          RSA_SIM_MAX_ATTEMPTS and RSA_SIM_LOG_LEVEL set defaults; flags win.
          NO_COLOR disables colour output.

        Examples:
          python rsa_sim_cli.py
          python rsa_sim_cli.py --run roundtrip --bits 512
          python rsa_sim_cli.py --run check --number 7919
        """),
    )
    ap.add_argument(
        "--run",
        choices=["roundtrip", "prime", "check", "dashboard"],
        help="Run a specific task non-interactively.",
    )
    ap.add_argument("--bits", type=int, help="Modulus size (roundtrip) or prime size (prime).")
    ap.add_argument("--message", help="Plaintext to encrypt in the round-trip.")
    ap.add_argument("--exponent", type=int, dest="public_exponent", help="Public exponent e.")
    ap.add_argument("--rounds", type=int, help="Miller-Rabin rounds.")
    ap.add_argument("--max-attempts", type=int, help="Prime-pair retry budget for key generation.")
    ap.add_argument("--number", type=lambda s: int(s, 0), help="Candidate for --run check.")
    ap.add_argument(
        "--out",
        type=pathlib.Path,
        default=DEFAULT_DASHBOARD_PATH,
        help="Destination PNG for --run dashboard.",
    )
    ap.add_argument("--log-level", help="Logging level (DEBUG, INFO, WARNING, ...).")
    ap.add_argument(
        "--plain",
        action="store_true",
        help="Disable colors/banners; print plain ASCII.",
    )
    return ap.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    try:
        config = SimulationConfig.from_env().with_overrides(
            bits=args.bits,
            message=args.message,
            public_exponent=args.public_exponent,
            rounds=args.rounds,
            max_attempts=args.max_attempts,
            log_level=args.log_level,
        )
    except RsaSimError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 2
    try:
        _configure_logging(config.log_level)
    except InvalidInput as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 2
    console_ui.init(plain=args.plain)
    logger.debug("Effective configuration: %s", config)

    if args.run is None:
        interactive(config)
        return 0

    if args.run == "check" and args.number is None:
        console_ui.error("--run check requires --number")
        return 2

    tasks: Dict[str, Callable[[], bool]] = {
        "roundtrip": lambda: run_roundtrip(config),
        "prime": lambda: run_prime(
            args.bits if args.bits is not None else default_prime_bits(config), config
        ),
        "check": lambda: run_check(args.number, config),
        "dashboard": lambda: run_dashboard(args.out, config),
    }
    console_ui.task_panel(args.run)
    return 0 if _guarded(tasks[args.run]) else 1


if __name__ == "__main__":
    sys.exit(main())
