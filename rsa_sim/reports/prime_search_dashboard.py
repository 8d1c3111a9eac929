"""Dashboard of measured prime-search cost for the random prime generator."""
from __future__ import annotations

import math
import random
from pathlib import Path
from statistics import mean
from typing import Dict, List, Optional, Sequence

from rsa_sim.primes import DEFAULT_PRIME_ROUNDS, PrimeSearch, search_prime
from rsa_sim.utils.plotting import PALETTE, dashboard_figure, panel, save_dashboard

_TITLE = "Random Prime Search: Cost and Confidence"

__all__ = ["collect_prime_searches", "expected_attempts", "make_prime_search_dashboard"]


def expected_attempts(bits: int) -> float:
    """Prime-number-theorem estimate of odd candidates tried per ``bits``-bit prime."""

    # Density of primes near 2**bits is 1/(bits*ln 2); odd candidates double it.
    return bits * math.log(2) / 2


def collect_prime_searches(
    bit_lengths: Sequence[int],
    samples: int,
    rounds: int = DEFAULT_PRIME_ROUNDS,
    *,
    rng: Optional[random.Random] = None,
) -> Dict[int, List[PrimeSearch]]:
    return {
        bits: [search_prime(bits, rounds, rng=rng) for _ in range(samples)]
        for bits in bit_lengths
    }


def make_prime_search_dashboard(
    save_path: str | Path,
    bit_lengths: Sequence[int] = (32, 64, 128, 256),
    samples: int = 8,
    rounds: int = DEFAULT_PRIME_ROUNDS,
    *,
    rng: Optional[random.Random] = None,
) -> Path:
    """Run prime searches, render a 2x2 dashboard to *save_path* and return the path."""

    runs = collect_prime_searches(bit_lengths, samples, rounds, rng=rng)
    sizes = list(runs)
    mean_attempts = [mean(r.attempts for r in runs[bits]) for bits in sizes]
    mean_ms = [mean(r.elapsed for r in runs[bits]) * 1000.0 for bits in sizes]

    fig, axes = dashboard_figure(_TITLE)

    # Top-left: measured candidates per prime against the PNT estimate.
    ax = panel(axes[0][0], "Candidates Tried per Prime", "Bit length", "Candidates", bit_ticks=sizes)
    ax.plot(sizes, mean_attempts, marker="o", color=PALETTE["measured"], label=f"measured (mean of {samples})")
    ax.plot(
        sizes,
        [expected_attempts(b) for b in sizes],
        linestyle="--",
        color=PALETTE["estimate"],
        label="bits·ln2 / 2",
    )
    ax.legend()

    # Top-right: wall-clock search time.
    ax = panel(axes[0][1], "Search Time per Prime", "Bit length", "Time (ms)")
    ax.bar([str(b) for b in sizes], mean_ms, color=PALETTE["measured"])

    # Bottom-left: Miller–Rabin false-positive bound.
    ks = list(range(1, max(rounds, 40) + 1))
    ax = panel(
        axes[1][0],
        "Miller-Rabin Error Bound",
        "Rounds k",
        "Composite acceptance ≤ 4^-k",
        log_y=True,
    )
    ax.plot(ks, [4.0 ** -k for k in ks], color=PALETTE["bound"])
    ax.axvline(rounds, color=PALETTE["estimate"], linestyle="--", linewidth=1, label=f"generator k = {rounds}")
    ax.legend()

    # Bottom-right: spread of candidates tried for the largest size.
    largest = sizes[-1]
    ax = panel(axes[1][1], f"Candidates Tried ({largest}-bit)", "Candidates", "Searches")
    ax.hist([r.attempts for r in runs[largest]], bins=min(10, samples), color=PALETTE["spread"])

    return save_dashboard(
        fig, save_path, footnote=f"{samples} searches per size, {rounds} Miller-Rabin rounds each."
    )
