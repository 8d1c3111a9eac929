"""Figure layout and colours for the prime-search report (headless Agg backend)."""
from __future__ import annotations

from pathlib import Path
from typing import Optional, Sequence, Tuple

import matplotlib

matplotlib.use("Agg")
import matplotlib.pyplot as plt  # noqa: E402
from matplotlib.axes import Axes  # noqa: E402
from matplotlib.figure import Figure  # noqa: E402

PALETTE = {
    "measured": "#3b82f6",
    "estimate": "#6b7280",
    "bound": "#f97316",
    "spread": "#10b981",
}

__all__ = ["PALETTE", "dashboard_figure", "panel", "save_dashboard"]


def dashboard_figure(title: str, rows: int = 2, cols: int = 2) -> Tuple[Figure, list]:
    fig, axes = plt.subplots(rows, cols, figsize=(cols * 6.0, rows * 4.0), squeeze=False)
    fig.suptitle(title, fontsize=16)
    return fig, axes


def panel(
    ax: Axes,
    title: str,
    xlabel: str,
    ylabel: str,
    *,
    log_y: bool = False,
    bit_ticks: Optional[Sequence[int]] = None,
) -> Axes:
    """Label one dashboard panel; ``bit_ticks`` pins the x axis to the sampled bit lengths."""

    ax.set_title(title)
    ax.set_xlabel(xlabel)
    ax.set_ylabel(ylabel)
    if log_y:
        ax.set_yscale("log")
    if bit_ticks is not None:
        ax.set_xticks(list(bit_ticks))
        ax.set_xticklabels([str(bits) for bits in bit_ticks])
    ax.grid(True, which="both", linestyle="--", linewidth=0.5, alpha=0.4)
    return ax


def save_dashboard(fig: Figure, path, footnote: Optional[str] = None) -> Path:
    """Write *fig* as PNG to *path*, creating parent directories, and close it."""

    target = Path(path)
    target.parent.mkdir(parents=True, exist_ok=True)
    bottom = 0.0
    if footnote:
        fig.text(0.5, 0.01, footnote, ha="center", fontsize=9)
        bottom = 0.03
    fig.tight_layout(rect=(0, bottom, 1, 0.95))
    fig.savefig(str(target), bbox_inches="tight", dpi=120)
    plt.close(fig)
    return target
