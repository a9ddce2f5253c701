"""Validator success rate visualization.

Bar chart of relay success rate per validator in ranking order, colored by
success-rate tier, so the best and worst relayers stand out at a glance.
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

import matplotlib.pyplot as plt
import numpy as np
from matplotlib.figure import Figure

from relay_report.core.classification import SUCCESS_RATE_TIERS, classify_success_rate
from relay_report.core.ranking import RankedValidator
from relay_report.core.types import Tier

TIER_COLORS: dict[Tier, str] = {
    Tier.EXCELLENT: "#38a169",
    Tier.GOOD: "#d69e2e",
    Tier.POOR: "#e53e3e",
}


def plot_validator_success_rate_chart(
    ranking: Sequence[RankedValidator],
    title: str | None = None,
    figsize: tuple[float, float] = (12, 8),
    dpi: int = 150,
) -> Figure:
    """
    Generate validator success rate bar chart.

    Args:
        ranking: Ranked validators (bars are drawn in this order)
        title: Plot title (auto-generated if None)
        figsize: Figure size in inches (width, height)
        dpi: Resolution in dots per inch

    Returns:
        matplotlib Figure object

    Raises:
        ValueError: If ranking is empty
    """
    if not ranking:
        raise ValueError("ranking cannot be empty")

    monikers = [ranked.metrics.validator_moniker for ranked in ranking]
    success_rates = np.array([ranked.metrics.success_rate for ranked in ranking])
    total_tests = [ranked.metrics.total_tests for ranked in ranking]
    colors = [TIER_COLORS[classify_success_rate(rate)] for rate in success_rates]
    positions = np.arange(len(monikers))

    fig, ax = plt.subplots(figsize=figsize, dpi=dpi)

    bars = ax.bar(
        positions,
        success_rates,
        color=colors,
        alpha=0.8,
        edgecolor="black",
        linewidth=1.2,
    )

    # Add value labels on top of bars
    for bar, rate, tests in zip(bars, success_rates, total_tests):
        ax.text(
            bar.get_x() + bar.get_width() / 2.0,
            bar.get_height() + 1,
            f"{rate:.1f}%\n(n={tests})",
            ha="center",
            va="bottom",
            fontsize=9,
            fontweight="bold",
        )

    # Reference lines at each tier boundary
    for threshold, tier in SUCCESS_RATE_TIERS:
        ax.axhline(
            y=threshold,
            color=TIER_COLORS[tier],
            linestyle="--",
            linewidth=1.5,
            alpha=0.7,
            label=f"{tier.value.capitalize()} (≥{threshold:.0f}%)",
        )

    ax.set_xlabel("Validator", fontsize=12, fontweight="bold")
    ax.set_ylabel("Success Rate (%)", fontsize=12, fontweight="bold")
    ax.set_ylim(0, 110)  # headroom for labels

    if title is None:
        title = "Validator Relay Success Rate"
    ax.set_title(title, fontsize=14, fontweight="bold", pad=20)

    ax.set_xticks(positions)
    ax.set_xticklabels(monikers, rotation=45, ha="right")
    ax.grid(True, axis="y", alpha=0.3, linestyle="--", linewidth=0.5)
    ax.legend(loc="upper right", fontsize=10)

    fig.tight_layout()

    return fig


def save_validator_success_rate_chart(fig: Figure, output_path: Path) -> None:
    """
    Save validator success rate chart to PNG file and close the figure.

    Raises:
        ValueError: If output_path doesn't end in .png
    """
    if not str(output_path).endswith(".png"):
        raise ValueError(f"output_path must end in .png, got: {output_path}")

    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        fig.savefig(output_path, dpi=fig.dpi, bbox_inches="tight")
    finally:
        plt.close(fig)
