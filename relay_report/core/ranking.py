"""Validator ranking by relay success rate."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

from .classification import classify_success_rate
from .types import Tier, ValidatorMetrics

TOP_THREE_MARKERS = ("🥇", "🥈", "🥉")


@dataclass(frozen=True)
class RankedValidator:
    """A validator snapshot together with its position in the ranking."""

    position: int  # 0-based
    metrics: ValidatorMetrics

    @property
    def marker(self) -> str:
        return rank_marker(self.position)

    @property
    def tier(self) -> Tier:
        return classify_success_rate(self.metrics.success_rate)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {"rank": self.position + 1, **self.metrics.to_dict()}


def rank_marker(position: int) -> str:
    """
    Decoration for a 0-based rank position.

    Positions 0-2 get medal markers; everything else gets a plain
    ordinal such as ``"4."``.
    """
    if 0 <= position < len(TOP_THREE_MARKERS):
        return TOP_THREE_MARKERS[position]
    return f"{position + 1}."


def rank_validators(metrics: Sequence[ValidatorMetrics]) -> list[RankedValidator]:
    """
    Rank validators by success rate, best first.

    The sort is stable, so validators with equal success rates keep their
    input order. The input sequence is not reordered.

    Args:
        metrics: Validator metric snapshots

    Returns:
        Ranked validators (a permutation of the input)
    """
    ordered = sorted(metrics, key=lambda m: m.success_rate, reverse=True)
    return [RankedValidator(position=i, metrics=m) for i, m in enumerate(ordered)]
