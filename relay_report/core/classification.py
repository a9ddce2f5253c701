"""Threshold classification of success rates and latencies into tiers.

The two scales compare in opposite directions:

- Success rate: higher is better. Thresholds are inclusive lower bounds,
  checked from the highest down; the first bound the rate reaches wins.
- Latency: lower is better. Thresholds are exclusive upper bounds,
  checked from the lowest up; the first bound the latency stays under wins.

Anything that matches no entry falls into the POOR tier.
"""

from .types import Tier

# (inclusive lower bound, tier), highest first
SUCCESS_RATE_TIERS: tuple[tuple[float, Tier], ...] = (
    (90.0, Tier.EXCELLENT),
    (70.0, Tier.GOOD),
)

# (exclusive upper bound in ms, tier), lowest first
LATENCY_TIERS: tuple[tuple[float, Tier], ...] = (
    (5000.0, Tier.EXCELLENT),
    (10000.0, Tier.GOOD),
)

SUCCESS_RATE_CSS_CLASSES: dict[Tier, str] = {
    Tier.EXCELLENT: "progress-success",
    Tier.GOOD: "progress-warning",
    Tier.POOR: "progress-danger",
}

LATENCY_CSS_CLASSES: dict[Tier, str] = {
    Tier.EXCELLENT: "latency-excellent",
    Tier.GOOD: "latency-good",
    Tier.POOR: "latency-poor",
}


def classify_success_rate(rate: float) -> Tier:
    """Classify a success rate percentage (>=90 excellent, >=70 good)."""
    for lower_bound, tier in SUCCESS_RATE_TIERS:
        if rate >= lower_bound:
            return tier
    return Tier.POOR


def classify_latency(latency_ms: float) -> Tier:
    """Classify a single relay latency (<5000 excellent, <10000 good)."""
    for upper_bound, tier in LATENCY_TIERS:
        if latency_ms < upper_bound:
            return tier
    return Tier.POOR


def success_rate_css_class(rate: float) -> str:
    return SUCCESS_RATE_CSS_CLASSES[classify_success_rate(rate)]


def latency_css_class(latency_ms: float) -> str:
    return LATENCY_CSS_CLASSES[classify_latency(latency_ms)]
