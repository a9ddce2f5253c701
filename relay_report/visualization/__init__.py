"""
Visualization module - validator success rate charts.
"""

from .success_rate_chart import (
    plot_validator_success_rate_chart,
    save_validator_success_rate_chart,
)

__all__ = [
    "plot_validator_success_rate_chart",
    "save_validator_success_rate_chart",
]
