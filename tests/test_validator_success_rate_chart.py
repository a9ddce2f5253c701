"""Tests for the validator success rate chart.

The chart shows relay success rate per validator in ranking order, with
bars colored by success-rate tier.
"""

import matplotlib.pyplot as plt
import pytest
from matplotlib.colors import to_hex

from relay_report.core.ranking import rank_validators
from relay_report.core.types import Tier, ValidatorMetrics
from relay_report.visualization.success_rate_chart import (
    TIER_COLORS,
    plot_validator_success_rate_chart,
    save_validator_success_rate_chart,
)


def make_ranking():
    return rank_validators(
        [
            ValidatorMetrics.from_counts("poor", 10, 3),
            ValidatorMetrics.from_counts("excellent", 10, 10),
            ValidatorMetrics.from_counts("good", 20, 15),
        ]
    )


class TestPlotChart:
    """Test chart construction."""

    def test_empty_ranking_rejected(self):
        with pytest.raises(ValueError, match="ranking cannot be empty"):
            plot_validator_success_rate_chart([])

    def test_bars_follow_ranking(self):
        fig = plot_validator_success_rate_chart(make_ranking())
        try:
            ax = fig.axes[0]
            labels = [tick.get_text() for tick in ax.get_xticklabels()]
            heights = [patch.get_height() for patch in ax.patches]

            assert labels == ["excellent", "good", "poor"]
            assert heights == pytest.approx([100.0, 75.0, 30.0])
        finally:
            plt.close(fig)

    def test_bar_colors_follow_tiers(self):
        fig = plot_validator_success_rate_chart(make_ranking())
        try:
            colors = [to_hex(patch.get_facecolor(), keep_alpha=False) for patch in fig.axes[0].patches]

            assert colors == [
                TIER_COLORS[Tier.EXCELLENT],
                TIER_COLORS[Tier.GOOD],
                TIER_COLORS[Tier.POOR],
            ]
        finally:
            plt.close(fig)

    def test_default_and_custom_title(self):
        fig = plot_validator_success_rate_chart(make_ranking())
        custom = plot_validator_success_rate_chart(make_ranking(), title="Nightly run")
        try:
            assert fig.axes[0].get_title() == "Validator Relay Success Rate"
            assert custom.axes[0].get_title() == "Nightly run"
        finally:
            plt.close(fig)
            plt.close(custom)


class TestSaveChart:
    """Test writing the chart to disk."""

    def test_save_png(self, tmp_path):
        output = tmp_path / "charts" / "success.png"
        fig = plot_validator_success_rate_chart(make_ranking())

        save_validator_success_rate_chart(fig, output)

        assert output.exists()
        assert output.read_bytes()[:8] == b"\x89PNG\r\n\x1a\n"

    def test_rejects_non_png(self, tmp_path):
        fig = plot_validator_success_rate_chart(make_ranking())
        try:
            with pytest.raises(ValueError, match="must end in .png"):
                save_validator_success_rate_chart(fig, tmp_path / "chart.jpg")
        finally:
            plt.close(fig)

    def test_figure_closed_when_directory_cannot_be_created(self, tmp_path):
        blocker = tmp_path / "not-a-dir"
        blocker.write_text("file in the way")
        fig = plot_validator_success_rate_chart(make_ranking())

        with pytest.raises(OSError):
            save_validator_success_rate_chart(fig, blocker / "chart.png")

        assert not plt.fignum_exists(fig.number)
