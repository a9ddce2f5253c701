"""Tests for recommendation synthesis.

Rules fire independently; the all-nominal advisory is the fallback and only
appears when nothing else did.
"""

import pytest

from relay_report.core.recommendations import (
    find_poor_performers,
    synthesize_recommendations,
)
from relay_report.core.types import (
    AggregateSummary,
    RecommendationKind,
    RecommendationSeverity,
    ValidatorMetrics,
)


def summary(success_rate: float, latency: float) -> AggregateSummary:
    return AggregateSummary(
        success_rate=success_rate,
        average_latency=latency,
        total_tests=100,
        successful_tests=int(success_rate),
        active_validators=3,
    )


def validators(*rates: float) -> list[ValidatorMetrics]:
    return [
        ValidatorMetrics(validator_moniker=f"val-{i}", total_tests=100, success_rate=rate)
        for i, rate in enumerate(rates)
    ]


class TestSingleRules:
    """Each rule in isolation."""

    def test_low_success_rate_only(self):
        """75% overall, 3000 ms, all validators at 95%: only the low-rate advisory."""
        recs = synthesize_recommendations(summary(75.0, 3000.0), validators(95.0, 95.0, 95.0))

        assert [r.kind for r in recs] == [RecommendationKind.LOW_SUCCESS_RATE]
        assert recs[0].severity == RecommendationSeverity.WARNING

    def test_high_latency_only(self):
        recs = synthesize_recommendations(summary(95.0, 10001.0), validators(95.0))
        assert [r.kind for r in recs] == [RecommendationKind.HIGH_LATENCY]

    def test_latency_threshold_is_strict(self):
        recs = synthesize_recommendations(summary(95.0, 10000.0), validators(95.0))
        assert [r.kind for r in recs] == [RecommendationKind.ALL_NOMINAL]

    def test_success_threshold_is_strict(self):
        recs = synthesize_recommendations(summary(80.0, 1000.0), validators(95.0))
        assert [r.kind for r in recs] == [RecommendationKind.ALL_NOMINAL]

    def test_poor_validators_listed_in_input_order(self):
        metrics = validators(50.0, 95.0, 10.0, 69.9, 70.0)

        recs = synthesize_recommendations(summary(90.0, 1000.0), metrics)

        assert len(recs) == 1
        assert recs[0].kind == RecommendationKind.POOR_VALIDATORS
        assert recs[0].validators == ("val-0", "val-2", "val-3")

    def test_all_nominal_fallback(self):
        """95% overall, 2000 ms, all validators >= 90%: only the positive advisory."""
        recs = synthesize_recommendations(summary(95.0, 2000.0), validators(90.0, 99.0, 100.0))

        assert len(recs) == 1
        assert recs[0].kind == RecommendationKind.ALL_NOMINAL
        assert recs[0].severity == RecommendationSeverity.OK


class TestCombinedRules:
    """Rules are non-exclusive."""

    def test_all_warnings_fire_in_order(self):
        recs = synthesize_recommendations(summary(40.0, 20000.0), validators(30.0, 95.0))

        assert [r.kind for r in recs] == [
            RecommendationKind.LOW_SUCCESS_RATE,
            RecommendationKind.HIGH_LATENCY,
            RecommendationKind.POOR_VALIDATORS,
        ]

    def test_fallback_never_combined_with_warnings(self):
        recs = synthesize_recommendations(summary(40.0, 20000.0), validators(30.0))
        assert RecommendationKind.ALL_NOMINAL not in [r.kind for r in recs]

    @pytest.mark.parametrize(
        "rate,latency,validator_rates",
        [
            (0.0, 0.0, ()),
            (100.0, 0.0, ()),
            (79.9, 10000.1, (0.0,)),
            (85.0, 500.0, (69.0, 71.0)),
        ],
    )
    def test_always_at_least_one(self, rate, latency, validator_rates):
        recs = synthesize_recommendations(summary(rate, latency), validators(*validator_rates))
        assert len(recs) >= 1

    def test_no_validators_with_good_summary(self):
        recs = synthesize_recommendations(summary(100.0, 100.0), [])
        assert [r.kind for r in recs] == [RecommendationKind.ALL_NOMINAL]


class TestPoorPerformers:
    def test_find_poor_performers(self):
        assert find_poor_performers(validators(10.0, 80.0, 5.0)) == ["val-0", "val-2"]

    def test_recommendation_to_dict(self):
        recs = synthesize_recommendations(summary(90.0, 100.0), validators(10.0))

        assert recs[0].to_dict() == {
            "kind": "poor_validators",
            "severity": "warning",
            "validators": ["val-0"],
        }
