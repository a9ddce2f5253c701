"""
Core module - relay statistics, tier classification, ranking and recommendations.
"""

from relay_report.core.classification import (
    LATENCY_TIERS,
    SUCCESS_RATE_TIERS,
    classify_latency,
    classify_success_rate,
    latency_css_class,
    success_rate_css_class,
)
from relay_report.core.exceptions import (
    RecentLogWindowError,
    RelayReportError,
    ReportConfigError,
    ReportNameError,
    ReportWriteError,
    UnsupportedLanguageError,
)
from relay_report.core.pipeline import ReportContext, build_report_context
from relay_report.core.ranking import RankedValidator, rank_marker, rank_validators
from relay_report.core.recommendations import (
    find_poor_performers,
    synthesize_recommendations,
)
from relay_report.core.statistics import (
    HTML_RECENT_LOGS,
    MARKDOWN_RECENT_LOGS,
    SUMMARY_RECENT_LOGS,
    average_latency,
    compute_aggregate_summary,
    overall_success_rate,
    recent_logs,
    successful_count,
)
from relay_report.core.types import (
    AggregateSummary,
    Recommendation,
    RecommendationKind,
    RecommendationSeverity,
    ReportLanguage,
    TestLogEntry,
    Tier,
    ValidatorMetrics,
)
from relay_report.core.yaml_config import ReportConfig, load_report_config_from_yaml

__all__ = [
    "AggregateSummary",
    "HTML_RECENT_LOGS",
    "LATENCY_TIERS",
    "MARKDOWN_RECENT_LOGS",
    "RankedValidator",
    "Recommendation",
    "RecommendationKind",
    "RecommendationSeverity",
    "RecentLogWindowError",
    "RelayReportError",
    "ReportConfig",
    "ReportConfigError",
    "ReportContext",
    "ReportLanguage",
    "ReportNameError",
    "ReportWriteError",
    "SUCCESS_RATE_TIERS",
    "SUMMARY_RECENT_LOGS",
    "TestLogEntry",
    "Tier",
    "UnsupportedLanguageError",
    "ValidatorMetrics",
    "average_latency",
    "build_report_context",
    "classify_latency",
    "classify_success_rate",
    "compute_aggregate_summary",
    "find_poor_performers",
    "latency_css_class",
    "load_report_config_from_yaml",
    "overall_success_rate",
    "rank_marker",
    "rank_validators",
    "recent_logs",
    "success_rate_css_class",
    "successful_count",
    "synthesize_recommendations",
]
