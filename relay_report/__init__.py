"""
relay-report: IBC relayer test reporting.

Aggregates relay test logs and per-validator metrics into ranked HTML,
Markdown and JSON reports with actionable recommendations.
"""

from relay_report.core import (
    ReportConfig,
    ReportContext,
    ReportLanguage,
    TestLogEntry,
    ValidatorMetrics,
    build_report_context,
    load_report_config_from_yaml,
)
from relay_report.reporting import (
    ReportWriter,
    generate_json_summary,
    render_html_report,
    render_markdown_report,
)

__version__ = "0.1.0"

__all__ = [
    "ReportConfig",
    "ReportContext",
    "ReportLanguage",
    "ReportWriter",
    "TestLogEntry",
    "ValidatorMetrics",
    "build_report_context",
    "generate_json_summary",
    "load_report_config_from_yaml",
    "render_html_report",
    "render_markdown_report",
]
