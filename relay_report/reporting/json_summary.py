"""Structured, machine-readable report summary.

The summary keeps the wire keys downstream consumers already read
(``totalTests``, ``successRate``, ...) and is written as pretty-printed JSON:

- 2-space indentation
- UTF-8 without ASCII escaping (validator monikers may be non-Latin)
- ISO 8601 timestamps
- Trailing newline
"""

import json
from typing import Any

from relay_report.core.pipeline import ReportContext
from relay_report.core.statistics import SUMMARY_RECENT_LOGS, recent_logs


def generate_json_summary(
    context: ReportContext,
    recent_log_count: int = SUMMARY_RECENT_LOGS,
) -> dict[str, Any]:
    """
    Build the structured summary record.

    Args:
        context: Precomputed report context
        recent_log_count: Number of most recent logs to include

    Returns:
        Dictionary with ``summary``, ``validators`` (ranked, with 1-based
        ``rank``), ``recentLogs`` (newest first) and ``recommendations``
    """
    summary = context.summary.to_dict()
    summary["generatedAt"] = context.generated_at.isoformat()

    return {
        "summary": summary,
        "validators": [ranked.to_dict() for ranked in context.ranking],
        "recentLogs": [log.to_dict() for log in recent_logs(context.logs, recent_log_count)],
        "recommendations": [rec.to_dict() for rec in context.recommendations],
    }


def render_json_summary(
    context: ReportContext,
    recent_log_count: int = SUMMARY_RECENT_LOGS,
) -> str:
    """Serialize the structured summary to formatted JSON text."""
    data = generate_json_summary(context, recent_log_count)
    return json.dumps(data, indent=2, ensure_ascii=False) + "\n"
