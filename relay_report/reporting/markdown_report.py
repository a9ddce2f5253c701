"""Markdown relay test report rendering.

Produces a lightweight-markup report from a ReportContext. All numbers come
from the context; nothing is recomputed here.
"""

from functools import partial

from relay_report.core.pipeline import ReportContext
from relay_report.core.statistics import MARKDOWN_RECENT_LOGS, recent_logs
from relay_report.core.types import ReportLanguage

from . import labels
from .formatting import escape_markdown_cell, format_latency, format_rate, format_timestamp

SECTION_RULE = "---"


def render_markdown_report(
    context: ReportContext,
    language: ReportLanguage = ReportLanguage.ZH,
    network_name: str = "vota-bobtail",
    recent_log_count: int = MARKDOWN_RECENT_LOGS,
) -> str:
    """
    Render the Markdown report.

    Args:
        context: Precomputed report context
        language: Language for all report text
        network_name: Test network shown in the header
        recent_log_count: Number of most recent logs to list

    Returns:
        Markdown document
    """
    sections = [
        _header(context, language, network_name),
        _overall_section(context, language),
        _ranking_section(context, language),
        _details_section(context, language),
        _recent_logs_section(context, language, recent_log_count),
        _recommendations_section(context, language),
        [f"*{labels.text('footer', language)}*"],
    ]

    lines: list[str] = []
    for i, section in enumerate(sections):
        if i > 0:
            lines.extend(["", SECTION_RULE, ""])
        lines.extend(section)
    lines.append("")

    return "\n".join(lines)


def _header(context: ReportContext, language: ReportLanguage, network_name: str) -> list[str]:
    generated = format_timestamp(context.generated_at)
    network = labels.text("network_value", language, network=network_name)
    return [
        f"# {labels.text('title', language)}",
        "",
        # Trailing double space forces a Markdown line break
        f"**{labels.text('generated_at', language)}**: {generated}  ",
        f"**{labels.text('network', language)}**: {network}",
    ]


def _overall_section(context: ReportContext, language: ReportLanguage) -> list[str]:
    summary = context.summary
    t = partial(labels.text, language=language)
    return [
        f"## {t('overall')}",
        "",
        f"| {t('metric')} | {t('value')} |",
        "|------|------|",
        f"| {t('total_tests')} | {summary.total_tests} |",
        f"| {t('successful_tests')} | {summary.successful_tests} |",
        f"| {t('success_rate')} | {format_rate(summary.success_rate)} |",
        f"| {t('average_latency')} | {format_latency(summary.average_latency)} |",
        f"| {t('active_validators')} | {summary.active_validators} |",
    ]


def _ranking_section(context: ReportContext, language: ReportLanguage) -> list[str]:
    lines = [f"## {labels.text('ranking', language)}", ""]

    if not context.ranking:
        lines.append(labels.text("no_validators", language))
        return lines

    rate_label = labels.text("success_rate", language)
    for ranked in context.ranking:
        m = ranked.metrics
        lines.append(
            f"{ranked.marker} **{escape_markdown_cell(m.validator_moniker)}** - {rate_label}: "
            f"{format_rate(m.success_rate)} ({m.successful_relays}/{m.total_tests}) "
            f"{labels.tier_label(ranked.tier, language)}"
        )
    return lines


def _details_section(context: ReportContext, language: ReportLanguage) -> list[str]:
    t = partial(labels.text, language=language)
    lines = [
        f"## {t('details')}",
        "",
        f"| {t('validator')} | {t('total_short')} | {t('successful_short')} | "
        f"{t('success_rate')} | {t('average_latency')} | {t('max_latency')} | "
        f"{t('consecutive_failures')} | {t('status')} |",
        "|-----------|--------|------|--------|----------|----------|----------|------|",
    ]

    for ranked in context.ranking:
        m = ranked.metrics
        lines.append(
            f"| {escape_markdown_cell(m.validator_moniker)} | {m.total_tests} | "
            f"{m.successful_relays} | {format_rate(m.success_rate)} | "
            f"{format_latency(m.average_latency)} | {format_latency(m.max_latency)} | "
            f"{m.continuous_failures} | {labels.tier_label(ranked.tier, language)} |"
        )
    return lines


def _recent_logs_section(
    context: ReportContext, language: ReportLanguage, recent_log_count: int
) -> list[str]:
    t = partial(labels.text, language=language)
    lines = [
        f"## {labels.text('recent_records', language, count=recent_log_count)}",
        "",
    ]

    window = recent_logs(context.logs, recent_log_count)
    if not window:
        lines.append(t("no_logs"))
        return lines

    lines.append(
        f"| {t('time')} | {t('status')} | {t('latency')} | "
        f"{t('validator')} | {t('packet_sequence')} |"
    )
    lines.append("|------|------|------|-----------|------------|")

    for log in window:
        relayer = escape_markdown_cell(log.relayer_label or labels.UNKNOWN)
        lines.append(
            f"| {format_timestamp(log.test_time)} | "
            f"{labels.status_label(log.success, language)} | "
            f"{format_latency(log.latency)} | {relayer} | "
            f"{escape_markdown_cell(str(log.packet_sequence))} |"
        )
    return lines


def _recommendations_section(context: ReportContext, language: ReportLanguage) -> list[str]:
    lines = [f"## {labels.text('recommendations', language)}", ""]
    advisories = [
        labels.recommendation_text(rec, language) for rec in context.recommendations
    ]
    lines.append("\n\n".join(advisories))
    return lines
