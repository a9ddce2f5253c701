"""
Reporting module - HTML, Markdown and structured-summary rendering and output.
"""

from relay_report.reporting.html_report import HtmlReportRenderer, render_html_report
from relay_report.reporting.json_summary import generate_json_summary, render_json_summary
from relay_report.reporting.markdown_report import render_markdown_report
from relay_report.reporting.writer import ReportWriter

__all__ = [
    "HtmlReportRenderer",
    "ReportWriter",
    "generate_json_summary",
    "render_html_report",
    "render_json_summary",
    "render_markdown_report",
]
