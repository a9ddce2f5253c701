"""HTML relay test report rendering.

The document carries both languages: every translatable element has
``data-zh`` / ``data-en`` attributes and a small script switches between
them in the browser. The initial text is rendered in the requested language.

The page itself lives in ``templates/relay_report.html`` and is rendered
with Jinja2 autoescaping. The attribute values hold already-escaped markup
(the toggle script assigns them to ``innerHTML``), so the template escapes
them a second time with ``forceescape``.
"""

import re
from functools import lru_cache
from pathlib import Path
from typing import NamedTuple

from jinja2 import Environment, FileSystemLoader, select_autoescape
from markupsafe import Markup, escape

from relay_report.core.classification import latency_css_class, success_rate_css_class
from relay_report.core.pipeline import ReportContext
from relay_report.core.statistics import HTML_RECENT_LOGS, recent_logs
from relay_report.core.types import Recommendation, ReportLanguage, Tier

from . import labels
from .formatting import format_latency, format_rate, format_timestamp, truncate_identifier

TEMPLATE_DIR = Path(__file__).parent / "templates"
TEMPLATE_NAME = "relay_report.html"

HTML_LANG = {ReportLanguage.ZH: "zh-CN", ReportLanguage.EN: "en-US"}

_BOLD_PATTERN = re.compile(r"\*\*(.+?)\*\*")


class BilingualText(NamedTuple):
    """Escaped zh/en markup plus the one shown before any toggle."""

    zh: Markup
    en: Markup
    shown: Markup


class BilingualLabels:
    """Label lookups exposed to the template for one display language."""

    def __init__(self, language: ReportLanguage) -> None:
        self.language = language

    def _wrap(self, pair: labels.LabelPair, markup: bool = False) -> BilingualText:
        render = _inline_markup if markup else escape
        zh, en = (Markup(render(part)) for part in pair)
        return BilingualText(zh, en, labels.pick((zh, en), self.language))

    def text(self, key: str, **kwargs: object) -> BilingualText:
        return self._wrap(labels.text_pair(key, **kwargs))

    def tier(self, tier: Tier) -> BilingualText:
        return self._wrap(labels.tier_label_pair(tier))

    def status(self, success: bool) -> BilingualText:
        return self._wrap(labels.STATUS_LABELS[success])

    def recommendation(self, recommendation: Recommendation) -> BilingualText:
        """Advisory text with Markdown bold converted to <strong>."""
        return self._wrap(labels.recommendation_pair(recommendation), markup=True)


def _inline_markup(value: str) -> Markup:
    return Markup(_BOLD_PATTERN.sub(r"<strong>\1</strong>", str(escape(value))))


def _bar_width(rate: float) -> str:
    # Clamped so malformed rates cannot overflow the card
    return f"{max(0.0, min(rate, 100.0)):.1f}"


class HtmlReportRenderer:
    def __init__(self, template_path: str | Path = TEMPLATE_DIR, template_name: str = TEMPLATE_NAME):
        self.env = Environment(
            loader=FileSystemLoader(str(template_path)),
            autoescape=select_autoescape(["html", "xml"]),
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self.env.filters.update(
            rate=format_rate,
            latency=format_latency,
            timestamp=format_timestamp,
            short_id=truncate_identifier,
            bar_width=_bar_width,
        )
        self.env.globals.update(
            success_rate_css_class=success_rate_css_class,
            latency_css_class=latency_css_class,
            unknown=labels.UNKNOWN,
        )
        self.template = self.env.get_template(template_name)

    def render(
        self,
        context: ReportContext,
        language: ReportLanguage = ReportLanguage.ZH,
        network_name: str = "vota-bobtail",
        recent_log_count: int = HTML_RECENT_LOGS,
    ) -> str:
        """
        Renders the report context into an HTML string using the Jinja2 template.

        Args:
            context: Precomputed report context
            language: Language shown before any toggle
            network_name: Test network shown in the subtitle
            recent_log_count: Number of most recent logs in the log table

        Returns:
            Complete HTML document
        """
        summary = context.summary
        summary_cards = [
            {"variant": "info", "key": "total_tests", "value": summary.total_tests},
            {"variant": "success", "key": "success_rate", "value": format_rate(summary.success_rate)},
            {"variant": "warning", "key": "average_latency", "value": format_latency(summary.average_latency)},
            {"variant": None, "key": "active_validators", "value": summary.active_validators},
        ]

        return self.template.render(
            context=context,
            language=language,
            html_lang=HTML_LANG[language],
            network_name=network_name,
            page_title=labels.text_pair("page_title"),
            i18n=BilingualLabels(language),
            summary_cards=summary_cards,
            logs=recent_logs(context.logs, recent_log_count),
        )


@lru_cache(maxsize=None)
def default_renderer() -> HtmlReportRenderer:
    """Renderer for the bundled template, built on first use."""
    return HtmlReportRenderer()


def render_html_report(
    context: ReportContext,
    language: ReportLanguage = ReportLanguage.ZH,
    network_name: str = "vota-bobtail",
    recent_log_count: int = HTML_RECENT_LOGS,
) -> str:
    """Render the bilingual HTML report with the bundled template."""
    return default_renderer().render(
        context,
        language=language,
        network_name=network_name,
        recent_log_count=recent_log_count,
    )
