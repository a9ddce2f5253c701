"""Tests for bilingual HTML report rendering."""

from datetime import datetime, timedelta

from relay_report.core.pipeline import build_report_context
from relay_report.core.statistics import HTML_RECENT_LOGS
from relay_report.core.types import ReportLanguage, TestLogEntry, ValidatorMetrics
from relay_report.reporting.html_report import HtmlReportRenderer, render_html_report

BASE_TIME = datetime(2024, 1, 8, 12, 0, 0)


def make_logs(count: int) -> list[TestLogEntry]:
    return [
        TestLogEntry(
            test_time=BASE_TIME + timedelta(minutes=i),
            tx_hash=f"{i:02d}" + "A" * 62,
            packet_sequence=5000 + i,
            success=i % 2 == 0,
            latency=[1000.0, 6000.0, 12000.0][i % 3],
            memo_identifier=f"relayed-by:relayer-{i}",
            relayer_signer="cosmos1qqqqqqqqqqqqqqqqqqqqqqqqqqqq" if i % 2 else None,
        )
        for i in range(count)
    ]


def make_metrics() -> list[ValidatorMetrics]:
    return [
        ValidatorMetrics.from_counts("mid", 10, 8, last_active_time=BASE_TIME),
        ValidatorMetrics.from_counts("top", 10, 10),
        ValidatorMetrics.from_counts("<script>alert(1)</script>", 10, 2),
    ]


def render(language=ReportLanguage.ZH, logs=None, metrics=None) -> str:
    context = build_report_context(
        make_logs(25) if logs is None else logs,
        make_metrics() if metrics is None else metrics,
        generated_at=datetime(2024, 1, 9, 8, 0, 0),
    )
    return render_html_report(context, language=language)


class TestHtmlDocument:
    """Test document skeleton and language handling."""

    def test_document_skeleton(self):
        html = render()

        assert html.startswith("<!DOCTYPE html>")
        assert '<html lang="zh-CN">' in html
        assert "<title>IBC Relayer 测试报告</title>" in html
        assert "switchLanguage" in html
        assert html.rstrip().endswith("</html>")

    def test_english_default(self):
        html = render(language=ReportLanguage.EN)

        assert '<html lang="en-US">' in html
        assert "<title>IBC Relayer Test Report</title>" in html
        assert 'class="language-button active" onclick="switchLanguage(\'en\')"' in html
        assert "localStorage.getItem('reportLanguage') || 'en'" in html

    def test_elements_carry_both_languages(self):
        html = render()

        assert 'data-zh="总测试数" data-en="Total Tests">总测试数</h3>' in html
        assert 'data-zh="成功率" data-en="Success Rate">成功率</h3>' in html

    def test_english_visible_text(self):
        html = render(language=ReportLanguage.EN)
        assert 'data-en="Total Tests">Total Tests</h3>' in html


class TestHtmlSummaryAndCards:
    """Test summary cards and validator cards."""

    def test_summary_values(self):
        html = render()

        # 25 logs, 13 even indices succeed
        assert '<div class="value">25</div>' in html
        assert '<div class="value">52.0%</div>' in html
        assert '<div class="value">3</div>' in html

    def test_cards_in_ranking_order(self):
        html = render()

        assert html.index("🥇 🏷️ top") < html.index("🥈 🏷️ mid")

    def test_progress_classes_follow_tiers(self):
        html = render()

        assert 'class="progress-fill progress-success" style="width: 100.0%"' in html
        assert 'class="progress-fill progress-warning" style="width: 80.0%"' in html
        assert 'class="progress-fill progress-danger" style="width: 20.0%"' in html

    def test_last_active(self):
        html = render()

        assert '<span class="metric-value">2024-01-08 12:00:00</span>' in html
        assert 'data-zh="未知" data-en="Unknown">未知</span>' in html

    def test_monikers_are_escaped(self):
        html = render()

        assert "<script>alert(1)</script>" not in html
        assert "&lt;script&gt;alert(1)&lt;/script&gt;" in html

    def test_no_validators(self):
        html = render(language=ReportLanguage.EN, metrics=[])
        assert "No validator data available" in html


class TestHtmlLogTable:
    """Test the recent log table."""

    def test_shows_last_twenty_newest_first(self):
        html = render()

        rows = [line for line in html.splitlines() if line.strip().startswith("<tr><td>2024-")]
        assert len(rows) == HTML_RECENT_LOGS
        assert "<td>5024</td>" in rows[0]
        assert "<td>5005</td>" in rows[-1]
        assert "<td>5004</td>" not in html

    def test_row_formatting(self):
        html = render()

        # index 24: success, latency 1000 (excellent), no signer
        assert "<td>2024-01-08 12:24:00</td>" in html
        assert '<td class="mono">24AAAAAAAAAAAAAA...</td>' in html
        assert '<td class="latency-excellent">1000</td>' in html
        assert "<td>relayer-24</td>" in html
        assert '<td class="mono">Unknown</td>' in html

    def test_latency_and_status_classes(self):
        html = render()

        assert '<td class="latency-good">6000</td>' in html
        assert '<td class="latency-poor">12000</td>' in html
        assert 'class="status-failed" data-zh="❌ 失败" data-en="❌ Failed"' in html
        assert 'class="status-success" data-zh="✅ 成功" data-en="✅ Success"' in html

    def test_signer_truncated(self):
        html = render()
        assert '<td class="mono">cosmos1qqqqqqqqq...</td>' in html


class TestHtmlStatisticsAndRecommendations:
    """Test the performance table and recommendation section."""

    def test_status_cell_bilingual(self):
        html = render()
        assert 'data-zh="🟢 优秀" data-en="🟢 Excellent">🟢 优秀</td>' in html

    def test_recommendations_rendered_with_strong(self):
        html = render(language=ReportLanguage.EN)

        assert "recommendation recommendation-warning" in html
        assert "<strong>Low overall success rate</strong>" in html
        assert "&lt;script&gt;alert(1)&lt;/script&gt; need improvement" in html

    def test_all_nominal(self):
        logs = [TestLogEntry(BASE_TIME, "h" * 20, i, True, 100.0) for i in range(3)]
        metrics = [ValidatorMetrics.from_counts("top", 10, 10)]

        html = render(language=ReportLanguage.EN, logs=logs, metrics=metrics)

        assert "recommendation recommendation-ok" in html
        assert "recommendation-warning" not in html


class TestHtmlEscaping:
    """Test escaping of the toggle attributes and template loading."""

    def test_toggle_attributes_hold_escaped_markup(self):
        html = render(language=ReportLanguage.EN)

        # The toggle script assigns attribute values to innerHTML
        assert "&lt;strong&gt;Low overall success rate&lt;/strong&gt;: check network" in html
        assert "&amp;lt;script&amp;gt;alert(1)&amp;lt;/script&amp;gt; need improvement" in html

    def test_network_name_escaped_in_subtitle(self):
        context = build_report_context(make_logs(3), make_metrics(), generated_at=BASE_TIME)

        html = render_html_report(context, language=ReportLanguage.EN, network_name="<b>net</b>")

        assert "<b>net</b>" not in html
        assert "&lt;b&gt;net&lt;/b&gt; Incentive Testnet" in html

    def test_custom_template_is_autoescaped(self, tmp_path):
        (tmp_path / "mini.html").write_text(
            "{{ context.summary.total_tests }} {{ name }} {{ context.summary.success_rate|rate }}",
            encoding="utf-8",
        )
        context = build_report_context(make_logs(4), make_metrics(), generated_at=BASE_TIME)
        renderer = HtmlReportRenderer(template_path=tmp_path, template_name="mini.html")

        rendered = renderer.template.render(context=context, name="<i>x</i>")

        assert rendered == "4 &lt;i&gt;x&lt;/i&gt; 50.0%"
