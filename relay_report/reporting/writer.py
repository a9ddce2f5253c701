"""Best-effort persistence of rendered relay reports.

Rendering is pure; writing is the only step that can fail. Each artifact is
written on its own, so a failure for one format is logged and the remaining
formats are still attempted. Failures never propagate to the caller and are
not retried.
"""

import logging
from pathlib import Path

from relay_report.core.exceptions import ReportWriteError
from relay_report.core.pipeline import ReportContext
from relay_report.core.yaml_config import ReportConfig
from relay_report.visualization.success_rate_chart import (
    plot_validator_success_rate_chart,
    save_validator_success_rate_chart,
)

from .html_report import render_html_report
from .json_summary import render_json_summary
from .markdown_report import render_markdown_report

logger = logging.getLogger(__name__)

FORMAT_EXTENSIONS = {
    "html": "html",
    "markdown": "md",
    "json": "json",
}


class ReportWriter:
    """Renders a ReportContext into every configured format and saves it."""

    def __init__(self, config: ReportConfig | None = None) -> None:
        """
        Initialize report writer.

        Args:
            config: Report configuration (uses defaults if None)
        """
        self.config = config or ReportConfig()

    def artifact_path(self, output_dir: Path, report_format: str) -> Path:
        """Path of ``<report_name>-report.<ext>`` for a format."""
        extension = FORMAT_EXTENSIONS[report_format]
        return output_dir / f"{self.config.report_name}-report.{extension}"

    def chart_path(self, output_dir: Path) -> Path:
        return output_dir / f"{self.config.report_name}-success-rate.png"

    def render_reports(self, context: ReportContext) -> dict[str, str]:
        """
        Render all enabled text formats.

        Returns:
            Mapping of format name to rendered content
        """
        config = self.config
        rendered = {
            "html": render_html_report(
                context,
                language=config.language,
                network_name=config.network_name,
                recent_log_count=config.html_recent_logs,
            ),
            "markdown": render_markdown_report(
                context,
                language=config.language,
                network_name=config.network_name,
                recent_log_count=config.markdown_recent_logs,
            ),
        }
        if config.write_json_summary:
            rendered["json"] = render_json_summary(
                context, recent_log_count=config.summary_recent_logs
            )
        return rendered

    def save_reports(
        self, context: ReportContext, output_dir: str | Path | None = None
    ) -> dict[str, Path]:
        """
        Render and write reports to disk.

        Args:
            context: Precomputed report context
            output_dir: Target directory (falls back to config, then cwd)

        Returns:
            Mapping of format name to written path, for artifacts that were
            saved successfully
        """
        target_dir = Path(output_dir or self.config.output_dir or Path.cwd())
        saved: dict[str, Path] = {}

        for report_format, content in self.render_reports(context).items():
            path = self.artifact_path(target_dir, report_format)
            try:
                _write_artifact(path, content)
            except ReportWriteError as e:
                logger.error(f"Failed to save {report_format} report: {e}")
                continue
            saved[report_format] = path

        if self.config.write_chart:
            chart = self._save_chart(context, target_dir)
            if chart is not None:
                saved["chart"] = chart

        if saved:
            logger.info("Reports saved:")
            for report_format, path in saved.items():
                logger.info(f"  {report_format}: {path}")

        return saved

    def _save_chart(self, context: ReportContext, output_dir: Path) -> Path | None:
        if not context.ranking:
            logger.warning("Skipping success rate chart: no validator metrics")
            return None

        path = self.chart_path(output_dir)
        fig = plot_validator_success_rate_chart(context.ranking)
        try:
            save_validator_success_rate_chart(fig, path)
        except OSError as e:
            logger.error(f"Failed to save success rate chart to {path}: {e}")
            return None
        return path


def _write_artifact(path: Path, content: str) -> None:
    """Write one rendered artifact, wrapping OS errors with context."""
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("w", encoding="utf-8") as f:
            f.write(content)
    except OSError as e:
        raise ReportWriteError(str(path), str(e)) from e
