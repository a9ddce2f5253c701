"""YAML-based report configuration loader.

Report naming, output location, language and recent-log windows can be set
from a YAML file instead of code. Example::

    report:
      name: ibc-relayer
      output_dir: reports/
      language: en
      network: vota-bobtail
      recent_logs:
        html: 20
        markdown: 10
        summary: 10
      outputs:
        json_summary: true
        chart: false
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from .exceptions import (
    RecentLogWindowError,
    ReportConfigError,
    ReportNameError,
    UnsupportedLanguageError,
)
from .statistics import HTML_RECENT_LOGS, MARKDOWN_RECENT_LOGS, SUMMARY_RECENT_LOGS
from .types import ReportLanguage

DEFAULT_REPORT_NAME = "ibc-relayer"


@dataclass
class ReportConfig:
    """Configuration for report rendering and output."""

    report_name: str = DEFAULT_REPORT_NAME  # Artifacts are <report_name>-report.<ext>
    output_dir: str | None = None  # None means the current working directory
    language: ReportLanguage = ReportLanguage.ZH
    network_name: str = "vota-bobtail"
    html_recent_logs: int = HTML_RECENT_LOGS
    markdown_recent_logs: int = MARKDOWN_RECENT_LOGS
    summary_recent_logs: int = SUMMARY_RECENT_LOGS
    write_json_summary: bool = False
    write_chart: bool = False

    def __post_init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        """Validate report configuration, coercing language strings."""
        if not isinstance(self.language, ReportLanguage):
            try:
                self.language = ReportLanguage(self.language)
            except ValueError:
                raise UnsupportedLanguageError(str(self.language)) from None

        if not self.report_name or "/" in self.report_name or "\\" in self.report_name:
            raise ReportNameError(self.report_name)

        for field_name in ("html_recent_logs", "markdown_recent_logs", "summary_recent_logs"):
            value = getattr(self, field_name)
            if isinstance(value, bool) or not isinstance(value, int) or value < 0:
                raise RecentLogWindowError(field_name, value)


def load_report_config_from_yaml(config_path: str | Path) -> ReportConfig:
    """
    Load report configuration from a YAML file.

    Args:
        config_path: Path to the YAML configuration file

    Returns:
        Validated ReportConfig

    Raises:
        FileNotFoundError: If config file doesn't exist
        ReportConfigError: If configuration is empty or invalid
    """
    config_path = Path(config_path)
    if not config_path.exists():
        raise FileNotFoundError(f"Report configuration not found: {config_path}")

    with open(config_path, encoding="utf-8") as f:
        data = yaml.safe_load(f)

    if not data:
        raise ReportConfigError(f"Empty configuration file: {config_path}")

    return _parse_yaml_config(data)


def _parse_yaml_config(data: dict[str, Any]) -> ReportConfig:
    """Parse YAML mapping into ReportConfig."""
    if not isinstance(data, dict):
        raise ReportConfigError("Configuration root must be a mapping")

    report_section = data.get("report")
    if not isinstance(report_section, dict):
        raise ReportConfigError("report section is required")

    recent_section = _optional_section(report_section, "recent_logs")
    outputs_section = _optional_section(report_section, "outputs")

    output_dir = report_section.get("output_dir")

    return ReportConfig(
        report_name=str(report_section.get("name", DEFAULT_REPORT_NAME)),
        output_dir=str(output_dir) if output_dir is not None else None,
        language=report_section.get("language", ReportLanguage.ZH.value),
        network_name=str(report_section.get("network", "vota-bobtail")),
        html_recent_logs=recent_section.get("html", HTML_RECENT_LOGS),
        markdown_recent_logs=recent_section.get("markdown", MARKDOWN_RECENT_LOGS),
        summary_recent_logs=recent_section.get("summary", SUMMARY_RECENT_LOGS),
        write_json_summary=_output_flag(outputs_section, "json_summary"),
        write_chart=_output_flag(outputs_section, "chart"),
    )


def _optional_section(parent: dict[str, Any], key: str) -> dict[str, Any]:
    """Nested mapping under key; absent or empty means defaults."""
    section = parent.get(key)
    if section is None:
        return {}
    if not isinstance(section, dict):
        raise ReportConfigError(
            f"report.{key} must be a mapping, got {type(section).__name__}",
            details={"section": key},
        )
    return section


def _output_flag(outputs_section: dict[str, Any], key: str) -> bool:
    value = outputs_section.get(key)
    if value is None:
        return False
    if not isinstance(value, bool):
        raise ReportConfigError(
            f"report.outputs.{key} must be true or false, got {value!r}",
            details={"field": key, "value": value},
        )
    return value
