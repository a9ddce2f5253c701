"""Shared number and text formatting for every report format.

All renderers go through these helpers so the same value is displayed with
the same precision in HTML, Markdown and text.
"""

from datetime import datetime

RATE_DECIMALS = 1
LATENCY_DECIMALS = 0
HASH_PREVIEW_LENGTH = 16


def format_rate(rate: float) -> str:
    """
    Format a success rate percentage for display.

    Examples:
        >>> format_rate(83.333)
        '83.3%'
    """
    return f"{rate:.{RATE_DECIMALS}f}%"


def format_latency(latency_ms: float) -> str:
    """
    Format a latency in milliseconds for display.

    Examples:
        >>> format_latency(4500.4)
        '4500ms'
    """
    return f"{latency_ms:.{LATENCY_DECIMALS}f}ms"


def format_timestamp(value: datetime | None, unknown: str = "Unknown") -> str:
    """Format a timestamp as ``YYYY-MM-DD HH:MM:SS``."""
    if value is None:
        return unknown
    return value.strftime("%Y-%m-%d %H:%M:%S")


def truncate_identifier(value: str | None, length: int = HASH_PREVIEW_LENGTH) -> str | None:
    """Shorten a hash or address to ``length`` characters followed by ``...``."""
    if not value:
        return None
    return f"{value[:length]}..."


def escape_markdown_cell(value: str) -> str:
    """Escape characters that would break a Markdown table cell."""
    return value.replace("|", "\\|").replace("\n", " ")
