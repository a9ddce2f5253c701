"""
Custom exception classes with error codes for relay reporting.

Error codes follow the format: RR-{SEVERITY}-{NUMBER}
- Severity: E (Error), W (Warning)
- Number: Three-digit sequence number

Computation over logs and metrics never raises; these errors cover
configuration and artifact output only.
"""

from typing import Optional


class RelayReportError(Exception):
    """Base exception class for all relay report errors with error codes."""

    def __init__(self, message: str, error_code: str, details: Optional[dict] = None):
        """
        Initialize relay report exception with error code.

        Args:
            message: Human-readable error message
            error_code: Unique error code (e.g., "RR-E-001")
            details: Optional dict with additional context
        """
        self.error_code = error_code
        self.details = details or {}
        full_message = f"[{error_code}] {message}"
        super().__init__(full_message)


# =============================================================================
# Configuration Errors (RR-E-001 to RR-E-099)
# =============================================================================


class ReportConfigError(RelayReportError):
    """Raised when report configuration is invalid."""

    def __init__(self, message: str, error_code: str = "RR-E-001", details: Optional[dict] = None):
        super().__init__(message, error_code, details)


class ReportNameError(ReportConfigError):
    """Raised when the report name is empty or contains path separators."""

    def __init__(self, report_name: str):
        super().__init__(
            f"Invalid report name: {report_name!r}",
            "RR-E-002",
            {"report_name": report_name},
        )


class UnsupportedLanguageError(ReportConfigError):
    """Raised when a report language outside zh/en is requested."""

    def __init__(self, language: str):
        super().__init__(
            f"Unsupported report language: {language!r}. Valid options: zh, en",
            "RR-E-003",
            {"language": language},
        )


class RecentLogWindowError(ReportConfigError):
    """Raised when a recent-log window size is negative."""

    def __init__(self, field_name: str, value: int):
        super().__init__(
            f"{field_name} must be non-negative, got {value}",
            "RR-E-004",
            {"field": field_name, "value": value},
        )


# =============================================================================
# Output Errors (RR-E-100 to RR-E-199)
# =============================================================================


class ReportWriteError(RelayReportError):
    """Raised when a rendered report artifact cannot be written."""

    def __init__(self, path: str, reason: str):
        super().__init__(
            f"Failed to write report artifact {path}: {reason}",
            "RR-E-101",
            {"path": path, "reason": reason},
        )
