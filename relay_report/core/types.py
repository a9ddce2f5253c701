"""Core type definitions for relay test reporting."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any

MEMO_PREFIX = "relayed-by:"


class Tier(str, Enum):
    """Discrete performance bucket derived from a numeric metric."""

    EXCELLENT = "excellent"
    GOOD = "good"
    POOR = "poor"


class RecommendationKind(str, Enum):
    """Kind of advisory produced by the recommendation synthesizer."""

    LOW_SUCCESS_RATE = "low_success_rate"
    HIGH_LATENCY = "high_latency"
    POOR_VALIDATORS = "poor_validators"
    ALL_NOMINAL = "all_nominal"


class RecommendationSeverity(str, Enum):
    """Severity tag attached to a recommendation."""

    WARNING = "warning"
    OK = "ok"


def _isoformat(value: datetime | None) -> str | None:
    if value is None:
        return None
    return value.isoformat()


@dataclass(frozen=True)
class TestLogEntry:
    """One relay attempt recorded by the test harness."""

    __test__ = False  # not a pytest test class

    test_time: datetime
    tx_hash: str
    packet_sequence: int | str
    success: bool
    latency: float  # milliseconds
    memo_identifier: str | None = None
    relayer_signer: str | None = None

    @property
    def relayer_label(self) -> str | None:
        """Memo identifier without the ``relayed-by:`` prefix."""
        if not self.memo_identifier:
            return None
        return self.memo_identifier.replace(MEMO_PREFIX, "")

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "testTime": _isoformat(self.test_time),
            "txHash": self.tx_hash,
            "packetSequence": self.packet_sequence,
            "success": self.success,
            "latency": self.latency,
            "memoIdentifier": self.memo_identifier,
            "relayerSigner": self.relayer_signer,
        }


@dataclass
class ValidatorMetrics:
    """Aggregate relay performance for a single validator.

    ``success_rate`` is a percentage (0-100). ``successful_relays`` should
    never exceed ``total_tests``; this is the tracker's responsibility and is
    not corrected here.
    """

    validator_moniker: str
    total_tests: int = 0
    successful_relays: int = 0
    success_rate: float = 0.0
    average_latency: float = 0.0
    max_latency: float = 0.0
    continuous_failures: int = 0
    last_active_time: datetime | None = None

    @classmethod
    def from_counts(
        cls,
        validator_moniker: str,
        total_tests: int,
        successful_relays: int,
        average_latency: float = 0.0,
        max_latency: float = 0.0,
        continuous_failures: int = 0,
        last_active_time: datetime | None = None,
    ) -> "ValidatorMetrics":
        """Build a snapshot whose success rate is derived from the counts."""
        return cls(
            validator_moniker=validator_moniker,
            total_tests=total_tests,
            successful_relays=successful_relays,
            success_rate=_rate(successful_relays, total_tests),
            average_latency=average_latency,
            max_latency=max_latency,
            continuous_failures=continuous_failures,
            last_active_time=last_active_time,
        )

    def update(
        self, success: bool, latency: float, test_time: datetime | None = None
    ) -> None:
        """Update tracking with one relay attempt.

        Args:
            success: Whether the relay completed
            latency: Observed latency in milliseconds
            test_time: When the attempt happened (stamps last_active_time on success)
        """
        self.total_tests += 1
        if success:
            self.successful_relays += 1
            self.continuous_failures = 0

            # Running average over successful relays only
            n = self.successful_relays
            self.average_latency = (self.average_latency * (n - 1) + latency) / n

            if latency > self.max_latency:
                self.max_latency = latency
            if test_time is not None:
                self.last_active_time = test_time
        else:
            self.continuous_failures += 1

        self.success_rate = _rate(self.successful_relays, self.total_tests)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "validatorMoniker": self.validator_moniker,
            "totalTests": self.total_tests,
            "successfulRelays": self.successful_relays,
            "successRate": self.success_rate,
            "averageLatency": self.average_latency,
            "maxLatency": self.max_latency,
            "continuousFailures": self.continuous_failures,
            "lastActiveTime": _isoformat(self.last_active_time),
        }


def _rate(successes: int, total: int) -> float:
    if total == 0:
        return 0.0
    return successes / total * 100


@dataclass(frozen=True)
class AggregateSummary:
    """Overall statistics for one report generation."""

    success_rate: float
    average_latency: float
    total_tests: int
    successful_tests: int
    active_validators: int

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "totalTests": self.total_tests,
            "successfulTests": self.successful_tests,
            "successRate": self.success_rate,
            "averageLatency": self.average_latency,
            "activeValidators": self.active_validators,
        }


@dataclass(frozen=True)
class Recommendation:
    """Severity-tagged advisory.

    Text is resolved from ``kind`` by the rendering layer in the selected
    language; ``validators`` is only populated for POOR_VALIDATORS.
    """

    kind: RecommendationKind
    severity: RecommendationSeverity
    validators: tuple[str, ...] = field(default_factory=tuple)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "kind": self.kind.value,
            "severity": self.severity.value,
            "validators": list(self.validators),
        }


class ReportLanguage(str, Enum):
    """Language selected for rendered report text."""

    ZH = "zh"  # default
    EN = "en"
