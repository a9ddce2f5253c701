"""Bilingual (zh/en) label tables for rendered reports.

The core only produces semantic identifiers (tiers, recommendation kinds,
section keys). Everything a reader sees is looked up here as a
``(zh, en)`` pair and resolved with a single language flag.
"""

from relay_report.core.types import (
    Recommendation,
    RecommendationKind,
    ReportLanguage,
    Tier,
)

LabelPair = tuple[str, str]  # (zh, en)

TIER_EMOJI: dict[Tier, str] = {
    Tier.EXCELLENT: "🟢",
    Tier.GOOD: "🟡",
    Tier.POOR: "🔴",
}

TIER_LABELS: dict[Tier, LabelPair] = {
    Tier.EXCELLENT: ("优秀", "Excellent"),
    Tier.GOOD: ("良好", "Good"),
    Tier.POOR: ("需改进", "Needs Improvement"),
}

STATUS_LABELS: dict[bool, LabelPair] = {
    True: ("✅ 成功", "✅ Success"),
    False: ("❌ 失败", "❌ Failed"),
}

TEXT: dict[str, LabelPair] = {
    "title": ("🧪 IBC Relayer 测试报告", "🧪 IBC Relayer Test Report"),
    "page_title": ("IBC Relayer 测试报告", "IBC Relayer Test Report"),
    "subtitle": ("{network} 激励测试网 - 生成时间: {time}", "{network} Incentive Testnet - Generated at: {time}"),
    "generated_at": ("生成时间", "Generated at"),
    "network": ("测试网络", "Test Network"),
    "network_value": ("{network} 激励测试网", "{network} Incentive Testnet"),
    "overall": ("📊 总体统计", "📊 Overall Statistics"),
    "metric": ("指标", "Metric"),
    "value": ("数值", "Value"),
    "total_tests": ("总测试数", "Total Tests"),
    "successful_tests": ("成功测试数", "Successful Tests"),
    "success_rate": ("成功率", "Success Rate"),
    "average_latency": ("平均延迟", "Average Latency"),
    "max_latency": ("最大延迟", "Max Latency"),
    "active_validators": ("活跃 Validators", "Active Validators"),
    "ranking": ("🏆 Validator 性能排名", "🏆 Validator Performance Ranking"),
    "ranking_cards": ("📊 Validator 性能排名", "📊 Validator Performance Ranking"),
    "details": ("📈 详细性能指标", "📈 Detailed Performance Metrics"),
    "statistics": ("📈 性能统计", "📈 Performance Statistics"),
    "validator": ("Validator", "Validator"),
    "total_short": ("总测试", "Total"),
    "successful": ("成功数", "Successful"),
    "successful_short": ("成功", "Success"),
    "consecutive_failures": ("连续失败", "Consecutive Failures"),
    "consecutive_failure_count": ("连续失败次数", "Consecutive Failures"),
    "last_active": ("最后活跃", "Last Active"),
    "unknown_time": ("未知", "Unknown"),
    "status": ("状态", "Status"),
    "recent_logs": ("📝 最近测试日志", "📝 Recent Test Logs"),
    "recent_records": ("📝 最近测试记录 (最新{count}条)", "📝 Recent Test Records (latest {count})"),
    "time": ("时间", "Time"),
    "test_time": ("测试时间", "Test Time"),
    "latency": ("延迟", "Latency"),
    "latency_ms": ("延迟(ms)", "Latency(ms)"),
    "tx_hash": ("交易Hash", "Transaction Hash"),
    "packet_sequence": ("Packet序列", "Packet Sequence"),
    "relayer_identifier": ("Relayer标识", "Relayer Identifier"),
    "signer_address": ("Signer地址", "Signer Address"),
    "recommendations": ("💡 建议和总结", "💡 Recommendations & Summary"),
    "no_validators": ("暂无 Validator 数据", "No validator data available"),
    "no_logs": ("暂无测试记录", "No test records available"),
    "footer": (
        "此报告由 IBC Relayer 测试系统自动生成",
        "This report is automatically generated by the IBC Relayer testing system",
    ),
}

RECOMMENDATION_TEXT: dict[RecommendationKind, LabelPair] = {
    RecommendationKind.LOW_SUCCESS_RATE: (
        "⚠️ **整体成功率偏低**: 建议检查网络连接和 relayer 配置",
        "⚠️ **Low overall success rate**: check network connectivity and relayer configuration",
    ),
    RecommendationKind.HIGH_LATENCY: (
        "⚠️ **平均延迟较高**: 建议优化 relayer 响应速度",
        "⚠️ **High average latency**: consider optimizing relayer response time",
    ),
    RecommendationKind.POOR_VALIDATORS: (
        "⚠️ **性能不佳的 Validators**: {validators} 需要改进",
        "⚠️ **Underperforming validators**: {validators} need improvement",
    ),
    RecommendationKind.ALL_NOMINAL: (
        "✅ **整体表现良好**: 所有 validators 的 relayer 服务运行正常",
        "✅ **Overall performance is good**: relayer services for all validators are running normally",
    ),
}

UNKNOWN = "Unknown"


def pick(pair: LabelPair, language: ReportLanguage) -> str:
    """Resolve a (zh, en) pair for the given language."""
    zh, en = pair
    return zh if language == ReportLanguage.ZH else en


def text(key: str, language: ReportLanguage, **kwargs: object) -> str:
    """Resolve a static text key, formatting any placeholders."""
    resolved = pick(TEXT[key], language)
    return resolved.format(**kwargs) if kwargs else resolved


def text_pair(key: str, **kwargs: object) -> LabelPair:
    zh, en = TEXT[key]
    if kwargs:
        return zh.format(**kwargs), en.format(**kwargs)
    return zh, en


def tier_label(tier: Tier, language: ReportLanguage) -> str:
    """Status label with emoji, e.g. ``"🟢 Excellent"``."""
    return f"{TIER_EMOJI[tier]} {pick(TIER_LABELS[tier], language)}"


def tier_label_pair(tier: Tier) -> LabelPair:
    emoji = TIER_EMOJI[tier]
    zh, en = TIER_LABELS[tier]
    return f"{emoji} {zh}", f"{emoji} {en}"


def status_label(success: bool, language: ReportLanguage) -> str:
    return pick(STATUS_LABELS[success], language)


def recommendation_pair(recommendation: Recommendation) -> LabelPair:
    """Both language renderings of one advisory (Markdown emphasis included)."""
    zh, en = RECOMMENDATION_TEXT[recommendation.kind]
    validators = ", ".join(recommendation.validators)
    return zh.format(validators=validators), en.format(validators=validators)


def recommendation_text(recommendation: Recommendation, language: ReportLanguage) -> str:
    return pick(recommendation_pair(recommendation), language)
