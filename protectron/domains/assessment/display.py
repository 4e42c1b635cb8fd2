"""Score and risk-level presentation lookups for the assessment results page."""

from datetime import date

from .config import default_config
from .models import RiskLevel, RiskLevelBadge, ScoreLabel


def get_score_color(score: float) -> str:
    if score >= 70:
        return "text-success-500"
    if score >= 40:
        return "text-warning-500"
    return "text-error-500"


def get_score_tone(score: float) -> str:
    """Semantic tone (success / warning / error) for the same bands as ``get_score_color``."""
    if score >= 70:
        return "success"
    if score >= 40:
        return "warning"
    return "error"


def get_score_label(score: float) -> ScoreLabel:
    if score >= 80:
        return ScoreLabel(label="Excellent", color="text-success-600", bg="bg-success-50")
    if score >= 60:
        return ScoreLabel(label="Good", color="text-success-600", bg="bg-success-50")
    if score >= 40:
        return ScoreLabel(label="Needs Work", color="text-warning-600", bg="bg-warning-50")
    return ScoreLabel(label="Critical", color="text-error-600", bg="bg-error-50")


_RISK_BADGES: dict[str, RiskLevelBadge] = {
    RiskLevel.PROHIBITED: RiskLevelBadge(
        text="PROHIBITED", bg="bg-error-100", text_color="text-error-700", border="border-error-300"
    ),
    RiskLevel.HIGH: RiskLevelBadge(
        text="HIGH RISK", bg="bg-warning-100", text_color="text-warning-700", border="border-warning-300"
    ),
    RiskLevel.LIMITED: RiskLevelBadge(
        text="LIMITED RISK", bg="bg-blue-100", text_color="text-blue-700", border="border-blue-300"
    ),
    RiskLevel.MINIMAL: RiskLevelBadge(
        text="MINIMAL RISK", bg="bg-success-100", text_color="text-success-700", border="border-success-300"
    ),
}

_UNKNOWN_BADGE = RiskLevelBadge(
    text="UNKNOWN", bg="bg-gray-100", text_color="text-gray-700", border="border-gray-300"
)


def get_risk_level_badge(level: str) -> RiskLevelBadge:
    return _RISK_BADGES.get(level, _UNKNOWN_BADGE)


def format_deadline_countdown(days: int) -> str:
    if days < 0:
        return "Deadline passed"
    if days == 0:
        return "Deadline is today"
    if days == 1:
        return "1 day remaining"
    if days < 30:
        return f"{days} days remaining"
    if days < 60:
        return f"{days // 7} weeks remaining"
    return f"{days // 30} months remaining"


def days_until_deadline(today: date, deadline: date | None = None) -> int:
    """Calendar days from *today* until the high-risk obligations deadline."""
    deadline = deadline or default_config.high_risk_deadline
    return (deadline - today).days
