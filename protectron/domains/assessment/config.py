"""EU AI Act assessment classification configuration.

Tag sets mirror the options offered by the self-assessment form. Point
deductions are fixed (not proportional): each matched trigger removes a set
number of points from a starting score of 100.

References:
- Regulation (EU) 2024/1689, Article 5: Prohibited AI practices
- Regulation (EU) 2024/1689, Article 6 and Annex III: High-risk AI systems
- Regulation (EU) 2024/1689, Article 50: Transparency obligations
"""

import os
from dataclasses import dataclass, field
from datetime import date

from .models import AutomationLevel, DecisionImpact


def _tags_from_env(value: str) -> list[str]:
    return [tag.strip() for tag in value.split(",") if tag.strip()]


@dataclass
class HighRiskConfig:
    """Annex III high-risk triggers.

    One point of count per matching use case, plus one when a sensitive data
    category is combined with a high-impact decision.
    """

    use_cases: list[str] = field(
        default_factory=lambda: [
            "hiring",  # Annex III, Section 4 (employment)
            "healthcare",  # Annex III, Section 5 (essential services)
            "finance",  # Annex III, Section 5 (creditworthiness)
            "legal",  # Annex III, Section 6 (law enforcement)
            "education",  # Annex III, Section 3
            "critical-infra",  # Annex III, Section 2
            "biometric-id",  # Annex III, Section 1
        ]
    )
    sensitive_data_types: list[str] = field(
        default_factory=lambda: ["biometric", "health", "financial", "criminal", "children"]
    )
    high_impact_decisions: list[str] = field(
        default_factory=lambda: [DecisionImpact.HIGH, DecisionImpact.CRITICAL]
    )
    points_per_trigger: int = 8


@dataclass
class LimitedRiskConfig:
    """Article 50 transparency triggers."""

    system_types: list[str] = field(
        default_factory=lambda: ["chatbot", "genai", "recommendation", "speech", "nlp"]
    )
    points_per_trigger: int = 3


@dataclass
class MinimalRiskConfig:
    """Voluntary best-practice tier. Never deducts points."""

    system_types: list[str] = field(
        default_factory=lambda: ["analytics", "automation", "fraud", "ml-model", "vision"]
    )
    use_cases: list[str] = field(default_factory=lambda: ["internal", "research"])


@dataclass
class ProhibitedPracticeConfig:
    """Article 5 practices. Rules are supplied by ``PROHIBITED_PRACTICE_RULES``."""

    points_deducted: int = 30


@dataclass
class AutomationConfig:
    """Adjustment applied after all tier deductions."""

    # Penalised only when at least one high-risk trigger fired
    unsupervised_levels: list[str] = field(
        default_factory=lambda: [
            AutomationLevel.FULLY_AUTOMATED,
            AutomationLevel.AUTOMATED_OVERRIDE,
        ]
    )
    unsupervised_penalty: int = 10

    supervised_levels: list[str] = field(
        default_factory=lambda: [AutomationLevel.HUMAN_IN_LOOP, AutomationLevel.ADVISORY_ONLY]
    )
    supervised_bonus: int = 5


@dataclass
class AssessmentConfig:
    """Top-level assessment classification configuration."""

    prohibited: ProhibitedPracticeConfig = field(default_factory=ProhibitedPracticeConfig)
    high_risk: HighRiskConfig = field(default_factory=HighRiskConfig)
    limited_risk: LimitedRiskConfig = field(default_factory=LimitedRiskConfig)
    minimal_risk: MinimalRiskConfig = field(default_factory=MinimalRiskConfig)
    automation: AutomationConfig = field(default_factory=AutomationConfig)

    starting_score: int = 100
    min_score: int = 0
    max_score: int = 100

    # High-risk obligations apply from this date (Article 113)
    high_risk_deadline: date = date(2026, 8, 2)

    @classmethod
    def from_env(cls) -> "AssessmentConfig":
        """Load config with env var overrides (ASSESSMENT_ prefix)."""
        config = cls()

        if v := os.getenv("ASSESSMENT_HIGH_RISK_USE_CASES"):
            config.high_risk.use_cases = _tags_from_env(v)
        if v := os.getenv("ASSESSMENT_HIGH_RISK_POINTS"):
            config.high_risk.points_per_trigger = int(v)
        if v := os.getenv("ASSESSMENT_LIMITED_RISK_TYPES"):
            config.limited_risk.system_types = _tags_from_env(v)
        if v := os.getenv("ASSESSMENT_LIMITED_RISK_POINTS"):
            config.limited_risk.points_per_trigger = int(v)
        if v := os.getenv("ASSESSMENT_PROHIBITED_POINTS"):
            config.prohibited.points_deducted = int(v)
        if v := os.getenv("ASSESSMENT_AUTOMATION_PENALTY"):
            config.automation.unsupervised_penalty = int(v)
        if v := os.getenv("ASSESSMENT_AUTOMATION_BONUS"):
            config.automation.supervised_bonus = int(v)
        if v := os.getenv("ASSESSMENT_HIGH_RISK_DEADLINE"):
            config.high_risk_deadline = date.fromisoformat(v)

        return config


# Module-level default instance
default_config = AssessmentConfig()
