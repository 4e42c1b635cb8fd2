"""EU AI Act risk classification for self-assessments.

Maps a completed assessment into risk-tier buckets and a 0-100 compliance
score using fixed point deductions:

  prohibited  -30 per assessment (when any prohibited practice matches)
  high        -8 per trigger
  limited     -3 per trigger
  minimal     no deduction

followed by an automation-level adjustment and a clamp to [0, 100].

Tiers are independent accumulations; result order (prohibited, high,
limited, minimal) only matters for display.
"""

import structlog

from .config import AssessmentConfig, default_config
from .models import (
    AssessmentInput,
    RiskClassification,
    RiskLevel,
    RiskResult,
    ScoreBreakdownItem,
)
from .prohibited import PROHIBITED_PRACTICE_RULES, ProhibitedPracticeRule

logger = structlog.get_logger()


# Static display text per tier, rendered verbatim by the results page
RISK_LEVEL_DISPLAY: dict[RiskLevel, dict[str, str]] = {
    RiskLevel.PROHIBITED: {
        "label": "Prohibited",
        "description": "Must stop immediately",
        "color": "text-error-600",
        "bg_color": "bg-error-50",
        "border_color": "border-error-200",
        "icon": "Danger",
    },
    RiskLevel.HIGH: {
        "label": "High Risk",
        "description": "Requires conformity assessment",
        "color": "text-warning-600",
        "bg_color": "bg-warning-50",
        "border_color": "border-warning-200",
        "icon": "Warning2",
    },
    RiskLevel.LIMITED: {
        "label": "Limited Risk",
        "description": "Transparency obligations",
        "color": "text-blue-600",
        "bg_color": "bg-blue-50",
        "border_color": "border-blue-200",
        "icon": "InfoCircle",
    },
    RiskLevel.MINIMAL: {
        "label": "Minimal Risk",
        "description": "Voluntary best practices",
        "color": "text-success-600",
        "bg_color": "bg-success-50",
        "border_color": "border-success-200",
        "icon": "TickCircle",
    },
}


def build_risk_result(level: RiskLevel, count: int) -> RiskResult:
    """Attach the static display text for *level* to a trigger count."""
    return RiskResult(level=level, count=count, **RISK_LEVEL_DISPLAY[level])


def _count_in(tags: list[str], allowed: list[str]) -> int:
    # Every list entry counts, repeated tags included
    return sum(1 for tag in tags if tag in allowed)


def has_sensitive_high_impact(
    assessment: AssessmentInput, config: AssessmentConfig = default_config
) -> bool:
    """True when sensitive data feeds a high or critical impact decision."""
    hr = config.high_risk
    has_sensitive_data = any(dt in hr.sensitive_data_types for dt in assessment.data_types)
    return has_sensitive_data and assessment.decision_impact in hr.high_impact_decisions


class RiskClassifier:
    """Classifies an assessment into EU AI Act risk tiers with a compliance score."""

    def __init__(
        self,
        config: AssessmentConfig | None = None,
        prohibited_rules: list[ProhibitedPracticeRule] | None = None,
    ) -> None:
        self._config = config or default_config
        self._prohibited_rules = (
            list(PROHIBITED_PRACTICE_RULES) if prohibited_rules is None else list(prohibited_rules)
        )

    def classify(self, assessment: AssessmentInput) -> RiskClassification:
        """Classify an assessment.

        Args:
            assessment: The submitted company profile and declared AI usage.

        Returns:
            RiskClassification with one result per triggered tier (never
            empty), the clamped compliance score, EU exposure and the number
            of declared systems.
        """
        cfg = self._config
        results: list[RiskResult] = []
        breakdown: list[ScoreBreakdownItem] = []
        score = cfg.starting_score

        has_eu_exposure = (
            assessment.has_eu_customers
            or assessment.has_eu_operations
            or assessment.processes_eu_data
        )
        if has_eu_exposure:
            breakdown.append(
                ScoreBreakdownItem(
                    category="EU Exposure",
                    points=0,
                    reason=(
                        "Your organization has EU exposure "
                        "(customers, operations, or data processing)"
                    ),
                    is_positive=False,
                )
            )

        # 1. Prohibited practices (Article 5)
        prohibited_count = self._count_prohibited(assessment)
        if prohibited_count > 0:
            results.append(build_risk_result(RiskLevel.PROHIBITED, prohibited_count))
            score -= cfg.prohibited.points_deducted
            breakdown.append(
                ScoreBreakdownItem(
                    category="Prohibited Systems",
                    points=-cfg.prohibited.points_deducted,
                    reason=f"{prohibited_count} prohibited AI practice(s) detected",
                    is_positive=False,
                )
            )

        # 2. High risk (Annex III use cases, sensitive data with high impact)
        high_risk_total = _count_in(assessment.use_cases, cfg.high_risk.use_cases)
        if has_sensitive_high_impact(assessment, cfg):
            high_risk_total += 1
        if high_risk_total > 0:
            results.append(build_risk_result(RiskLevel.HIGH, high_risk_total))
            deduction = high_risk_total * cfg.high_risk.points_per_trigger
            score -= deduction
            breakdown.append(
                ScoreBreakdownItem(
                    category="High-Risk Systems",
                    points=-deduction,
                    reason=f"{high_risk_total} high-risk AI system(s) require full compliance",
                    is_positive=False,
                )
            )

        # 3. Limited risk (Article 50 transparency)
        limited_count = _count_in(assessment.ai_system_types, cfg.limited_risk.system_types)
        if limited_count > 0:
            results.append(build_risk_result(RiskLevel.LIMITED, limited_count))
            deduction = limited_count * cfg.limited_risk.points_per_trigger
            score -= deduction
            breakdown.append(
                ScoreBreakdownItem(
                    category="Limited-Risk Systems",
                    points=-deduction,
                    reason=f"{limited_count} limited-risk AI system(s) require transparency",
                    is_positive=False,
                )
            )

        # 4. Minimal risk, always present when nothing else triggered
        minimal_count = _count_in(
            assessment.ai_system_types, cfg.minimal_risk.system_types
        ) + _count_in(assessment.use_cases, cfg.minimal_risk.use_cases)
        if minimal_count > 0 or not results:
            results.append(build_risk_result(RiskLevel.MINIMAL, max(minimal_count, 1)))

        # 5. Automation level
        automation = cfg.automation
        if assessment.automation_level in automation.unsupervised_levels and high_risk_total > 0:
            score -= automation.unsupervised_penalty
            breakdown.append(
                ScoreBreakdownItem(
                    category="Automation Level",
                    points=-automation.unsupervised_penalty,
                    reason=(
                        "Fully automated decisions with high-risk systems "
                        "increase compliance burden"
                    ),
                    is_positive=False,
                )
            )
        elif assessment.automation_level in automation.supervised_levels:
            score += automation.supervised_bonus
            breakdown.append(
                ScoreBreakdownItem(
                    category="Human Oversight",
                    points=automation.supervised_bonus,
                    reason="Human-in-the-loop or advisory-only reduces risk",
                    is_positive=True,
                )
            )

        score = max(cfg.min_score, min(cfg.max_score, score))

        classification = RiskClassification(
            results=results,
            compliance_score=score,
            has_eu_exposure=has_eu_exposure,
            total_systems=len(assessment.ai_system_types) + len(assessment.use_cases),
            high_risk_total=high_risk_total,
            score_breakdown=breakdown,
        )

        logger.info(
            "assessment_classified",
            levels=[r.level.value for r in results],
            compliance_score=score,
            high_risk_total=high_risk_total,
            has_eu_exposure=classification.has_eu_exposure,
            total_systems=classification.total_systems,
        )

        return classification

    def _count_prohibited(self, assessment: AssessmentInput) -> int:
        total = 0
        for rule in self._prohibited_rules:
            matched = rule.count(assessment)
            if matched > 0:
                logger.warning("prohibited_practice_detected", rule_id=rule.rule_id, count=matched)
            total += matched
        return total


_default_classifier = RiskClassifier()


def classify_assessment(assessment: AssessmentInput) -> RiskClassification:
    """Classify with the default configuration and rule list."""
    return _default_classifier.classify(assessment)
