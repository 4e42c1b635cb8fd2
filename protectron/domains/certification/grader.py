"""Certification grading for AI systems.

Two grading contracts exist and are deliberately kept apart:

``CertificationGrader.grade``
    "Is this system certified at all?" Requirement completion plus oversight
    bonuses, gated on a connected SDK. Can return ``none``.

``grade_issued_certificate``
    "What tier is this already-issued certificate?" Buckets a stored score
    for public verification with no gate. Never returns ``none``.

Merging them would change the tier shown on public verification pages for
certificates whose system has since lost its SDK connection.
"""

from typing import Any

import structlog

from protectron.shared.rounding import round_half_up, round_to_tenth

from .config import CertificationConfig, default_config
from .models import (
    CertificationChecks,
    CertificationGrade,
    CertificationInputs,
    CertificationLevel,
    CertificationStatus,
)

logger = structlog.get_logger()


def evaluate_checks(
    inputs: CertificationInputs, config: CertificationConfig = default_config
) -> CertificationChecks:
    return CertificationChecks(
        sdk_connected=inputs.sdk_connected,
        hitl_rules_active=inputs.hitl_rules_active_count >= config.bonus.min_active_hitl_rules,
        no_open_incidents=inputs.open_incidents_count == 0,
        logging_active=inputs.recent_events_count > 0,
    )


class CertificationGrader:
    """Grades an AI system's operational snapshot into a certification tier.

    Scoring:
      base  = completed / total * 100 (0 when there are no requirements)
      bonus = +5 HITL rule active, +5 no open incidents, +5 logging active
      final = min(base + bonus, 100)

    Tiers (SDK connected only): gold >= 95, silver >= 85, bronze >= 70.
    With no requirements the score cannot exceed the bonus total (15), so
    such systems are never certified.
    """

    def __init__(self, config: CertificationConfig | None = None) -> None:
        self._config = config or default_config

    def grade(self, inputs: CertificationInputs) -> CertificationGrade:
        cfg = self._config
        checks = evaluate_checks(inputs, cfg)

        if inputs.total_requirements > 0:
            base_score = inputs.completed_requirements / inputs.total_requirements * 100
        else:
            base_score = 0.0

        bonus_points = 0
        if checks.hitl_rules_active:
            bonus_points += cfg.bonus.hitl_rules_active
        if checks.no_open_incidents:
            bonus_points += cfg.bonus.no_open_incidents
        if checks.logging_active:
            bonus_points += cfg.bonus.logging_active

        final_score = min(base_score + bonus_points, cfg.max_score)
        level = self._level_for(final_score, inputs.sdk_connected)
        status = (
            CertificationStatus.NOT_CERTIFIED
            if level == CertificationLevel.NONE
            else CertificationStatus.CERTIFIED
        )

        grade = CertificationGrade(
            base_score=base_score,
            bonus_points=bonus_points,
            final_score=final_score,
            compliance_score=round_to_tenth(final_score),
            certification_level=level,
            certification_status=status,
            checks=checks,
        )

        logger.info(
            "certification_graded",
            base_score=round_to_tenth(base_score),
            bonus_points=bonus_points,
            final_score=grade.compliance_score,
            sdk_connected=inputs.sdk_connected,
            certification_level=level.value,
        )

        return grade

    def _level_for(self, final_score: float, sdk_connected: bool) -> CertificationLevel:
        if not sdk_connected:
            return CertificationLevel.NONE

        tiers = self._config.tiers
        if final_score >= tiers.gold:
            return CertificationLevel.GOLD
        if final_score >= tiers.silver:
            return CertificationLevel.SILVER
        if final_score >= tiers.bronze:
            return CertificationLevel.BRONZE
        return CertificationLevel.NONE


def grade_issued_certificate(
    score: float, config: CertificationConfig = default_config
) -> CertificationLevel:
    """Tier of an already-issued certificate, from its stored score alone."""
    if score >= config.tiers.gold:
        return CertificationLevel.GOLD
    if score >= config.tiers.silver:
        return CertificationLevel.SILVER
    return CertificationLevel.BRONZE


def to_status_payload(inputs: CertificationInputs, grade: CertificationGrade) -> dict[str, Any]:
    """Shape a grade as the ``data`` body of the certificate status endpoint."""
    total = inputs.total_requirements
    completed = inputs.completed_requirements
    return {
        "compliance_score": grade.compliance_score,
        "certification_level": grade.certification_level.value,
        "certification_status": grade.certification_status.value,
        "requirements": {
            "total": total,
            "completed": completed,
            "percentage": round_half_up(completed / total * 100) if total else 0,
        },
        "checks": grade.checks.model_dump(),
        "bonus_points": grade.bonus_points,
    }
