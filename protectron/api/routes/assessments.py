"""EU AI Act self-assessment classification endpoints."""

from datetime import UTC, datetime

import structlog
from fastapi import APIRouter

from protectron.domains.assessment.classifier import RiskClassifier
from protectron.domains.assessment.display import (
    days_until_deadline,
    format_deadline_countdown,
    get_score_color,
    get_score_label,
)
from protectron.domains.assessment.models import AssessmentInput
from protectron.domains.assessment.results import build_assessment_results

logger = structlog.get_logger()
router = APIRouter(prefix="/api/v1/assessments", tags=["assessments"])

_classifier = RiskClassifier()


@router.post("/classify")
async def classify_assessment(assessment: AssessmentInput) -> dict:
    """Classify a submitted assessment and build its results page."""
    classification = _classifier.classify(assessment)
    results = build_assessment_results(assessment, classification)
    days_left = days_until_deadline(datetime.now(UTC).date())

    logger.info(
        "assessment_results_served",
        compliance_score=classification.compliance_score,
        detected_systems=len(results.detected_systems),
        applicable_articles=len(results.applicable_articles),
        compliance_gaps=len(results.compliance_gaps),
        estimated_weeks=results.estimated_weeks,
    )

    return {
        **classification.model_dump(mode="json", by_alias=True),
        **results.model_dump(mode="json", by_alias=True),
        "scoreColor": get_score_color(classification.compliance_score),
        "scoreLabel": get_score_label(classification.compliance_score).model_dump(),
        "daysUntilDeadline": days_left,
        "deadlineCountdown": format_deadline_countdown(days_left),
    }
