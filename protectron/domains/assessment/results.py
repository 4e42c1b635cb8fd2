"""Assemble the assessment results page from a classified assessment."""

from .articles import (
    count_documents,
    count_requirements,
    determine_applicable_articles,
    estimate_hours,
    estimate_weeks,
)
from .config import AssessmentConfig, default_config
from .gaps import generate_compliance_gaps
from .inventory import detect_systems
from .models import AssessmentInput, AssessmentResults, RiskClassification
from .roadmap import generate_roadmap


def build_assessment_results(
    assessment: AssessmentInput,
    classification: RiskClassification,
    config: AssessmentConfig = default_config,
) -> AssessmentResults:
    """Inventory, articles, gaps, roadmap and summary stats for one assessment.

    Args:
        assessment: The submitted assessment.
        classification: Result of classifying the same assessment; supplies
            the score breakdown.
        config: Assessment config used to build the inventory.
    """
    systems = detect_systems(assessment, config)
    articles = determine_applicable_articles(systems)
    hours = estimate_hours(articles)

    return AssessmentResults(
        detected_systems=systems,
        applicable_articles=articles,
        compliance_gaps=generate_compliance_gaps(systems),
        roadmap_phases=generate_roadmap(systems),
        score_breakdown=classification.score_breakdown,
        total_requirements=count_requirements(articles),
        total_documents=count_documents(articles),
        estimated_hours=hours,
        estimated_weeks=estimate_weeks(hours),
    )
