"""Unit tests for the assembled assessment results page."""

import pytest

from protectron.domains.assessment.classifier import RiskClassifier
from protectron.domains.assessment.models import RiskLevel
from protectron.domains.assessment.results import build_assessment_results


@pytest.fixture
def worked_example(make_assessment):
    return make_assessment(
        has_eu_customers=True,
        use_cases=["hiring", "healthcare"],
        data_types=["biometric"],
        decision_impact="critical",
        ai_system_types=["chatbot"],
        automation_level="fully-automated",
    )


def _build(assessment):
    classification = RiskClassifier().classify(assessment)
    return classification, build_assessment_results(assessment, classification)


class TestBuildAssessmentResults:
    def test_worked_example(self, worked_example):
        classification, results = _build(worked_example)

        assert [s.risk_level for s in results.detected_systems] == [
            RiskLevel.HIGH,
            RiskLevel.HIGH,
            RiskLevel.LIMITED,
        ]
        assert len(results.applicable_articles) == 16
        assert len(results.compliance_gaps) == 16
        assert len(results.roadmap_phases) == 4
        assert results.score_breakdown == classification.score_breakdown

    def test_summary_stats(self, worked_example):
        _, results = _build(worked_example)
        assert results.total_requirements == 53
        assert results.total_documents == 38
        assert results.estimated_hours == 47
        assert results.estimated_weeks == 3

    def test_minimal_assessment(self, make_assessment):
        _, results = _build(make_assessment())

        (system,) = results.detected_systems
        assert system.name == "General AI System"
        assert [a.number for a in results.applicable_articles] == ["50"]
        assert (results.total_requirements, results.estimated_weeks) == (2, 1)
        assert [p.phase for p in results.roadmap_phases] == [1, 2]
        assert results.score_breakdown == []

    def test_serialized_camel_case(self, worked_example):
        _, results = _build(worked_example)
        payload = results.model_dump(mode="json", by_alias=True)

        assert set(payload) == {
            "detectedSystems",
            "applicableArticles",
            "complianceGaps",
            "roadmapPhases",
            "scoreBreakdown",
            "totalRequirements",
            "totalDocuments",
            "estimatedHours",
            "estimatedWeeks",
        }
        article = payload["applicableArticles"][0]
        assert article["appliesToRiskLevels"] == ["high", "limited"]
        assert article["officialText"].startswith("High-risk AI systems shall be subject")
        assert payload["scoreBreakdown"][0]["category"] == "EU Exposure"
