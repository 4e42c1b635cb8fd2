"""EU AI Act self-assessment risk classification domain."""

from .articles import determine_applicable_articles
from .classifier import RiskClassifier, classify_assessment
from .display import get_score_color, get_score_label
from .gaps import generate_compliance_gaps
from .inventory import detect_systems
from .models import (
    AssessmentInput,
    AssessmentResults,
    RiskClassification,
    RiskLevel,
    RiskResult,
)
from .results import build_assessment_results
from .roadmap import generate_roadmap

__all__ = [
    "AssessmentInput",
    "AssessmentResults",
    "RiskClassification",
    "RiskClassifier",
    "RiskLevel",
    "RiskResult",
    "build_assessment_results",
    "classify_assessment",
    "detect_systems",
    "determine_applicable_articles",
    "generate_compliance_gaps",
    "generate_roadmap",
    "get_score_color",
    "get_score_label",
]
