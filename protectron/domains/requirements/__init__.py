"""Requirement completion progress domain."""

from .models import ComplianceStatus, RequirementProgress, RequirementStats, RequirementStatus
from .progress import RequirementProgressScorer

__all__ = [
    "ComplianceStatus",
    "RequirementProgress",
    "RequirementProgressScorer",
    "RequirementStats",
    "RequirementStatus",
]
