"""Prohibited AI practice rules (Article 5).

No practice is detected from the assessment form today, so
``PROHIBITED_PRACTICE_RULES`` is empty and the prohibited tier never fires.
Rules added here are picked up by ``RiskClassifier`` without further wiring.
"""

from abc import ABC, abstractmethod

from .models import AssessmentInput


class ProhibitedPracticeRule(ABC):
    """Base class for rules that count prohibited practices in an assessment."""

    rule_id: str

    @abstractmethod
    def count(self, assessment: AssessmentInput) -> int:
        """Return the number of prohibited practices this rule matches."""
        ...


class DeclaredUseCaseRule(ProhibitedPracticeRule):
    """Counts declared use cases that appear in a fixed list of banned tags."""

    def __init__(self, rule_id: str, banned_use_cases: list[str]) -> None:
        self.rule_id = rule_id
        self._banned = set(banned_use_cases)

    def count(self, assessment: AssessmentInput) -> int:
        return sum(1 for use_case in assessment.use_cases if use_case in self._banned)


# All rule instances in evaluation order
PROHIBITED_PRACTICE_RULES: list[ProhibitedPracticeRule] = []

__all__ = [
    "PROHIBITED_PRACTICE_RULES",
    "DeclaredUseCaseRule",
    "ProhibitedPracticeRule",
]
