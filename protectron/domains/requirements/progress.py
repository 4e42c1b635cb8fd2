"""Requirement completion scoring.

Turns a snapshot of requirement statuses into a completion percentage and a
coarse compliance status for the owning AI system:

  100%      compliant
  1-99%     in_progress
  0%        not_started

Two terminal values exist for the same state: the requirements workflow
writes ``completed`` while the certificate flow counts ``compliant``. Both
count as done.
"""

from collections.abc import Iterable

import structlog

from protectron.shared.rounding import round_half_up

from .models import (
    ComplianceStatus,
    RequirementProgress,
    RequirementRecord,
    RequirementStats,
    RequirementStatus,
)

logger = structlog.get_logger()

DONE_STATUSES: frozenset[str] = frozenset(
    {RequirementStatus.COMPLETED, RequirementStatus.COMPLIANT}
)


def _status_of(item: str | RequirementRecord) -> str:
    if isinstance(item, RequirementRecord):
        return item.status
    return item


class RequirementProgressScorer:
    """Scores requirement completion for one AI system."""

    def __init__(self, done_statuses: Iterable[str] = DONE_STATUSES) -> None:
        self._done = frozenset(done_statuses)

    def score(self, requirements: Iterable[str | RequirementRecord] | None) -> RequirementProgress:
        statuses = [_status_of(r) for r in requirements or []]
        total = len(statuses)
        completed = sum(1 for s in statuses if s in self._done)

        progress = round_half_up(100 * completed / total) if total > 0 else 0

        if progress == 100:
            status = ComplianceStatus.COMPLIANT
        elif progress > 0:
            status = ComplianceStatus.IN_PROGRESS
        else:
            status = ComplianceStatus.NOT_STARTED

        logger.debug(
            "requirement_progress_scored",
            total=total,
            completed=completed,
            progress_percent=progress,
            compliance_status=status.value,
        )

        return RequirementProgress(
            progress_percent=progress,
            compliance_status=status,
            total=total,
            completed=completed,
        )

    def summarize(self, requirements: Iterable[str | RequirementRecord] | None) -> RequirementStats:
        """Per-status counts for the requirements dashboard."""
        statuses = [_status_of(r) for r in requirements or []]
        return RequirementStats(
            total=len(statuses),
            completed=sum(1 for s in statuses if s in self._done),
            in_progress=sum(1 for s in statuses if s == RequirementStatus.IN_PROGRESS),
            pending=sum(1 for s in statuses if s == RequirementStatus.PENDING),
        )
