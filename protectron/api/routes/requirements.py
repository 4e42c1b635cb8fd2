"""Requirement completion progress endpoints."""

import structlog
from fastapi import APIRouter
from pydantic import BaseModel, Field

from protectron.domains.requirements.models import RequirementRecord
from protectron.domains.requirements.progress import RequirementProgressScorer

logger = structlog.get_logger()
router = APIRouter(prefix="/api/v1/requirements", tags=["requirements"])

_scorer = RequirementProgressScorer()


class RequirementProgressRequest(BaseModel):
    ai_system_id: str | None = None
    requirements: list[RequirementRecord] = Field(default_factory=list)


@router.post("/progress")
async def requirement_progress(request: RequirementProgressRequest) -> dict:
    """Compute completion progress for one AI system's requirements."""
    progress = _scorer.score(request.requirements)
    stats = _scorer.summarize(request.requirements)

    if request.ai_system_id:
        logger.info(
            "requirement_progress_computed",
            ai_system_id=request.ai_system_id,
            progress_percent=progress.progress_percent,
            compliance_status=progress.compliance_status.value,
        )

    return {
        "ai_system_id": request.ai_system_id,
        "compliance_progress": progress.progress_percent,
        "compliance_status": progress.compliance_status.value,
        "stats": stats.model_dump(),
    }
