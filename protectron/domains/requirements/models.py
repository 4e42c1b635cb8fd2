"""Pydantic models for the requirement progress domain."""

from enum import StrEnum

from pydantic import BaseModel, Field


class RequirementStatus(StrEnum):
    PENDING = "pending"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    # Written by the certificate flow; equivalent to COMPLETED
    COMPLIANT = "compliant"
    NOT_APPLICABLE = "not_applicable"


class ComplianceStatus(StrEnum):
    COMPLIANT = "compliant"
    IN_PROGRESS = "in_progress"
    NOT_STARTED = "not_started"


class RequirementRecord(BaseModel):
    """Snapshot of one requirement row. Status is kept as free text."""

    id: str | None = None
    title: str | None = None
    status: str = RequirementStatus.PENDING


class RequirementProgress(BaseModel):
    progress_percent: int = Field(ge=0, le=100)
    compliance_status: ComplianceStatus
    total: int = Field(ge=0)
    completed: int = Field(ge=0)


class RequirementStats(BaseModel):
    total: int = 0
    completed: int = 0
    in_progress: int = 0
    pending: int = 0
