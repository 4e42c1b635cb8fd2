"""Pydantic models for the certification domain."""

from datetime import datetime
from enum import StrEnum

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel

# --- Enums ---


class CertificationLevel(StrEnum):
    NONE = "none"
    BRONZE = "bronze"
    SILVER = "silver"
    GOLD = "gold"


class CertificationStatus(StrEnum):
    CERTIFIED = "certified"
    NOT_CERTIFIED = "not_certified"


class CertificateStatus(StrEnum):
    ACTIVE = "active"
    EXPIRED = "expired"
    REVOKED = "revoked"


# --- Grading Models ---


class CertificationInputs(BaseModel):
    """Operational snapshot of one AI system, read in one logical query by the caller."""

    model_config = ConfigDict(populate_by_name=True)

    total_requirements: int = Field(
        default=0, ge=0, validation_alias=AliasChoices("total_requirements", "totalRequirements")
    )
    completed_requirements: int = Field(
        default=0,
        ge=0,
        validation_alias=AliasChoices("completed_requirements", "completedRequirements"),
    )
    sdk_connected: bool = Field(
        default=False, validation_alias=AliasChoices("sdk_connected", "sdkConnected")
    )
    hitl_rules_active_count: int = Field(
        default=0,
        ge=0,
        validation_alias=AliasChoices("hitl_rules_active_count", "hitlRulesActiveCount"),
    )
    open_incidents_count: int = Field(
        default=0,
        ge=0,
        validation_alias=AliasChoices("open_incidents_count", "openIncidentsCount"),
    )
    recent_events_count: int = Field(
        default=0,
        ge=0,
        validation_alias=AliasChoices("recent_events_count", "recentEventsCount"),
    )

    @model_validator(mode="after")
    def _completed_within_total(self) -> "CertificationInputs":
        if self.completed_requirements > self.total_requirements:
            raise ValueError(
                f"completed_requirements ({self.completed_requirements}) cannot exceed "
                f"total_requirements ({self.total_requirements})"
            )
        return self


class CertificationChecks(BaseModel):
    """Pass/fail oversight checks. Serialized camelCase on issued certificates."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    sdk_connected: bool = False
    hitl_rules_active: bool = False
    no_open_incidents: bool = False
    logging_active: bool = False


class CertificationGrade(BaseModel):
    base_score: float = Field(ge=0, le=100)
    bonus_points: int = Field(ge=0)
    final_score: float = Field(ge=0, le=100)
    # final_score rounded to one decimal, as displayed and persisted
    compliance_score: float = Field(ge=0, le=100)
    certification_level: CertificationLevel
    certification_status: CertificationStatus
    checks: CertificationChecks


# --- Issued Certificate Models ---


class RequirementsSnapshot(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    total: int = 0
    completed: int = 0
    checks: CertificationChecks = Field(default_factory=CertificationChecks)


class IssuedCertificate(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    cert_id: str
    system_id: str
    compliance_score: float
    certification_level: CertificationLevel
    status: CertificateStatus = CertificateStatus.ACTIVE
    issued_at: datetime
    valid_until: datetime
    next_verification_at: datetime
    verify_url: str
    requirements_snapshot: RequirementsSnapshot


class CertificateRecord(BaseModel):
    """A stored certificate row as read back for public verification."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    cert_id: str
    compliance_score: float | None = None
    status: str = CertificateStatus.ACTIVE
    certified_at: datetime | None = None
    valid_until: datetime | None = None
    system_name: str | None = None
    organization_name: str | None = None
    requirements_snapshot: RequirementsSnapshot | None = None


class CertificateVerification(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    valid: bool
    cert_id: str
    system_name: str
    organization_name: str
    certification_level: CertificationLevel
    compliance_score: float
    issued_at: datetime | None = None
    valid_until: datetime | None = None
    status: str
    checks: CertificationChecks
