"""Pydantic models for the assessment risk classification domain."""

from enum import StrEnum

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

# --- Enums ---


class RiskLevel(StrEnum):
    PROHIBITED = "prohibited"
    HIGH = "high"
    LIMITED = "limited"
    MINIMAL = "minimal"


class DecisionImpact(StrEnum):
    NONE = "none"
    LOW = "low"
    HIGH = "high"
    CRITICAL = "critical"


class AutomationLevel(StrEnum):
    FULLY_AUTOMATED = "fully-automated"
    AUTOMATED_OVERRIDE = "automated-override"
    HUMAN_IN_LOOP = "human-in-loop"
    ADVISORY_ONLY = "advisory-only"


class GapPriority(StrEnum):
    CRITICAL = "critical"
    IMPORTANT = "important"
    RECOMMENDED = "recommended"


# --- Input Models ---


class AssessmentInput(BaseModel):
    """Company profile and declared AI usage from one completed assessment.

    Accepts the camelCase field names posted by the assessment form as well
    as snake_case names. Enumerated answers stay plain strings: unknown
    values are matched against nothing rather than rejected.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    company_name: str = Field(default="", validation_alias=AliasChoices("company_name", "companyName"))
    industry: str = ""
    company_size: str = Field(default="", validation_alias=AliasChoices("company_size", "companySize"))
    country: str = ""

    has_eu_customers: bool = Field(
        default=False, validation_alias=AliasChoices("has_eu_customers", "hasEUCustomers")
    )
    has_eu_operations: bool = Field(
        default=False, validation_alias=AliasChoices("has_eu_operations", "hasEUOperations")
    )
    processes_eu_data: bool = Field(
        default=False, validation_alias=AliasChoices("processes_eu_data", "processesEUData")
    )

    ai_system_types: list[str] = Field(
        default_factory=list, validation_alias=AliasChoices("ai_system_types", "aiSystemTypes")
    )
    use_cases: list[str] = Field(
        default_factory=list, validation_alias=AliasChoices("use_cases", "useCases")
    )
    data_types: list[str] = Field(
        default_factory=list, validation_alias=AliasChoices("data_types", "dataTypes")
    )

    decision_impact: str = Field(
        default="", validation_alias=AliasChoices("decision_impact", "decisionImpact")
    )
    automation_level: str = Field(
        default="", validation_alias=AliasChoices("automation_level", "automationLevel")
    )

    @field_validator("ai_system_types", "use_cases", "data_types", mode="before")
    @classmethod
    def _missing_list_is_empty(cls, value: object) -> object:
        return [] if value is None else value

    @field_validator("decision_impact", "automation_level", mode="before")
    @classmethod
    def _missing_answer_is_blank(cls, value: object) -> object:
        return "" if value is None else value


# --- Classification Output Models ---


class ScoreBreakdownItem(BaseModel):
    """One signed contribution to the compliance score."""

    category: str
    points: int
    reason: str
    is_positive: bool = Field(serialization_alias="isPositive")



class RiskResult(BaseModel):
    level: RiskLevel
    count: int = Field(ge=0)
    label: str
    description: str
    color: str
    bg_color: str = Field(serialization_alias="bgColor")
    border_color: str = Field(serialization_alias="borderColor")
    icon: str


class RiskClassification(BaseModel):
    results: list[RiskResult]
    compliance_score: int = Field(ge=0, le=100, serialization_alias="complianceScore")
    has_eu_exposure: bool = Field(serialization_alias="hasEUExposure")
    total_systems: int = Field(ge=0, serialization_alias="totalSystems")

    # Diagnostics, not part of the display payload
    high_risk_total: int = Field(default=0, ge=0, exclude=True)
    score_breakdown: list[ScoreBreakdownItem] = Field(default_factory=list, exclude=True)


# --- Display Models ---


class ScoreLabel(BaseModel):
    label: str
    color: str
    bg: str


class RiskLevelBadge(BaseModel):
    text: str
    bg: str
    text_color: str
    border: str


# --- Inventory Models ---


class DetectedSystem(BaseModel):
    id: str
    name: str
    type: str
    category: str
    annex_category: str | None = Field(default=None, serialization_alias="annexCategory")
    risk_level: RiskLevel = Field(serialization_alias="riskLevel")
    risk_reason: str = Field(serialization_alias="riskReason")
    requirements_count: int = Field(ge=0, serialization_alias="requirementsCount")
    documents_needed: list[str] = Field(default_factory=list, serialization_alias="documentsNeeded")
    deadline: str
    estimated_effort: str = Field(serialization_alias="estimatedEffort")


# --- Results Page Models ---


class ArticleRequirement(BaseModel):
    id: str
    title: str
    description: str


class ApplicableArticle(BaseModel):
    id: str
    number: str
    title: str
    official_text: str = Field(serialization_alias="officialText")
    plain_explanation: str = Field(serialization_alias="plainExplanation")
    requirements: list[ArticleRequirement]
    documents_needed: list[str] = Field(serialization_alias="documentsNeeded")
    estimated_hours: int = Field(ge=0, serialization_alias="estimatedHours")
    applies_to_risk_levels: list[RiskLevel] = Field(serialization_alias="appliesToRiskLevels")


class ComplianceGap(BaseModel):
    id: str
    title: str
    description: str
    article_ref: str = Field(serialization_alias="articleRef")
    priority: GapPriority
    systems_affected: int = Field(ge=0, serialization_alias="systemsAffected")


class RoadmapStep(BaseModel):
    id: str
    step_number: int = Field(serialization_alias="stepNumber")
    title: str
    description: str
    protectron_feature: str = Field(serialization_alias="protectronFeature")
    estimated_minutes: int = Field(ge=0, serialization_alias="estimatedMinutes")


class RoadmapPhase(BaseModel):
    id: str
    phase: int
    title: str
    timeframe: str
    steps: list[RoadmapStep]


class AssessmentResults(BaseModel):
    """Everything the results page renders beyond the tier classification."""

    detected_systems: list[DetectedSystem] = Field(serialization_alias="detectedSystems")
    applicable_articles: list[ApplicableArticle] = Field(
        serialization_alias="applicableArticles"
    )
    compliance_gaps: list[ComplianceGap] = Field(serialization_alias="complianceGaps")
    roadmap_phases: list[RoadmapPhase] = Field(serialization_alias="roadmapPhases")
    score_breakdown: list[ScoreBreakdownItem] = Field(serialization_alias="scoreBreakdown")

    # Summary stats over the applicable articles
    total_requirements: int = Field(ge=0, serialization_alias="totalRequirements")
    total_documents: int = Field(ge=0, serialization_alias="totalDocuments")
    estimated_hours: int = Field(ge=0, serialization_alias="estimatedHours")
    estimated_weeks: int = Field(ge=0, serialization_alias="estimatedWeeks")
