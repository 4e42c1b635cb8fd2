"""AI system inventory derived from an assessment.

Expands declared use cases and system types into individual systems, each
with its risk tier, the obligations it carries and the documents needed to
meet them. Use cases are catalogued first; system types follow and may be
raised to high risk by sensitive high-impact data.
"""

import structlog

from .classifier import has_sensitive_high_impact
from .config import AssessmentConfig, default_config
from .models import AssessmentInput, DetectedSystem, RiskLevel

logger = structlog.get_logger()


# (label, annex category, tier) per catalogued use case
USE_CASE_CATALOG: dict[str, tuple[str, str, RiskLevel]] = {
    "hiring": ("Recruitment & Hiring AI", "Employment (Annex III, Section 4)", RiskLevel.HIGH),
    "healthcare": ("Healthcare & Medical AI", "Essential Services (Annex III, Section 5)", RiskLevel.HIGH),
    "finance": ("Credit & Financial Services AI", "Essential Services (Annex III, Section 5)", RiskLevel.HIGH),
    "legal": ("Legal & Law Enforcement AI", "Law Enforcement (Annex III, Section 6)", RiskLevel.HIGH),
    "education": ("Education & Training AI", "Education (Annex III, Section 3)", RiskLevel.HIGH),
    "critical-infra": ("Critical Infrastructure AI", "Critical Infrastructure (Annex III, Section 2)", RiskLevel.HIGH),
    "biometric-id": ("Biometric Identification AI", "Biometrics (Annex III, Section 1)", RiskLevel.HIGH),
    "customer-service": ("Customer Service AI", "Chatbot (Article 50)", RiskLevel.LIMITED),
    "marketing": ("Marketing & Personalization AI", "Recommendation System", RiskLevel.LIMITED),
    "content-mod": ("Content Moderation AI", "Content Filtering", RiskLevel.LIMITED),
    "internal": ("Internal Operations AI", "Internal Use Only", RiskLevel.MINIMAL),
    "research": ("Research & Development AI", "R&D / Experimentation", RiskLevel.MINIMAL),
}

SYSTEM_TYPE_LABELS: dict[str, str] = {
    "chatbot": "Chatbots & Virtual Assistants",
    "ml-model": "Machine Learning Models",
    "genai": "Generative AI",
    "recommendation": "Recommendation Systems",
    "analytics": "Predictive Analytics",
    "automation": "Intelligent Process Automation",
    "vision": "Computer Vision",
    "nlp": "Natural Language Processing",
    "speech": "Speech Recognition & Synthesis",
    "biometric": "Biometric Systems",
    "autonomous": "Autonomous Systems",
    "fraud": "Fraud Detection & Security",
}

SYSTEM_TYPE_CATEGORIES: dict[str, str] = {
    "chatbot": "Conversational AI (Article 50)",
    "genai": "Generative AI (Article 50)",
    "recommendation": "Recommendation System",
    "speech": "Speech Processing",
    "nlp": "Natural Language Processing",
    "analytics": "Predictive Analytics",
    "automation": "Process Automation",
    "fraud": "Security & Fraud Detection",
    "ml-model": "Machine Learning Model",
    "vision": "Computer Vision",
    "biometric": "Biometric Processing",
    "autonomous": "Autonomous Systems",
}

USE_CASE_REASONS: dict[str, str] = {
    "hiring": (
        "AI systems used in recruitment and hiring decisions are classified as high-risk "
        "under Annex III because they significantly impact people's access to employment "
        "and livelihood opportunities."
    ),
    "healthcare": (
        "AI systems used for medical diagnosis or treatment recommendations are classified "
        "as high-risk because they directly affect patient health and safety."
    ),
    "finance": (
        "AI systems used for credit scoring or financial decisions are classified as "
        "high-risk because they affect people's access to essential financial services."
    ),
    "legal": (
        "AI systems used in legal or law enforcement contexts are classified as high-risk "
        "due to their impact on fundamental rights and access to justice."
    ),
    "education": (
        "AI systems used for educational assessment or admissions are classified as "
        "high-risk because they affect access to education and future opportunities."
    ),
    "critical-infra": (
        "AI systems managing critical infrastructure are classified as high-risk due to "
        "potential impacts on public safety and essential services."
    ),
    "biometric-id": (
        "AI systems using biometric identification are classified as high-risk due to "
        "privacy implications and potential for misuse."
    ),
    "customer-service": (
        "Customer-facing AI systems require transparency disclosures under Article 50 to "
        "inform users they are interacting with AI."
    ),
    "marketing": "AI recommendation systems require transparency about how personalization works.",
    "content-mod": "Content moderation AI requires transparency about automated decision-making.",
    "internal": (
        "Internal-use AI systems have minimal regulatory requirements but best practices "
        "still apply."
    ),
    "research": (
        "R&D AI systems are generally exempt from most requirements but should follow "
        "ethical guidelines."
    ),
}

# Articles 9-15 (25) + 17 (4) + 26 (5) + 27 (4) + 47 (3) + 49 (2) + 61 (3) + 62 (3) + 71 (3)
REQUIREMENTS_BY_LEVEL: dict[RiskLevel, int] = {
    RiskLevel.PROHIBITED: 0,
    RiskLevel.HIGH: 52,
    RiskLevel.LIMITED: 8,
    RiskLevel.MINIMAL: 2,
}

DOCUMENTS_BY_LEVEL: dict[RiskLevel, list[str]] = {
    RiskLevel.PROHIBITED: [],
    RiskLevel.HIGH: [
        "Risk Assessment Report",
        "Technical Documentation",
        "Data Governance Policy",
        "Human Oversight Procedures",
        "Instructions for Use",
        "Accuracy Test Results",
        "Security Assessment Report",
        "Quality Management System",
        "Post-Market Monitoring Plan",
        "Incident Response Plan",
        "Fundamental Rights Impact Assessment",
        "Cybersecurity Assessment",
        "EU Declaration of Conformity",
        "CE Marking Declaration",
        "EU Database Registration Form",
        "Change Management Procedures",
    ],
    RiskLevel.LIMITED: [
        "Technical Documentation",
        "Instructions for Use",
        "AI Disclosure Notice",
        "Transparency Notice",
        "Risk Management Summary",
    ],
    RiskLevel.MINIMAL: ["AI Disclosure Notice", "Transparency Notice"],
}

EFFORT_BY_LEVEL: dict[RiskLevel, str] = {
    RiskLevel.PROHIBITED: "Unknown",
    RiskLevel.HIGH: "3-6 hours",
    RiskLevel.LIMITED: "1-2 hours",
    RiskLevel.MINIMAL: "30-60 minutes",
}

HIGH_RISK_DEADLINE_TEXT = "August 2, 2026"
DEFAULT_DEADLINE_TEXT = "August 2, 2027"


def _system_type_reason(
    system_type: str, level: RiskLevel, sensitive_high_impact: bool, config: AssessmentConfig
) -> str:
    if level == RiskLevel.HIGH and sensitive_high_impact:
        return (
            "This system processes sensitive data types (biometric, health, financial, or "
            "children's data) and makes high-impact decisions, elevating it to high-risk "
            "classification."
        )
    if system_type in config.limited_risk.system_types:
        return (
            "This system type requires transparency disclosures under Article 50 to inform "
            "users they are interacting with AI or viewing AI-generated content."
        )
    return (
        "This system type has minimal regulatory requirements under the EU AI Act, but "
        "voluntary best practices are recommended."
    )


def _build_system(
    index: int,
    name: str,
    system_type: str,
    category: str,
    level: RiskLevel,
    reason: str,
    annex_category: str | None = None,
) -> DetectedSystem:
    return DetectedSystem(
        id=f"sys-{index}",
        name=name,
        type=system_type,
        category=category,
        annex_category=annex_category,
        risk_level=level,
        risk_reason=reason,
        requirements_count=REQUIREMENTS_BY_LEVEL[level],
        documents_needed=list(DOCUMENTS_BY_LEVEL[level]),
        deadline=HIGH_RISK_DEADLINE_TEXT if level == RiskLevel.HIGH else DEFAULT_DEADLINE_TEXT,
        estimated_effort=EFFORT_BY_LEVEL[level],
    )


def detect_systems(
    assessment: AssessmentInput, config: AssessmentConfig = default_config
) -> list[DetectedSystem]:
    """Build the AI system inventory for an assessment.

    Unknown use cases are skipped. A system type is raised to high risk only
    while no earlier system in the inventory is high risk. When nothing is
    detected, a single minimal-risk "General AI System" stands in.
    """
    systems: list[DetectedSystem] = []

    for use_case in assessment.use_cases:
        entry = USE_CASE_CATALOG.get(use_case)
        if entry is None:
            continue
        label, annex_category, level = entry
        if use_case in config.high_risk.use_cases:
            level = RiskLevel.HIGH
        systems.append(
            _build_system(
                index=len(systems) + 1,
                name=label,
                system_type=use_case,
                category=annex_category,
                level=level,
                reason=USE_CASE_REASONS.get(
                    use_case,
                    f"This AI system is classified as {level.value} risk based on its use "
                    "case and potential impact.",
                ),
                annex_category=annex_category if level == RiskLevel.HIGH else None,
            )
        )

    sensitive_high_impact = has_sensitive_high_impact(assessment, config)
    for system_type in assessment.ai_system_types:
        already_high = any(s.risk_level == RiskLevel.HIGH for s in systems)

        level = (
            RiskLevel.LIMITED
            if system_type in config.limited_risk.system_types
            else RiskLevel.MINIMAL
        )
        if sensitive_high_impact and not already_high:
            level = RiskLevel.HIGH

        systems.append(
            _build_system(
                index=len(systems) + 1,
                name=SYSTEM_TYPE_LABELS.get(system_type, system_type),
                system_type=system_type,
                category=SYSTEM_TYPE_CATEGORIES.get(system_type, "General AI System"),
                level=level,
                reason=_system_type_reason(system_type, level, sensitive_high_impact, config),
            )
        )

    if not systems:
        systems.append(
            DetectedSystem(
                id="sys-1",
                name="General AI System",
                type="general",
                category="General Purpose",
                risk_level=RiskLevel.MINIMAL,
                risk_reason="No specific high-risk use cases or system types identified",
                requirements_count=REQUIREMENTS_BY_LEVEL[RiskLevel.MINIMAL],
                documents_needed=["AI Disclosure Notice"],
                deadline=DEFAULT_DEADLINE_TEXT,
                estimated_effort=EFFORT_BY_LEVEL[RiskLevel.MINIMAL],
            )
        )

    logger.debug(
        "systems_detected",
        count=len(systems),
        high_risk=sum(1 for s in systems if s.risk_level == RiskLevel.HIGH),
    )

    return systems
