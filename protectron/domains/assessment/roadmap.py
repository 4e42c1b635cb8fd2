"""Phased compliance roadmap for a detected AI system inventory.

Four phases lead from registering systems to certification. Without a
high-risk system only the first two phases apply, and the high-risk-only
documentation steps (data governance, human oversight) are dropped. Step
numbers are kept as listed, so a trimmed roadmap skips numbers.
"""

from .models import DetectedSystem, RiskLevel, RoadmapPhase, RoadmapStep

# Phases that still apply when no system is high risk
_LOW_RISK_PHASES = 2
# Steps only needed for high-risk systems, by step number
_HIGH_RISK_ONLY_STEPS = frozenset({6, 7, 9})


def _step(number: int, title: str, description: str, feature: str, minutes: int) -> RoadmapStep:
    return RoadmapStep(
        id=f"step-{number}",
        step_number=number,
        title=title,
        description=description,
        protectron_feature=feature,
        estimated_minutes=minutes,
    )


def _phases(system_count: int) -> list[RoadmapPhase]:
    return [
        RoadmapPhase(
            id="phase-1",
            phase=1,
            title="Foundation",
            timeframe="Week 1-2",
            steps=[
                _step(
                    1,
                    "Register all AI systems in Protectron",
                    f"Add the {system_count} AI system(s) we've identified, plus any others you "
                    "may have. Each system needs individual compliance tracking.",
                    "Protectron will auto-generate your requirements checklist",
                    30,
                ),
                _step(
                    2,
                    "Complete risk classification for each system",
                    "Verify the risk level we've assigned and provide additional details about "
                    "each AI system's use case and data types.",
                    "This determines which articles and requirements apply",
                    45,
                ),
                _step(
                    3,
                    "Assign compliance owners",
                    "Designate team members responsible for each AI system's compliance. "
                    "Typically: CTO, Legal, Product Manager.",
                    "They'll receive notifications and deadline reminders",
                    15,
                ),
            ],
        ),
        RoadmapPhase(
            id="phase-2",
            phase=2,
            title="Documentation",
            timeframe="Week 3-6",
            steps=[
                _step(
                    4,
                    "Generate Risk Management Documentation",
                    "Use Protectron's AI-powered document generator to create Risk Assessment "
                    "Report, Risk Mitigation Plan, and Risk Management Policy.",
                    "Answer guided questions, review drafts, customize",
                    120,
                ),
                _step(
                    5,
                    "Create Technical Documentation",
                    "Generate comprehensive system documentation including AI System "
                    "Description, Model Card, Design Specification, and Testing Report.",
                    "Required for Article 11 compliance",
                    180,
                ),
                _step(
                    6,
                    "Establish Data Governance",
                    "Document your data practices including Data Governance Policy, Training "
                    "Data Documentation, and Bias Assessment Report.",
                    "Required for Article 10 compliance",
                    120,
                ),
                _step(
                    7,
                    "Define Human Oversight Procedures",
                    "Create oversight documentation including Human Oversight Procedures, "
                    "Intervention Protocols, and Operator Training Materials.",
                    "Required for Article 14 compliance",
                    90,
                ),
                _step(
                    8,
                    "Prepare Transparency Documentation",
                    "Create user-facing materials including Instructions for Use, Deployer "
                    "Information Package, and User Notification Templates.",
                    "Required for Article 13 compliance",
                    60,
                ),
            ],
        ),
        RoadmapPhase(
            id="phase-3",
            phase=3,
            title="Implementation & Compliance Systems",
            timeframe="Week 7-10",
            steps=[
                _step(
                    9,
                    "Implement audit logging",
                    "Technical implementation for Article 12: Integrate Protectron SDK for "
                    "automatic logging, or implement custom logging per specifications.",
                    "Protectron SDK handles this automatically",
                    240,
                ),
                _step(
                    10,
                    "Conduct accuracy and security testing",
                    "Gather evidence for Article 15 and Article 71: Run accuracy tests, conduct "
                    "cybersecurity assessment, and document results.",
                    "Evidence links directly to requirements",
                    180,
                ),
                _step(
                    11,
                    "Establish Quality Management System",
                    "Create QMS documentation for Article 17: Define policies, procedures, "
                    "resource allocation, and change management processes.",
                    "Protectron generates QMS templates",
                    120,
                ),
                _step(
                    12,
                    "Set up post-market monitoring",
                    "Establish monitoring system for Article 61: Define data collection, "
                    "performance metrics, feedback channels, and reporting cadence.",
                    "Post-market monitoring plan generator",
                    90,
                ),
                _step(
                    13,
                    "Define incident response procedures",
                    "Create incident response plan for Article 62: Define severity levels, "
                    "reporting timelines, escalation paths, and root cause analysis procedures.",
                    "Incident response plan template",
                    60,
                ),
                _step(
                    14,
                    "Complete fundamental rights impact assessment",
                    "Conduct FRIA for Article 27: Assess impacts on non-discrimination, privacy, "
                    "dignity, and other Charter rights for affected groups.",
                    "FRIA template with guided questions",
                    90,
                ),
                _step(
                    15,
                    "Upload supporting evidence",
                    "Gather and organize all compliance evidence: Link documents to "
                    "requirements, upload test results, add external certifications.",
                    "Evidence Management tracks everything",
                    60,
                ),
            ],
        ),
        RoadmapPhase(
            id="phase-4",
            phase=4,
            title="Verification & Certification",
            timeframe="Week 11-14",
            steps=[
                _step(
                    16,
                    "Complete gap analysis",
                    "Review compliance status: Check all requirements marked complete, verify "
                    "all documents generated, ensure all evidence uploaded.",
                    "Dashboard shows overall readiness",
                    60,
                ),
                _step(
                    17,
                    "Conduct cybersecurity assessment",
                    "Complete cybersecurity assessment for Article 71: Evaluate attack vectors, "
                    "data poisoning risks, adversarial robustness, and access controls.",
                    "Cybersecurity assessment template",
                    120,
                ),
                _step(
                    18,
                    "Generate compliance report",
                    "Create audit-ready documentation: Full Compliance Report, Executive "
                    "Summary, and Evidence Index.",
                    "One-click export for stakeholders",
                    30,
                ),
                _step(
                    19,
                    "Prepare EU Declaration of Conformity & CE Marking",
                    "Final compliance declaration for Article 47: Review conformity checklist, "
                    "sign declaration, affix CE marking.",
                    "Declaration and CE marking templates",
                    45,
                ),
                _step(
                    20,
                    "Register in EU Database",
                    "Complete registration for Article 49: Submit system details, conformity "
                    "information, and provider identity to the EU AI database.",
                    "EU database registration form generator",
                    30,
                ),
            ],
        ),
    ]


def generate_roadmap(systems: list[DetectedSystem]) -> list[RoadmapPhase]:
    phases = _phases(len(systems))
    if any(s.risk_level == RiskLevel.HIGH for s in systems):
        return phases

    return [
        RoadmapPhase(
            id=phase.id,
            phase=phase.phase,
            title=phase.title,
            timeframe=phase.timeframe,
            steps=[s for s in phase.steps if s.step_number not in _HIGH_RISK_ONLY_STEPS],
        )
        for phase in phases
        if phase.phase <= _LOW_RISK_PHASES
    ]
