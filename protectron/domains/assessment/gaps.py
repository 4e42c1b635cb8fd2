"""Compliance gaps implied by a detected AI system inventory.

A new assessment has no evidence on file, so every obligation that applies
is reported as an open gap. High-risk documentation and logging gaps are
critical; conformity paperwork is only recommended.
"""

from .models import ComplianceGap, DetectedSystem, GapPriority, RiskLevel

# (id, title, description, article) for gaps raised by any high-risk system
_HIGH_RISK_CRITICAL = [
    (
        "gap-1",
        "Risk Management System not documented",
        "Article 9 requires a documented risk management system that identifies, analyzes, "
        "and mitigates AI risks.",
        "Article 9",
    ),
    (
        "gap-2",
        "Technical Documentation not created",
        "Article 11 requires comprehensive technical documentation covering system design, "
        "data, and performance metrics.",
        "Article 11",
    ),
    (
        "gap-3",
        "No audit logging implemented",
        "Article 12 requires automatic event logging for the lifetime of the AI system.",
        "Article 12",
    ),
]

_HIGH_RISK_IMPORTANT = [
    (
        "gap-4",
        "Human oversight procedures not defined",
        "Article 14 requires documented human oversight measures.",
        "Article 14",
    ),
    (
        "gap-5",
        "Data governance policy not established",
        "Article 10 requires documented data quality and bias assessment procedures.",
        "Article 10",
    ),
]

_HIGH_RISK_IMPORTANT_EXTENDED = [
    (
        "gap-4b",
        "Quality Management System not established",
        "Article 17 requires a documented QMS covering policies, procedures, risk management, "
        "and post-market monitoring.",
        "Article 17",
    ),
    (
        "gap-4c",
        "No post-market monitoring system",
        "Article 61 requires a documented post-market monitoring system to actively collect "
        "performance data after deployment.",
        "Article 61",
    ),
    (
        "gap-4d",
        "Incident response plan not defined",
        "Article 62 requires procedures for reporting serious incidents and an incident "
        "response plan.",
        "Article 62",
    ),
    (
        "gap-4e",
        "Fundamental rights impact not assessed",
        "Article 27 requires a fundamental rights impact assessment before deploying "
        "high-risk AI systems.",
        "Article 27",
    ),
]

_HIGH_RISK_RECOMMENDED = [
    (
        "gap-8b",
        "EU Declaration of Conformity not prepared",
        "Article 47 requires a written EU declaration of conformity and CE marking before "
        "market placement.",
        "Article 47",
    ),
    (
        "gap-8c",
        "EU Database registration not completed",
        "Article 49 requires registration of high-risk AI systems in the EU database before "
        "market placement.",
        "Article 49",
    ),
    (
        "gap-8d",
        "Change management procedures not defined",
        "Part of QMS requirements under Article 17: systematic procedures for managing "
        "changes to the AI system.",
        "Article 17",
    ),
]


def _gaps(
    entries: list[tuple[str, str, str, str]], priority: GapPriority, affected: int
) -> list[ComplianceGap]:
    return [
        ComplianceGap(
            id=gap_id,
            title=title,
            description=description,
            article_ref=article_ref,
            priority=priority,
            systems_affected=affected,
        )
        for gap_id, title, description, article_ref in entries
    ]


def generate_compliance_gaps(systems: list[DetectedSystem]) -> list[ComplianceGap]:
    """Open compliance gaps for an inventory, ordered by priority band.

    Accuracy testing and cybersecurity gaps are always listed, with zero
    systems affected when nothing is high risk.
    """
    high = sum(1 for s in systems if s.risk_level == RiskLevel.HIGH)
    limited = sum(1 for s in systems if s.risk_level == RiskLevel.LIMITED)

    gaps: list[ComplianceGap] = []
    if high > 0:
        gaps += _gaps(_HIGH_RISK_CRITICAL, GapPriority.CRITICAL, high)
        gaps += _gaps(_HIGH_RISK_IMPORTANT, GapPriority.IMPORTANT, high)
        gaps.append(
            ComplianceGap(
                id="gap-6",
                title="Transparency information not prepared",
                description="Article 13 requires user-facing instructions for use.",
                article_ref="Article 13",
                priority=GapPriority.IMPORTANT,
                systems_affected=high + limited,
            )
        )
        gaps += _gaps(_HIGH_RISK_IMPORTANT_EXTENDED, GapPriority.IMPORTANT, high)

    gaps.append(
        ComplianceGap(
            id="gap-7",
            title="Accuracy testing documentation",
            description="Document accuracy metrics and testing methodologies for your AI systems.",
            article_ref="Article 15",
            priority=GapPriority.RECOMMENDED,
            systems_affected=high,
        )
    )
    gaps.append(
        ComplianceGap(
            id="gap-8",
            title="Cybersecurity assessment not conducted",
            description=(
                "Article 71 requires a cybersecurity assessment covering adversarial attacks, "
                "data poisoning, and model manipulation."
            ),
            article_ref="Article 71",
            priority=GapPriority.IMPORTANT if high > 0 else GapPriority.RECOMMENDED,
            systems_affected=high,
        )
    )

    if high > 0:
        gaps += _gaps(_HIGH_RISK_RECOMMENDED, GapPriority.RECOMMENDED, high)

    if high > 0 or limited > 0:
        gaps.append(
            ComplianceGap(
                id="gap-9",
                title="AI interaction disclosure",
                description="Implement clear disclosure when users interact with AI systems.",
                article_ref="Article 50",
                priority=GapPriority.IMPORTANT if limited > 0 else GapPriority.RECOMMENDED,
                systems_affected=high + limited,
            )
        )

    return gaps
