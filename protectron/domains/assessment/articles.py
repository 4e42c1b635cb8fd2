"""EU AI Act articles that apply to a detected AI system inventory.

Each article lists its requirements, the documents that evidence them and a
rough effort estimate. An article applies when any detected system sits in
one of its risk tiers; the catalog order is the order shown on the results
page.

References:
- Regulation (EU) 2024/1689, Chapter III (high-risk obligations)
- Regulation (EU) 2024/1689, Article 50 (transparency)
"""

import math

from .models import ApplicableArticle, ArticleRequirement, DetectedSystem, RiskLevel

# Dedicated compliance hours per week assumed by the effort estimate
HOURS_PER_WEEK = 20

_HIGH = [RiskLevel.HIGH]
_HIGH_LIMITED = [RiskLevel.HIGH, RiskLevel.LIMITED]


def _article(
    number: str,
    title: str,
    official_text: str,
    plain_explanation: str,
    requirements: list[tuple[str, str]],
    documents: list[str],
    hours: int,
    levels: list[RiskLevel],
) -> ApplicableArticle:
    return ApplicableArticle(
        id=f"art-{number}",
        number=number,
        title=title,
        official_text=official_text,
        plain_explanation=plain_explanation,
        requirements=[
            ArticleRequirement(id=f"art-{number}-{i}", title=req_title, description=description)
            for i, (req_title, description) in enumerate(requirements, start=1)
        ],
        documents_needed=documents,
        estimated_hours=hours,
        applies_to_risk_levels=levels,
    )


ARTICLE_CATALOG: list[ApplicableArticle] = [
    _article(
        "9",
        "Risk Management System",
        "High-risk AI systems shall be subject to a risk management system that shall be "
        "established, implemented, documented, and maintained.",
        "You must create and maintain a documented process for identifying, analyzing, and "
        "mitigating risks throughout your AI system's lifecycle.",
        [
            ("Risk Management System", "Establish, implement, document and maintain a risk management system throughout the AI system lifecycle."),
            ("Risk Identification", "Identify and analyze known and reasonably foreseeable risks associated with the AI system."),
            ("Risk Mitigation Measures", "Implement appropriate risk mitigation measures to address identified risks."),
            ("Residual Risk Assessment", "Evaluate residual risks after mitigation and ensure they are acceptable."),
        ],
        ["Risk Assessment Report", "Risk Mitigation Plan", "Risk Management Policy"],
        3,
        _HIGH_LIMITED,
    ),
    _article(
        "10",
        "Data and Data Governance",
        "High-risk AI systems which make use of techniques involving the training of models "
        "with data shall be developed on the basis of training, validation and testing data "
        "sets that meet quality criteria.",
        "Your training data must be relevant, representative, and free from errors. You must "
        "document data governance practices and conduct bias assessments.",
        [
            ("Data Governance Framework", "Establish data governance and management practices for training, validation and testing datasets."),
            ("Training Data Quality", "Ensure training datasets are relevant, representative, free of errors and complete."),
            ("Bias Examination", "Examine datasets for possible biases that could lead to discrimination."),
            ("Data Documentation", "Document data collection processes, data preparation, and labeling procedures."),
        ],
        ["Data Governance Policy", "Training Data Documentation", "Bias Assessment Report"],
        4,
        _HIGH,
    ),
    _article(
        "11",
        "Technical Documentation",
        "The technical documentation of a high-risk AI system shall be drawn up before that "
        "system is placed on the market or put into service and shall be kept up-to-date.",
        "You must create comprehensive documentation describing your AI system, how it works, "
        "its capabilities and limitations, and how it was developed and tested.",
        [
            ("Technical Documentation", "Draw up technical documentation before the AI system is placed on the market or put into service."),
            ("System Description", "Document general description of the AI system including intended purpose and functionality."),
            ("Development Process", "Document the design specifications and development process of the AI system."),
        ],
        [
            "AI System Description",
            "Design and Development Specification",
            "Model Card",
            "Testing and Validation Report",
        ],
        4,
        _HIGH_LIMITED,
    ),
    _article(
        "12",
        "Record-keeping",
        "High-risk AI systems shall technically allow for the automatic recording of events "
        "('logs') over the lifetime of the system.",
        "Your AI system must automatically log events to ensure traceability. This includes "
        "input data, decisions made, and outputs generated.",
        [
            ("Automatic Logging", "Design AI systems to automatically record events (logs) throughout their lifetime."),
            ("Log Traceability", "Ensure logs enable traceability of AI system functioning and decisions."),
            ("Log Retention", "Retain logs for an appropriate period commensurate with the intended purpose."),
        ],
        ["Logging Policy", "Audit Trail Samples", "Log Retention Documentation"],
        2,
        _HIGH,
    ),
    _article(
        "13",
        "Transparency and User Information",
        "High-risk AI systems shall be designed and developed in such a way to ensure that "
        "their operation is sufficiently transparent to enable deployers to interpret the "
        "system's output and use it appropriately.",
        "You must provide clear instructions for use that explain what your AI system does, "
        "its capabilities, limitations, and how humans should oversee it.",
        [
            ("Transparency Obligations", "Design AI systems to be sufficiently transparent to enable users to interpret outputs."),
            ("Instructions for Use", "Provide clear instructions for use including identity of provider, system characteristics, and limitations."),
            ("Human Oversight Information", "Inform users about human oversight measures and how to use them effectively."),
        ],
        ["Instructions for Use", "Deployer Information Package", "User Notification Templates"],
        2,
        _HIGH_LIMITED,
    ),
    _article(
        "14",
        "Human Oversight",
        "High-risk AI systems shall be designed and developed in such a way...that they can "
        "be effectively overseen by natural persons during the period in which they are in use.",
        "Your AI system must include mechanisms for human oversight, including the ability to "
        "monitor, intervene, and override AI decisions when necessary.",
        [
            ("Human Oversight Design", "Design AI systems to be effectively overseen by natural persons during use."),
            ("Oversight Measures", "Implement appropriate human-machine interface tools for oversight."),
            ("Override Capability", "Enable human operators to override or reverse AI system outputs when necessary."),
            ("Intervention Capability", "Allow human operators to intervene in the operation of the AI system or interrupt it."),
        ],
        ["Human Oversight Procedures", "Intervention Protocols", "Operator Training Records"],
        3,
        _HIGH,
    ),
    _article(
        "15",
        "Accuracy, Robustness and Cybersecurity",
        "High-risk AI systems shall be designed and developed in such a way that they "
        "achieve...an appropriate level of accuracy, robustness and cybersecurity.",
        "Your AI system must perform accurately, handle errors gracefully, and be protected "
        "against security threats and adversarial attacks.",
        [
            ("Accuracy Requirements", "Achieve appropriate levels of accuracy for the AI system intended purpose."),
            ("Robustness", "Design AI systems to be resilient against errors, faults, and inconsistencies."),
            ("Cybersecurity Measures", "Implement appropriate cybersecurity measures to protect against unauthorized access."),
        ],
        ["Accuracy Test Results", "Robustness Testing Documentation", "Security Assessment Report"],
        4,
        _HIGH,
    ),
    _article(
        "26",
        "Deployer Obligations",
        "Deployers of high-risk AI systems shall take appropriate technical and organisational "
        "measures to ensure they use such systems in accordance with the instructions for use.",
        "If you deploy (use) high-risk AI systems, you must follow the provider's instructions, "
        "assign competent human oversight, and report serious incidents.",
        [
            ("Deployer Compliance", "Ensure AI systems are used in accordance with instructions for use."),
            ("Human Oversight Assignment", "Assign human oversight to natural persons with necessary competence and authority."),
            ("Input Data Relevance", "Ensure input data is relevant and sufficiently representative for the intended purpose."),
            ("Monitoring Obligations", "Monitor the operation of the AI system based on instructions for use."),
            ("Incident Reporting", "Report serious incidents to providers and relevant authorities."),
        ],
        ["Deployer Compliance Checklist", "Incident Reporting Procedures", "Monitoring Log"],
        2,
        _HIGH_LIMITED,
    ),
    _article(
        "17",
        "Quality Management System",
        "Providers of high-risk AI systems shall put a quality management system in place that "
        "ensures compliance with this Regulation.",
        "You must establish a quality management system (QMS) covering policies, procedures, "
        "risk management, post-market monitoring, and resource allocation to ensure ongoing "
        "compliance.",
        [
            ("QMS Establishment", "Establish a quality management system that ensures compliance with the EU AI Act."),
            ("QMS Documentation", "Document the QMS strategy, policies, procedures, and resource allocation."),
            ("Change Management", "Implement systematic procedures for managing changes to the AI system and QMS."),
            ("Standards Compliance", "Map QMS processes to applicable harmonized standards and EU requirements."),
        ],
        ["Quality Management System", "Change Management Procedures", "Standards Mapping Document"],
        5,
        _HIGH,
    ),
    _article(
        "27",
        "Fundamental Rights Impact Assessment",
        "Prior to deploying a high-risk AI system, deployers that are bodies governed by public "
        "law, or are private operators providing public services...shall perform an assessment "
        "of the impact on fundamental rights.",
        "Deployers of high-risk AI systems (especially public bodies or those providing public "
        "services) must assess the system's impact on fundamental rights before deployment.",
        [
            ("FRIA Conduct", "Perform a fundamental rights impact assessment before deploying high-risk AI systems."),
            ("Rights Analysis", "Analyze impacts on non-discrimination, privacy, freedom of expression, human dignity, and other Charter rights."),
            ("Affected Groups", "Identify individuals and groups that may be affected by the AI system."),
            ("Mitigation Plans", "Define measures to prevent or minimize negative impacts on fundamental rights."),
        ],
        ["Fundamental Rights Impact Assessment"],
        4,
        _HIGH,
    ),
    _article(
        "47",
        "EU Declaration of Conformity",
        "The provider shall draw up a written EU declaration of conformity for each high-risk "
        "AI system and keep it at the disposal of national competent authorities.",
        "You must create a formal declaration stating that your AI system complies with all "
        "applicable EU AI Act requirements, and affix CE marking.",
        [
            ("Declaration of Conformity", "Draw up a written EU declaration of conformity for each high-risk AI system."),
            ("Conformity Content", "Include provider identity, system description, conformity assessment reference, and standards applied."),
            ("CE Marking", "Affix CE marking to the AI system or its documentation to indicate conformity."),
        ],
        ["EU Declaration of Conformity", "CE Marking Declaration"],
        2,
        _HIGH,
    ),
    _article(
        "49",
        "EU Database Registration",
        "Before placing on the market or putting into service a high-risk AI system...the "
        "provider or the deployer...shall register that system in the EU database.",
        "High-risk AI systems must be registered in the EU public database before they can be "
        "placed on the market or put into service.",
        [
            ("Database Registration", "Register the high-risk AI system in the EU database before market placement."),
            ("Registration Information", "Provide required information including provider identity, system description, status, and conformity details."),
        ],
        ["EU Database Registration Form"],
        1,
        _HIGH,
    ),
    _article(
        "50",
        "Transparency for Limited Risk",
        "Providers shall ensure that AI systems intended to interact directly with natural "
        "persons are designed and developed in such a way that the natural persons concerned "
        "are informed that they are interacting with an AI system.",
        "Users must be clearly informed when they are interacting with an AI system (like a "
        "chatbot) and when content is AI-generated.",
        [
            ("AI Interaction Disclosure", "Inform natural persons that they are interacting with an AI system."),
            ("Synthetic Content Marking", "Mark AI-generated synthetic audio, image, video or text content."),
        ],
        ["AI Disclosure Notice", "Synthetic Content Policy", "Transparency Notice"],
        1,
        [RiskLevel.LIMITED, RiskLevel.MINIMAL],
    ),
    _article(
        "61",
        "Post-Market Monitoring",
        "Providers shall establish and document a post-market monitoring system...proportionate "
        "to the nature of the AI technologies and the risks of the high-risk AI system.",
        "You must have a documented system for monitoring your AI system after deployment, "
        "collecting data on performance, incidents, and user feedback.",
        [
            ("Post-Market Monitoring System", "Establish and document a post-market monitoring system for the AI system."),
            ("Monitoring Plan", "Create a monitoring plan that is proportionate to the system's risk level."),
            ("Data Collection", "Actively and systematically collect data on the system's performance throughout its lifetime."),
        ],
        ["Post-Market Monitoring Plan"],
        3,
        _HIGH,
    ),
    _article(
        "62",
        "Serious Incident Reporting",
        "Providers of high-risk AI systems placed on the Union market shall report any serious "
        "incident to the market surveillance authorities of the Member States.",
        "You must have procedures to report serious incidents involving your AI system to the "
        "relevant national authorities within prescribed timelines.",
        [
            ("Incident Reporting Procedures", "Establish procedures for reporting serious incidents to market surveillance authorities."),
            ("Incident Response Plan", "Create an incident response plan for handling AI system failures and malfunctions."),
            ("Root Cause Analysis", "Conduct root cause analysis for serious incidents and implement corrective actions."),
        ],
        ["Incident Response Plan", "Incident Reporting Procedures"],
        3,
        _HIGH,
    ),
    _article(
        "71",
        "Cybersecurity Requirements",
        "High-risk AI systems shall be designed and developed with appropriate cybersecurity "
        "measures to ensure resilience against attempts to alter their use, outputs, or "
        "performance.",
        "Your AI system must have cybersecurity protections against unauthorized access, data "
        "poisoning, model manipulation, and adversarial attacks.",
        [
            ("Cybersecurity Assessment", "Conduct a cybersecurity assessment of the AI system covering all attack vectors."),
            ("Security Controls", "Implement security controls proportionate to the risk level of the AI system."),
            ("Adversarial Robustness", "Protect against adversarial attacks, data poisoning, and model manipulation."),
        ],
        ["Cybersecurity Assessment"],
        4,
        _HIGH,
    ),
]


def determine_applicable_articles(systems: list[DetectedSystem]) -> list[ApplicableArticle]:
    """Articles whose risk tiers cover at least one detected system, in catalog order."""
    levels = {s.risk_level for s in systems}
    return [
        article
        for article in ARTICLE_CATALOG
        if any(level in levels for level in article.applies_to_risk_levels)
    ]


def count_requirements(articles: list[ApplicableArticle]) -> int:
    return sum(len(article.requirements) for article in articles)


def count_documents(articles: list[ApplicableArticle]) -> int:
    """Distinct documents across articles; shared documents count once."""
    return len({doc for article in articles for doc in article.documents_needed})


def estimate_hours(articles: list[ApplicableArticle]) -> int:
    return sum(article.estimated_hours for article in articles)


def estimate_weeks(hours: int, hours_per_week: int = HOURS_PER_WEEK) -> int:
    return math.ceil(hours / hours_per_week)
