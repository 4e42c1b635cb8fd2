"""AI system certification grading, issuance and verification domain."""

from .grader import CertificationGrader, grade_issued_certificate, to_status_payload
from .issuance import (
    CertificationIneligibleError,
    check_eligibility,
    issue_certificate,
    verify_certificate,
)
from .models import (
    CertificateRecord,
    CertificateVerification,
    CertificationGrade,
    CertificationInputs,
    CertificationLevel,
    CertificationStatus,
    IssuedCertificate,
)

__all__ = [
    "CertificateRecord",
    "CertificateVerification",
    "CertificationGrade",
    "CertificationGrader",
    "CertificationIneligibleError",
    "CertificationInputs",
    "CertificationLevel",
    "CertificationStatus",
    "IssuedCertificate",
    "check_eligibility",
    "grade_issued_certificate",
    "issue_certificate",
    "to_status_payload",
    "verify_certificate",
]
