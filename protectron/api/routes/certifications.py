"""AI system certification endpoints."""

from fastapi import APIRouter

from protectron.domains.certification.grader import (
    CertificationGrader,
    grade_issued_certificate,
    to_status_payload,
)
from protectron.domains.certification.issuance import issue_certificate, verify_certificate
from protectron.domains.certification.models import CertificateRecord, CertificationInputs

router = APIRouter(prefix="/api/v1/certifications", tags=["certifications"])

_grader = CertificationGrader()


@router.post("/grade")
async def grade_system(inputs: CertificationInputs) -> dict:
    """Certification status for a system's operational snapshot."""
    grade = _grader.grade(inputs)
    return {"data": to_status_payload(inputs, grade)}


@router.post("/{system_id}/issue", status_code=201)
async def issue_system_certificate(system_id: str, inputs: CertificationInputs) -> dict:
    """Issue a certificate record. Ineligible systems get a 400."""
    certificate = issue_certificate(system_id, inputs)
    return {"data": certificate.model_dump(mode="json", by_alias=True)}


@router.post("/verify")
async def verify_stored_certificate(record: CertificateRecord) -> dict:
    """Public verification of a stored certificate record."""
    verification = verify_certificate(record)
    return {"data": verification.model_dump(mode="json", by_alias=True)}


@router.get("/levels/{score}")
async def issued_certificate_level(score: float) -> dict:
    """Tier shown for an issued certificate with the given score."""
    return {"score": score, "certification_level": grade_issued_certificate(score).value}
