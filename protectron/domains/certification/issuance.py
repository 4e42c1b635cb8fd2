"""Compliance certificate issuance and public verification.

Issuance grades the system, refuses ineligible systems and builds the
certificate record the caller persists. Verification reads a stored record
back and decides whether it is still valid. PDF rendering, QR codes and
storage belong to the calling service.
"""

import random
import secrets
import string
from datetime import UTC, datetime, timedelta

import structlog

from .config import CertificationConfig, default_config
from .grader import CertificationGrader, grade_issued_certificate
from .models import (
    CertificateRecord,
    CertificateStatus,
    CertificateVerification,
    CertificationChecks,
    CertificationGrade,
    CertificationInputs,
    IssuedCertificate,
    RequirementsSnapshot,
)

logger = structlog.get_logger()

_BASE36_ALPHABET = string.digits + string.ascii_uppercase


class CertificationIneligibleError(ValueError):
    """The system does not meet the minimum certification requirements."""


def _to_base36(value: int) -> str:
    if value == 0:
        return "0"
    digits: list[str] = []
    while value:
        value, remainder = divmod(value, 36)
        digits.append(_BASE36_ALPHABET[remainder])
    return "".join(reversed(digits))


def _as_utc(moment: datetime) -> datetime:
    # Stored timestamps without an offset are UTC
    return moment if moment.tzinfo is not None else moment.replace(tzinfo=UTC)


def _add_years(moment: datetime, years: int) -> datetime:
    try:
        return moment.replace(year=moment.year + years)
    except ValueError:
        # Feb 29 into a non-leap year
        return moment.replace(year=moment.year + years, day=28)


def generate_cert_id(
    now: datetime,
    rng: random.Random | None = None,
    config: CertificationConfig = default_config,
) -> str:
    """``CERT-<base36 epoch millis>-<random base36>``, upper case."""
    rng = rng or secrets.SystemRandom()
    millis = int(now.timestamp() * 1000)
    suffix = "".join(
        rng.choice(_BASE36_ALPHABET) for _ in range(config.issuance.cert_id_random_length)
    )
    return f"{config.issuance.cert_id_prefix}-{_to_base36(millis)}-{suffix}"


def check_eligibility(
    grade: CertificationGrade, config: CertificationConfig = default_config
) -> None:
    """Raise CertificationIneligibleError unless the SDK is connected and the bronze bar is met."""
    if not grade.checks.sdk_connected or grade.final_score < config.tiers.bronze:
        raise CertificationIneligibleError(
            "System does not meet minimum certification requirements "
            f"(SDK must be connected and score >= {config.tiers.bronze:g}%)"
        )


def issue_certificate(
    system_id: str,
    inputs: CertificationInputs,
    now: datetime | None = None,
    cert_id: str | None = None,
    config: CertificationConfig | None = None,
) -> IssuedCertificate:
    """Grade a system and build its certificate record.

    Args:
        system_id: The AI system being certified.
        inputs: Operational snapshot for the system.
        now: Issue time; defaults to the current UTC time.
        cert_id: Pre-allocated certificate id; generated when omitted.
        config: Certification config; defaults to the module default.

    Raises:
        CertificationIneligibleError: SDK not connected or score below bronze.
    """
    cfg = config or default_config
    now = now or datetime.now(UTC)

    grade = CertificationGrader(cfg).grade(inputs)
    try:
        check_eligibility(grade, cfg)
    except CertificationIneligibleError:
        logger.warning(
            "certificate_issue_refused",
            system_id=system_id,
            sdk_connected=inputs.sdk_connected,
            final_score=grade.compliance_score,
        )
        raise

    cert_id = cert_id or generate_cert_id(now, config=cfg)
    # Tier from the unrounded score; 94.96 stores as 95.0 but issues silver
    level = grade_issued_certificate(grade.final_score, cfg)

    certificate = IssuedCertificate(
        cert_id=cert_id,
        system_id=system_id,
        compliance_score=grade.compliance_score,
        certification_level=level,
        status=CertificateStatus.ACTIVE,
        issued_at=now,
        valid_until=_add_years(now, cfg.issuance.validity_years),
        next_verification_at=now + timedelta(days=cfg.issuance.reverification_days),
        verify_url=f"{cfg.issuance.verify_base_url}/{cert_id}",
        requirements_snapshot=RequirementsSnapshot(
            total=inputs.total_requirements,
            completed=inputs.completed_requirements,
            checks=grade.checks,
        ),
    )

    logger.info(
        "certificate_issued",
        system_id=system_id,
        cert_id=cert_id,
        certification_level=level.value,
        compliance_score=grade.compliance_score,
        valid_until=certificate.valid_until.isoformat(),
    )

    return certificate


def verify_certificate(
    record: CertificateRecord,
    now: datetime | None = None,
    config: CertificationConfig = default_config,
) -> CertificateVerification:
    """Check a stored certificate for the public verification page.

    A certificate is valid when its status is ``active`` and it has not
    passed ``valid_until``. A record without ``valid_until`` never expires.
    """
    now = _as_utc(now or datetime.now(UTC))
    is_expired = record.valid_until is not None and _as_utc(record.valid_until) < now
    is_active = record.status == CertificateStatus.ACTIVE
    score = record.compliance_score or 0

    snapshot = record.requirements_snapshot
    checks = snapshot.checks if snapshot is not None else CertificationChecks()

    verification = CertificateVerification(
        valid=is_active and not is_expired,
        cert_id=record.cert_id,
        system_name=record.system_name or "Unknown System",
        organization_name=record.organization_name or "Unknown Organization",
        certification_level=grade_issued_certificate(score, config),
        compliance_score=score,
        issued_at=record.certified_at,
        valid_until=record.valid_until,
        status=CertificateStatus.EXPIRED if is_expired else record.status,
        checks=checks,
    )

    logger.info(
        "certificate_verified",
        cert_id=record.cert_id,
        valid=verification.valid,
        status=str(verification.status),
    )

    return verification
