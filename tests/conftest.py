"""Shared test fixtures for Protectron scoring tests."""

import os
from collections.abc import Callable

import pytest
import structlog

from protectron.domains.assessment.models import AssessmentInput
from protectron.domains.certification.models import CertificationInputs

os.environ.setdefault("LOG_LEVEL", "DEBUG")
os.environ.setdefault("LOG_FORMAT", "console")


@pytest.fixture
def make_assessment() -> Callable[..., AssessmentInput]:
    """Factory for assessments; keyword overrides use snake_case field names."""

    def _make(**overrides) -> AssessmentInput:
        data = {
            "company_name": "Acme Analytics GmbH",
            "industry": "technology",
            "company_size": "51-200",
            "country": "DE",
            "has_eu_customers": False,
            "has_eu_operations": False,
            "processes_eu_data": False,
            "ai_system_types": [],
            "use_cases": [],
            "data_types": [],
            "decision_impact": "none",
            "automation_level": "",
        }
        data.update(overrides)
        return AssessmentInput(**data)

    return _make


@pytest.fixture
def make_certification_inputs() -> Callable[..., CertificationInputs]:
    """Factory for certification snapshots. Defaults earn no bonus and no tier."""

    def _make(**overrides) -> CertificationInputs:
        data = {
            "total_requirements": 0,
            "completed_requirements": 0,
            "sdk_connected": False,
            "hitl_rules_active_count": 0,
            "open_incidents_count": 1,
            "recent_events_count": 0,
        }
        data.update(overrides)
        return CertificationInputs(**data)

    return _make


@pytest.fixture
def sample_assessment_payload() -> dict:
    """Assessment as posted by the web form (camelCase keys)."""
    return {
        "companyName": "Helix Health Ltd",
        "industry": "healthcare",
        "companySize": "201-1000",
        "country": "IE",
        "hasEUCustomers": True,
        "hasEUOperations": False,
        "processesEUData": True,
        "aiSystemTypes": ["chatbot"],
        "useCases": ["hiring", "healthcare"],
        "dataTypes": ["biometric"],
        "decisionImpact": "critical",
        "automationLevel": "fully-automated",
    }


@pytest.fixture
def reset_structlog():
    yield
    structlog.reset_defaults()
