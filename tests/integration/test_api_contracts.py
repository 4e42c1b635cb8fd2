"""API contract tests for the Protectron scoring endpoints.

Validates request schemas, response shapes and the error contract for every
route.
"""

import pytest
from httpx import ASGITransport, AsyncClient
from structlog.testing import capture_logs

from protectron.main import app

pytestmark = pytest.mark.integration

BASE_URL = "http://test"


def _client():
    """Return an AsyncClient bound to the test app."""
    transport = ASGITransport(app=app)
    return AsyncClient(transport=transport, base_url=BASE_URL)


def _snapshot(**overrides) -> dict:
    data = {
        "totalRequirements": 8,
        "completedRequirements": 7,
        "sdkConnected": True,
        "hitlRulesActiveCount": 1,
        "openIncidentsCount": 0,
        "recentEventsCount": 0,
    }
    data.update(overrides)
    return data


# =========================================================================
# ASSESSMENTS
# =========================================================================


class TestClassifyAssessment:
    """POST /api/v1/assessments/classify"""

    endpoint = "/api/v1/assessments/classify"

    @pytest.mark.asyncio
    async def test_worked_example(self, sample_assessment_payload):
        async with _client() as client:
            resp = await client.post(self.endpoint, json=sample_assessment_payload)
        assert resp.status_code == 200
        data = resp.json()
        assert data["complianceScore"] == 63
        assert data["hasEUExposure"] is True
        assert data["totalSystems"] == 3
        assert [r["level"] for r in data["results"]] == ["high", "limited"]
        assert data["results"][0]["bgColor"] == "bg-warning-50"

    @pytest.mark.asyncio
    async def test_display_fields(self, sample_assessment_payload):
        async with _client() as client:
            resp = await client.post(self.endpoint, json=sample_assessment_payload)
        data = resp.json()
        assert data["scoreColor"] == "text-warning-500"
        assert data["scoreLabel"]["label"]
        assert isinstance(data["daysUntilDeadline"], int)
        assert isinstance(data["deadlineCountdown"], str)
        assert {s["name"] for s in data["detectedSystems"]}

    @pytest.mark.asyncio
    async def test_empty_body_is_minimal(self):
        async with _client() as client:
            resp = await client.post(self.endpoint, json={})
        assert resp.status_code == 200
        data = resp.json()
        assert data["complianceScore"] == 100
        assert [r["level"] for r in data["results"]] == ["minimal"]

    @pytest.mark.asyncio
    async def test_snake_case_accepted(self):
        async with _client() as client:
            resp = await client.post(self.endpoint, json={"use_cases": ["finance"]})
        assert resp.json()["complianceScore"] == 92

    @pytest.mark.asyncio
    async def test_results_page_fields(self, sample_assessment_payload):
        async with _client() as client:
            resp = await client.post(self.endpoint, json=sample_assessment_payload)
        data = resp.json()
        assert len(data["applicableArticles"]) == 16
        assert data["complianceGaps"][0]["priority"] == "critical"
        assert [p["phase"] for p in data["roadmapPhases"]] == [1, 2, 3, 4]
        assert [b["category"] for b in data["scoreBreakdown"]] == [
            "EU Exposure",
            "High-Risk Systems",
            "Limited-Risk Systems",
            "Automation Level",
        ]
        assert data["totalRequirements"] == 53
        assert data["totalDocuments"] == 38
        assert data["estimatedHours"] == 47
        assert data["estimatedWeeks"] == 3

    @pytest.mark.asyncio
    async def test_results_summary_logged(self, sample_assessment_payload):
        with capture_logs() as logs:
            async with _client() as client:
                await client.post(self.endpoint, json=sample_assessment_payload)
        (event,) = [e for e in logs if e["event"] == "assessment_results_served"]
        assert event["log_level"] == "info"
        assert event["compliance_score"] == 63
        assert event["detected_systems"] == 3
        assert event["applicable_articles"] == 16
        assert event["estimated_weeks"] == 3


# =========================================================================
# REQUIREMENTS
# =========================================================================


class TestRequirementProgress:
    """POST /api/v1/requirements/progress"""

    endpoint = "/api/v1/requirements/progress"

    @pytest.mark.asyncio
    async def test_in_progress(self):
        body = {
            "ai_system_id": "sys-001",
            "requirements": [
                {"id": "r1", "title": "Risk management", "status": "completed"},
                {"id": "r2", "title": "Data governance", "status": "compliant"},
                {"id": "r3", "title": "Record keeping", "status": "in_progress"},
                {"id": "r4", "title": "Human oversight"},
            ],
        }
        async with _client() as client:
            resp = await client.post(self.endpoint, json=body)
        assert resp.status_code == 200
        assert resp.json() == {
            "ai_system_id": "sys-001",
            "compliance_progress": 50,
            "compliance_status": "in_progress",
            "stats": {"total": 4, "completed": 2, "in_progress": 1, "pending": 1},
        }

    @pytest.mark.asyncio
    async def test_no_requirements(self):
        async with _client() as client:
            resp = await client.post(self.endpoint, json={})
        data = resp.json()
        assert data["compliance_progress"] == 0
        assert data["compliance_status"] == "not_started"


# =========================================================================
# CERTIFICATIONS
# =========================================================================


class TestGradeCertification:
    """POST /api/v1/certifications/grade"""

    endpoint = "/api/v1/certifications/grade"

    @pytest.mark.asyncio
    async def test_gold(self):
        async with _client() as client:
            resp = await client.post(self.endpoint, json=_snapshot())
        assert resp.status_code == 200
        data = resp.json()["data"]
        assert data["compliance_score"] == 97.5
        assert data["certification_level"] == "gold"
        assert data["certification_status"] == "certified"
        assert data["requirements"] == {"total": 8, "completed": 7, "percentage": 88}
        assert data["bonus_points"] == 10

    @pytest.mark.asyncio
    async def test_sdk_gate(self):
        async with _client() as client:
            resp = await client.post(self.endpoint, json=_snapshot(sdkConnected=False))
        data = resp.json()["data"]
        assert data["certification_level"] == "none"
        assert data["certification_status"] == "not_certified"

    @pytest.mark.asyncio
    async def test_completed_exceeds_total(self):
        async with _client() as client:
            resp = await client.post(self.endpoint, json=_snapshot(completedRequirements=9))
        assert resp.status_code == 422

    @pytest.mark.asyncio
    async def test_negative_count(self):
        async with _client() as client:
            resp = await client.post(self.endpoint, json=_snapshot(openIncidentsCount=-1))
        assert resp.status_code == 422


class TestIssueCertificate:
    """POST /api/v1/certifications/{system_id}/issue"""

    @pytest.mark.asyncio
    async def test_issued(self):
        async with _client() as client:
            resp = await client.post("/api/v1/certifications/sys-001/issue", json=_snapshot())
        assert resp.status_code == 201
        data = resp.json()["data"]
        assert data["systemId"] == "sys-001"
        assert data["certId"].startswith("CERT-")
        assert data["certificationLevel"] == "gold"
        assert data["status"] == "active"
        assert data["verifyUrl"].endswith(data["certId"])
        assert data["requirementsSnapshot"]["total"] == 8

    @pytest.mark.asyncio
    async def test_tier_from_unrounded_score(self):
        snapshot = _snapshot(
            totalRequirements=2001, completedRequirements=1600, recentEventsCount=1
        )
        async with _client() as client:
            resp = await client.post("/api/v1/certifications/sys-006/issue", json=snapshot)
        assert resp.status_code == 201
        data = resp.json()["data"]
        assert data["complianceScore"] == 95.0
        assert data["certificationLevel"] == "silver"

    @pytest.mark.asyncio
    async def test_ineligible(self):
        async with _client() as client:
            resp = await client.post(
                "/api/v1/certifications/sys-002/issue",
                json=_snapshot(sdkConnected=False),
                headers={"X-Request-ID": "req-issue"},
            )
        assert resp.status_code == 400
        body = resp.json()
        assert body["error"] == "bad_request"
        assert "minimum certification requirements" in body["message"]
        assert body["request_id"] == "req-issue"


class TestVerifyCertificate:
    """POST /api/v1/certifications/verify"""

    endpoint = "/api/v1/certifications/verify"

    @pytest.mark.asyncio
    async def test_valid(self):
        record = {
            "certId": "CERT-MABC123-X1Y2Z3",
            "complianceScore": 88,
            "status": "active",
            "certifiedAt": "2026-03-01T00:00:00Z",
            "validUntil": "2099-03-01T00:00:00Z",
            "systemName": "Resume Screener",
            "organizationName": "Acme Analytics GmbH",
        }
        async with _client() as client:
            resp = await client.post(self.endpoint, json=record)
        assert resp.status_code == 200
        data = resp.json()["data"]
        assert data["valid"] is True
        assert data["certificationLevel"] == "silver"
        assert data["systemName"] == "Resume Screener"
        assert data["checks"]["sdkConnected"] is False

    @pytest.mark.asyncio
    async def test_expired(self):
        record = {"certId": "CERT-OLD-000000", "validUntil": "2020-01-01T00:00:00Z"}
        async with _client() as client:
            resp = await client.post(self.endpoint, json=record)
        data = resp.json()["data"]
        assert data["valid"] is False
        assert data["status"] == "expired"
        assert data["systemName"] == "Unknown System"

    @pytest.mark.asyncio
    async def test_missing_cert_id(self):
        async with _client() as client:
            resp = await client.post(self.endpoint, json={})
        assert resp.status_code == 422


class TestCertificateLevels:
    """GET /api/v1/certifications/levels/{score}"""

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        ("score", "level"), [(96, "gold"), (90, "silver"), (50, "bronze")]
    )
    async def test_levels(self, score, level):
        async with _client() as client:
            resp = await client.get(f"/api/v1/certifications/levels/{score}")
        assert resp.status_code == 200
        assert resp.json()["certification_level"] == level
