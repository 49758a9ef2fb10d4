"""
Integration tests for incident, detection and role-guarded endpoints.
"""
from unittest.mock import AsyncMock

import pytest

pytestmark = pytest.mark.integration

from swachhta_prahari.application.dto.common_dto import PaginationMeta
from swachhta_prahari.application.dto.detection_dto import DetectionResult
from swachhta_prahari.application.dto.incident_dto import IncidentResponse
from swachhta_prahari.application.use_cases.detection import ProcessDetectionUseCase
from swachhta_prahari.application.use_cases.incident import (
    ListIncidentsUseCase,
    GetIncidentUseCase,
    UpdateIncidentStatusUseCase,
)
from swachhta_prahari.application.use_cases.payout import ListPayoutsUseCase
from swachhta_prahari.domain.exceptions import (
    NotFoundError,
    InvalidStateTransitionError,
    ValidationFailedError,
)

from tests.factories import make_incident


class TestIncidentAPI:
    """Tests for /api/incidents endpoints"""

    def test_list_passes_filters(self, client, registry):
        use_case = AsyncMock(spec=ListIncidentsUseCase)
        use_case.execute.return_value = (
            [IncidentResponse.from_domain(make_incident())],
            PaginationMeta.build(1, 20, 1),
        )
        registry[ListIncidentsUseCase] = use_case

        response = client.get("/api/incidents?severity=high&cameraId=CAM-001&sortBy=severity&sortOrder=asc")

        assert response.status_code == 200
        body = response.json()
        assert body["data"]["incidents"][0]["incidentId"] == "INC-1700000000000-0001"
        assert "pagination" in body["meta"]
        criteria = use_case.execute.call_args.args[0]
        assert criteria.severity == "high"
        assert criteria.camera_id == "CAM-001"
        assert use_case.execute.call_args.kwargs["sort_order"] == "asc"

    def test_invalid_sort_order_is_400(self, client):
        response = client.get("/api/incidents?sortOrder=sideways")
        assert response.status_code == 400

    def test_get_missing_incident_is_404(self, client, registry):
        registry[GetIncidentUseCase] = AsyncMock(spec=GetIncidentUseCase)
        registry[GetIncidentUseCase].execute.side_effect = NotFoundError("Incident not found")

        response = client.get("/api/incidents/INC-404")

        assert response.status_code == 404
        assert response.json() == {"success": False, "message": "Incident not found"}

    def test_update_false_positive_is_409(self, client, registry):
        registry[UpdateIncidentStatusUseCase] = AsyncMock(spec=UpdateIncidentStatusUseCase)
        registry[UpdateIncidentStatusUseCase].execute.side_effect = InvalidStateTransitionError(
            "Incident marked as false_positive cannot be moved to resolved"
        )

        response = client.put("/api/incidents/INC-1/status", json={"status": "resolved"})

        assert response.status_code == 409

    def test_update_passes_acting_user(self, client, registry):
        use_case = AsyncMock(spec=UpdateIncidentStatusUseCase)
        use_case.execute.return_value = IncidentResponse.from_domain(make_incident(status="pending"))
        registry[UpdateIncidentStatusUseCase] = use_case

        response = client.put("/api/incidents/INC-1/status", json={"status": "pending", "expectedVersion": 2})

        assert response.status_code == 200
        assert use_case.execute.call_args.args[2] == "usr-admin"
        assert use_case.execute.call_args.args[1].expected_version == 2


class TestRolePolicy:
    def test_camera_role_cannot_assign(self, client, current_user):
        current_user.role = "camera"
        response = client.post("/api/incidents/INC-1/assign", json={"assigneeId": "usr-2"})
        assert response.status_code == 403
        assert response.json()["message"] == "Access denied. Insufficient permissions."

    def test_payroll_can_read_payouts(self, client, registry, current_user):
        current_user.role = "payroll"
        registry[ListPayoutsUseCase] = AsyncMock(spec=ListPayoutsUseCase)
        registry[ListPayoutsUseCase].execute.return_value = []
        assert client.get("/api/payouts").status_code == 200

    def test_analyst_cannot_delete_payouts(self, client, current_user):
        current_user.role = "analyst"
        assert client.delete("/api/payouts/2025-02-01").status_code == 403


class TestDetectionWebhook:
    """Tests for POST /api/ai/detection"""

    @pytest.fixture(autouse=True)
    def fresh_limiter(self):
        from swachhta_prahari.api.v1 import dependencies

        dependencies._webhook_limiter = None
        yield
        dependencies._webhook_limiter = None

    def test_detection_creates_incident(self, app, client, registry):
        from swachhta_prahari.api.v1.dependencies import get_current_user

        # The webhook is public
        app.dependency_overrides.pop(get_current_user, None)
        use_case = AsyncMock(spec=ProcessDetectionUseCase)
        use_case.execute.return_value = DetectionResult(
            incident_created=True, incident_id="INC-1-0001", severity="critical", confidence=0.9
        )
        registry[ProcessDetectionUseCase] = use_case
        payload = {
            "cameraId": "CAM-001",
            "detection": {"type": "illegal_dumping", "confidence": 0.9},
            "timestamp": "2025-01-10T08:00:00Z",
        }

        response = client.post("/api/ai/detection", json=payload)

        assert response.status_code == 200
        assert response.json()["data"]["incidentCreated"] is True
        use_case.execute.assert_awaited_once_with(payload)

    def test_invalid_detection_lists_errors(self, client, registry):
        registry[ProcessDetectionUseCase] = AsyncMock(spec=ProcessDetectionUseCase)
        registry[ProcessDetectionUseCase].execute.side_effect = ValidationFailedError(
            "Invalid detection payload", ["Camera ID is required"]
        )

        response = client.post("/api/ai/detection", json={})

        assert response.status_code == 400
        assert response.json() == {
            "success": False,
            "message": "Invalid detection payload",
            "errors": ["Camera ID is required"],
        }

    def test_rate_limited(self, client, registry):
        from swachhta_prahari.api.v1 import dependencies
        from swachhta_prahari.core.rate_limit import FixedWindowRateLimiter

        dependencies._webhook_limiter = FixedWindowRateLimiter(max_requests=1, window_seconds=60)
        registry[ProcessDetectionUseCase] = AsyncMock(spec=ProcessDetectionUseCase)
        registry[ProcessDetectionUseCase].execute.return_value = DetectionResult(incident_created=False)

        assert client.post("/api/ai/detection", json={"cameraId": "CAM-001"}).status_code == 200
        response = client.post("/api/ai/detection", json={"cameraId": "CAM-001"})

        assert response.status_code == 429
        assert "Retry-After" in response.headers


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["ok"] is True
