"""
Unit tests for the detection webhook use case and AI configuration.
"""
from unittest.mock import AsyncMock

import pytest

from swachhta_prahari.application.dto.detection_dto import AIConfigUpdateRequest
from swachhta_prahari.application.use_cases.detection.process_detection import ProcessDetectionUseCase
from swachhta_prahari.application.use_cases.detection.update_ai_config import UpdateAIConfigUseCase
from swachhta_prahari.domain.exceptions import ValidationFailedError, NotFoundError, ConflictError
from swachhta_prahari.infrastructure.notifications import IncidentEvents

from tests.factories import make_camera, make_incident


def _payload(**overrides):
    payload = {
        "cameraId": "CAM-001",
        "detection": {"type": "illegal_dumping", "confidence": 0.9},
        "timestamp": "2025-01-10T08:00:00Z",
    }
    payload.update(overrides)
    return payload


def _saved(incident):
    incident.id = "64b000000000000000000099"
    return incident


@pytest.fixture
def repositories():
    incident_repository = AsyncMock()
    incident_repository.find_by_idempotency_key.return_value = None
    incident_repository.create.side_effect = _saved
    camera_repository = AsyncMock()
    camera_repository.find_by_camera_id.return_value = make_camera(threshold=0.85)
    sequence_repository = AsyncMock()
    sequence_repository.next_value.return_value = 12
    return incident_repository, camera_repository, sequence_repository


@pytest.fixture
def use_case(repositories, broadcaster, mock_settings):
    incident_repository, camera_repository, sequence_repository = repositories
    return ProcessDetectionUseCase(incident_repository, camera_repository, sequence_repository, broadcaster)


class TestProcessDetectionUseCase:
    """Tests for ProcessDetectionUseCase"""

    @pytest.mark.asyncio
    async def test_creates_critical_incident(self, use_case, repositories, broadcaster):
        incident_repository, camera_repository, _ = repositories

        result = await use_case.execute(_payload())

        assert result.incident_created is True
        assert result.severity == "critical"
        assert result.incident_id.startswith("INC-")
        assert result.incident_id.endswith("-0012")
        created = incident_repository.create.call_args.args[0]
        assert created.status == "detected"
        assert created.camera_id == "CAM-001"
        assert created.location.zone == "A"
        assert created.ai_detection.model_version == "1.2.3"
        camera_repository.record_detection.assert_awaited_once()
        broadcaster.broadcast_incident.assert_awaited_once()
        assert broadcaster.broadcast_incident.call_args.args[0] == IncidentEvents.AI_DETECTION

    @pytest.mark.asyncio
    async def test_below_threshold_creates_nothing(self, use_case, repositories, broadcaster):
        incident_repository, camera_repository, _ = repositories
        camera_repository.find_by_camera_id.return_value = make_camera(threshold=0.95)

        result = await use_case.execute(_payload())

        assert result.incident_created is False
        assert result.threshold == 0.95
        incident_repository.create.assert_not_awaited()
        broadcaster.broadcast_incident.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_invalid_payload_lists_errors(self, use_case):
        with pytest.raises(ValidationFailedError) as exc_info:
            await use_case.execute({"detection": {"type": "smoke", "confidence": 2}})
        assert "Camera ID is required" in exc_info.value.errors
        assert "Invalid detection type" in exc_info.value.errors
        assert exc_info.value.status_code == 400

    @pytest.mark.asyncio
    async def test_unknown_camera(self, use_case, repositories):
        repositories[1].find_by_camera_id.return_value = None
        with pytest.raises(NotFoundError, match="Camera not found: CAM-404"):
            await use_case.execute(_payload(cameraId="CAM-404"))

    @pytest.mark.asyncio
    async def test_known_idempotency_key_returns_duplicate(self, use_case, repositories, broadcaster):
        incident_repository = repositories[0]
        incident_repository.find_by_idempotency_key.return_value = make_incident(incident_id="INC-1-0001")

        result = await use_case.execute(_payload(idempotencyKey="edge-42"))

        assert result.duplicate is True
        assert result.incident_created is False
        assert result.incident_id == "INC-1-0001"
        incident_repository.create.assert_not_awaited()
        broadcaster.broadcast_incident.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_concurrent_duplicate_insert(self, use_case, repositories):
        incident_repository = repositories[0]
        incident_repository.find_by_idempotency_key.side_effect = [None, make_incident(incident_id="INC-1-0002")]
        incident_repository.create.side_effect = ConflictError("duplicate key")

        result = await use_case.execute(_payload(idempotencyKey="edge-43"))

        assert result.duplicate is True
        assert result.incident_id == "INC-1-0002"


class TestUpdateAIConfigUseCase:
    """Tests for UpdateAIConfigUseCase"""

    @pytest.mark.asyncio
    async def test_updates_all_cameras(self):
        repo = AsyncMock()
        repo.update_ai_config.return_value = 4
        result = await UpdateAIConfigUseCase(repo).execute(
            AIConfigUpdateRequest(confidence_threshold=0.9), "usr-admin"
        )
        assert result["modifiedCount"] == 4
        assert result["configuration"] == {"confidenceThreshold": 0.9}
        repo.update_ai_config.assert_awaited_once_with(None, {"confidence_threshold": 0.9})

    @pytest.mark.asyncio
    async def test_missing_camera(self):
        repo = AsyncMock()
        repo.find_by_camera_id.return_value = None
        with pytest.raises(NotFoundError):
            await UpdateAIConfigUseCase(repo).execute(
                AIConfigUpdateRequest(camera_id="CAM-404", enabled=False), "usr-admin"
            )

    @pytest.mark.asyncio
    async def test_empty_update_rejected(self):
        with pytest.raises(ValidationFailedError):
            await UpdateAIConfigUseCase(AsyncMock()).execute(AIConfigUpdateRequest(), "usr-admin")
