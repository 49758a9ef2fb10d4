"""
Unit tests for incident use cases (status updates, assignment, manual creation).
"""
from datetime import datetime
from unittest.mock import AsyncMock

import pytest

from swachhta_prahari.application.dto.incident_dto import (
    IncidentStatusUpdateRequest,
    IncidentAssignRequest,
    IncidentCreateRequest,
)
from swachhta_prahari.application.use_cases.incident import (
    UpdateIncidentStatusUseCase,
    AssignIncidentUseCase,
    CreateIncidentUseCase,
    allocate_incident_id,
)
from swachhta_prahari.domain.constants import IncidentFields
from swachhta_prahari.domain.exceptions import (
    NotFoundError,
    ConflictError,
    InvalidStateTransitionError,
)

from tests.factories import make_camera, make_incident, make_user


def _apply(incident, fields):
    """Mimic the repository applying a field update"""
    incident.status = fields.get(IncidentFields.STATUS, incident.status)
    incident.response.assigned_to = fields.get(IncidentFields.ASSIGNED_TO, incident.response.assigned_to)
    incident.response.resolved_by = fields.get(IncidentFields.RESOLVED_BY, incident.response.resolved_by)
    incident.response.resolved_at = fields.get(IncidentFields.RESOLVED_AT, incident.response.resolved_at)
    incident.version += 1
    return incident


class TestUpdateIncidentStatusUseCase:
    """Tests for UpdateIncidentStatusUseCase"""

    @pytest.mark.asyncio
    async def test_resolve_records_resolver(self, broadcaster):
        incident = make_incident(status="in_progress")
        repo = AsyncMock()
        repo.find_by_id.return_value = incident
        repo.update.side_effect = lambda _id, fields, expected: _apply(incident, fields)

        result = await UpdateIncidentStatusUseCase(repo, broadcaster).execute(
            incident.incident_id, IncidentStatusUpdateRequest(status="resolved", action_taken="Cleared"), "usr-9"
        )

        assert result.status == "resolved"
        assert result.response.resolved_by == "usr-9"
        assert result.response.resolved_at is not None
        fields = repo.update.call_args.args[1]
        assert fields[IncidentFields.ACTION_TAKEN] == "Cleared"
        broadcaster.broadcast_incident.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_in_progress_assigns_actor_when_unassigned(self, broadcaster):
        incident = make_incident()
        repo = AsyncMock()
        repo.find_by_id.return_value = incident
        repo.update.side_effect = lambda _id, fields, expected: _apply(incident, fields)

        result = await UpdateIncidentStatusUseCase(repo, broadcaster).execute(
            incident.id, IncidentStatusUpdateRequest(status="in_progress"), "usr-3"
        )

        assert result.response.assigned_to == "usr-3"

    @pytest.mark.asyncio
    async def test_in_progress_replaces_earlier_assignee(self, broadcaster):
        incident = make_incident(status="pending")
        incident.response.assigned_to = "usr-old"
        incident.response.assigned_at = datetime(2025, 1, 9, 8, 0, 0)
        repo = AsyncMock()
        repo.find_by_id.return_value = incident
        repo.update.side_effect = lambda _id, fields, expected: _apply(incident, fields)

        result = await UpdateIncidentStatusUseCase(repo, broadcaster).execute(
            incident.id, IncidentStatusUpdateRequest(status="in_progress"), "usr-new"
        )

        fields = repo.update.call_args.args[1]
        assert fields[IncidentFields.ASSIGNED_TO] == "usr-new"
        assert fields[IncidentFields.ASSIGNED_AT] > datetime(2025, 1, 9, 8, 0, 0)
        assert result.response.assigned_to == "usr-new"

    @pytest.mark.asyncio
    async def test_false_positive_is_final(self, broadcaster):
        repo = AsyncMock()
        repo.find_by_id.return_value = make_incident(status="false_positive")
        with pytest.raises(InvalidStateTransitionError):
            await UpdateIncidentStatusUseCase(repo, broadcaster).execute(
                "INC-1-0001", IncidentStatusUpdateRequest(status="resolved"), "usr-1"
            )
        repo.update.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_stale_version_conflicts(self, broadcaster):
        repo = AsyncMock()
        repo.find_by_id.return_value = make_incident(version=3)
        repo.update.return_value = None
        with pytest.raises(ConflictError):
            await UpdateIncidentStatusUseCase(repo, broadcaster).execute(
                "INC-1-0001", IncidentStatusUpdateRequest(status="pending", expected_version=2), "usr-1"
            )
        assert repo.update.call_args.args[2] == 2

    @pytest.mark.asyncio
    async def test_missing_incident(self, broadcaster):
        repo = AsyncMock()
        repo.find_by_id.return_value = None
        with pytest.raises(NotFoundError):
            await UpdateIncidentStatusUseCase(repo, broadcaster).execute(
                "INC-404", IncidentStatusUpdateRequest(status="pending"), "usr-1"
            )


class TestAssignIncidentUseCase:
    """Tests for AssignIncidentUseCase"""

    @pytest.mark.asyncio
    async def test_assign_moves_to_in_progress(self, broadcaster):
        incident = make_incident()
        incident_repo, user_repo = AsyncMock(), AsyncMock()
        user_repo.find_by_id.return_value = make_user("usr-7")
        incident_repo.find_by_id.return_value = incident
        incident_repo.update.side_effect = lambda _id, fields, expected: _apply(incident, fields)

        result = await AssignIncidentUseCase(incident_repo, user_repo, broadcaster).execute(
            incident.incident_id, IncidentAssignRequest(assignee_id="usr-7"), "usr-admin"
        )

        assert result.status == "in_progress"
        assert result.response.assigned_to == "usr-7"

    @pytest.mark.asyncio
    async def test_unknown_assignee(self, broadcaster):
        user_repo = AsyncMock()
        user_repo.find_by_id.return_value = None
        with pytest.raises(NotFoundError, match="Assignee not found"):
            await AssignIncidentUseCase(AsyncMock(), user_repo, broadcaster).execute(
                "INC-1", IncidentAssignRequest(assignee_id="ghost"), "usr-admin"
            )


class TestCreateIncidentUseCase:
    """Tests for manual incident creation"""

    @pytest.mark.asyncio
    async def test_allocate_incident_id_uses_sequence(self):
        sequences = AsyncMock()
        sequences.next_value.side_effect = [1, 2]
        now = datetime(2025, 1, 1)
        first, _ = await allocate_incident_id(sequences, now)
        second, _ = await allocate_incident_id(sequences, now)
        assert first < second

    @pytest.mark.asyncio
    async def test_unknown_camera(self, broadcaster):
        camera_repo = AsyncMock()
        camera_repo.find_by_camera_id.return_value = None
        request = IncidentCreateRequest(
            type="overflow",
            severity="medium",
            camera_id="CAM-404",
            description="Bin overflowing near gate",
            ai_detection={"confidence": 0.9},
        )
        with pytest.raises(NotFoundError):
            await CreateIncidentUseCase(AsyncMock(), camera_repo, AsyncMock(), broadcaster).execute(request)

    @pytest.mark.asyncio
    async def test_creates_detected_incident(self, broadcaster):
        camera_repo, incident_repo, sequences = AsyncMock(), AsyncMock(), AsyncMock()
        camera_repo.find_by_camera_id.return_value = make_camera()
        sequences.next_value.return_value = 5

        def _save(incident):
            incident.id = "64b000000000000000000055"
            return incident

        incident_repo.create.side_effect = _save
        request = IncidentCreateRequest(
            type="overflow",
            severity="high",
            camera_id="cam-001",
            description="Bin overflowing near gate",
            ai_detection={"confidence": 0.9},
        )

        result = await CreateIncidentUseCase(incident_repo, camera_repo, sequences, broadcaster).execute(request)

        assert result.status == "detected"
        assert result.incident_id.endswith("-0005")
        assert result.ai_detection.model_version == "manual"
        camera_repo.record_detection.assert_awaited_once()
        broadcaster.broadcast_incident.assert_awaited_once()
