# Standard library imports
import logging
from typing import Any, Dict

# Local application imports
from ....core.time_utils import utc_now
from ....domain.repositories.incident_repository import IncidentRepository
from ....domain.constants import IncidentFields, IncidentStatus
from ....domain.exceptions import NotFoundError, ConflictError
from ....domain.services import ensure_transition_allowed
from ....infrastructure.notifications.incident_broadcaster import IncidentBroadcaster, IncidentEvents
from ...dto.incident_dto import IncidentStatusUpdateRequest, IncidentResponse

logger = logging.getLogger(__name__)


class UpdateIncidentStatusUseCase:
    """
    Move an incident to a new status.

    in_progress records the acting user as assignee along with the time,
    replacing any earlier assignee; resolved records who resolved it and
    when. When the request carries an expected version the write only
    applies to that version.
    """

    def __init__(self, incident_repository: IncidentRepository, broadcaster: IncidentBroadcaster) -> None:
        self.incident_repository = incident_repository
        self.broadcaster = broadcaster

    async def execute(
        self, incident_ref: str, request: IncidentStatusUpdateRequest, user_id: str
    ) -> IncidentResponse:
        """
        Raises:
            NotFoundError: Incident does not exist
            InvalidStateTransitionError: Incident is in a terminal status
            ConflictError: expected_version no longer matches
        """
        incident = await self.incident_repository.find_by_id(incident_ref)
        if incident is None:
            raise NotFoundError("Incident not found")

        status = request.status.value
        ensure_transition_allowed(incident.status, status)

        now = utc_now()
        fields: Dict[str, Any] = {IncidentFields.STATUS: status}
        if status == IncidentStatus.IN_PROGRESS.value:
            fields[IncidentFields.ASSIGNED_TO] = user_id
            fields[IncidentFields.ASSIGNED_AT] = now
        if status == IncidentStatus.RESOLVED.value:
            fields[IncidentFields.RESOLVED_BY] = user_id
            fields[IncidentFields.RESOLVED_AT] = now
            if request.action_taken:
                fields[IncidentFields.ACTION_TAKEN] = request.action_taken
        if request.notes:
            fields[IncidentFields.NOTES] = request.notes

        updated = await self.incident_repository.update(incident.id, fields, request.expected_version)
        if updated is None:
            if request.expected_version is not None:
                raise ConflictError("Incident was modified by another request; reload and retry")
            raise NotFoundError("Incident not found")

        await self.broadcaster.broadcast_incident(IncidentEvents.INCIDENT_UPDATED, updated)
        logger.info(f"Incident updated: {updated.incident_id} to status: {status} by user: {user_id}")
        return IncidentResponse.from_domain(updated)
