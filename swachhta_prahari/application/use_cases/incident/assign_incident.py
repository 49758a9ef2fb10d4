# Standard library imports
import logging

# Local application imports
from ....core.time_utils import utc_now
from ....domain.repositories.incident_repository import IncidentRepository
from ....domain.repositories.user_repository import UserRepository
from ....domain.constants import IncidentFields, IncidentStatus
from ....domain.exceptions import NotFoundError, ConflictError
from ....domain.services import ensure_transition_allowed
from ....infrastructure.notifications.incident_broadcaster import IncidentBroadcaster, IncidentEvents
from ...dto.incident_dto import IncidentAssignRequest, IncidentResponse

logger = logging.getLogger(__name__)


class AssignIncidentUseCase:
    """Assign an incident to a user and move it to in_progress"""

    def __init__(
        self,
        incident_repository: IncidentRepository,
        user_repository: UserRepository,
        broadcaster: IncidentBroadcaster,
    ) -> None:
        self.incident_repository = incident_repository
        self.user_repository = user_repository
        self.broadcaster = broadcaster

    async def execute(self, incident_ref: str, request: IncidentAssignRequest, assigner_id: str) -> IncidentResponse:
        assignee = await self.user_repository.find_by_id(request.assignee_id)
        if assignee is None:
            raise NotFoundError("Assignee not found")

        incident = await self.incident_repository.find_by_id(incident_ref)
        if incident is None:
            raise NotFoundError("Incident not found")

        ensure_transition_allowed(incident.status, IncidentStatus.IN_PROGRESS.value)

        updated = await self.incident_repository.update(
            incident.id,
            {
                IncidentFields.STATUS: IncidentStatus.IN_PROGRESS.value,
                IncidentFields.ASSIGNED_TO: assignee.id,
                IncidentFields.ASSIGNED_AT: utc_now(),
            },
            request.expected_version,
        )
        if updated is None:
            if request.expected_version is not None:
                raise ConflictError("Incident was modified by another request; reload and retry")
            raise NotFoundError("Incident not found")

        await self.broadcaster.broadcast_incident(IncidentEvents.INCIDENT_ASSIGNED, updated)
        logger.info(f"Incident assigned: {updated.incident_id} to {assignee.username} by {assigner_id}")
        return IncidentResponse.from_domain(updated)
