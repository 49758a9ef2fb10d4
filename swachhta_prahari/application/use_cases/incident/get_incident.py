from ....domain.repositories.incident_repository import IncidentRepository
from ....domain.exceptions import NotFoundError
from ...dto.incident_dto import IncidentResponse


class GetIncidentUseCase:
    """Fetch one incident by storage id or incident id"""

    def __init__(self, incident_repository: IncidentRepository) -> None:
        self.incident_repository = incident_repository

    async def execute(self, incident_ref: str) -> IncidentResponse:
        incident = await self.incident_repository.find_by_id(incident_ref)
        if incident is None:
            raise NotFoundError("Incident not found")
        return IncidentResponse.from_domain(incident)
