# Standard library imports
from typing import List, Tuple

# Local application imports
from ....domain.repositories.incident_repository import IncidentRepository, IncidentFilter
from ....domain.constants import IncidentFields
from ...dto.incident_dto import IncidentResponse
from ...dto.common_dto import PaginationMeta

# Public sort keys mapped to stored field names
SORTABLE_FIELDS = {
    "createdAt": IncidentFields.CREATED_AT,
    "updatedAt": IncidentFields.UPDATED_AT,
    "severity": IncidentFields.SEVERITY,
    "status": IncidentFields.STATUS,
    "type": IncidentFields.TYPE,
    "confidence": IncidentFields.CONFIDENCE,
}


class ListIncidentsUseCase:
    """Use case for filtered, sorted and paginated incident listings"""

    def __init__(self, incident_repository: IncidentRepository) -> None:
        self.incident_repository = incident_repository

    async def execute(
        self,
        criteria: IncidentFilter,
        page: int = 1,
        limit: int = 20,
        sort_by: str = "createdAt",
        sort_order: str = "desc",
    ) -> Tuple[List[IncidentResponse], PaginationMeta]:
        sort_field = SORTABLE_FIELDS.get(sort_by, IncidentFields.CREATED_AT)
        total, incidents = await self.incident_repository.list(
            criteria,
            skip=(page - 1) * limit,
            limit=limit,
            sort_by=sort_field,
            descending=sort_order != "asc",
        )
        return (
            [IncidentResponse.from_domain(incident) for incident in incidents],
            PaginationMeta.build(page, limit, total),
        )
