# Standard library imports
from typing import List, Tuple

# Local application imports
from ....domain.repositories.camera_repository import CameraRepository
from ....domain.repositories.incident_repository import IncidentRepository, IncidentFilter
from ....domain.exceptions import NotFoundError
from ...dto.camera_dto import CameraResponse
from ...dto.incident_dto import IncidentResponse

RECENT_INCIDENT_LIMIT = 10


class GetCameraUseCase:
    """Use case for fetching one camera with its most recent incidents"""

    def __init__(self, camera_repository: CameraRepository, incident_repository: IncidentRepository) -> None:
        self.camera_repository = camera_repository
        self.incident_repository = incident_repository

    async def execute(self, camera_id: str) -> Tuple[CameraResponse, List[IncidentResponse]]:
        """
        Args:
            camera_id: Camera business ID

        Returns:
            Tuple of the camera and up to 10 recent incidents, newest first

        Raises:
            NotFoundError: If the camera does not exist
        """
        camera = await self.camera_repository.find_by_camera_id(camera_id)
        if camera is None:
            raise NotFoundError("Camera not found")

        recent = await self.incident_repository.find_matching(
            IncidentFilter(camera_id=camera.camera_id), limit=RECENT_INCIDENT_LIMIT
        )
        return CameraResponse.from_domain(camera), [IncidentResponse.from_domain(i) for i in recent]
