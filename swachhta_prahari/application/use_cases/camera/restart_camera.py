import logging

from ....core.time_utils import utc_now
from ....domain.repositories.camera_repository import CameraRepository
from ....domain.constants import CameraFields, CameraStatus
from ....domain.exceptions import NotFoundError
from ....infrastructure.notifications.incident_broadcaster import IncidentBroadcaster
from ...dto.camera_dto import CameraResponse

logger = logging.getLogger(__name__)


class RestartCameraUseCase:
    """Mark a camera online and stamp its last maintenance time"""

    def __init__(self, camera_repository: CameraRepository, broadcaster: IncidentBroadcaster) -> None:
        self.camera_repository = camera_repository
        self.broadcaster = broadcaster

    async def execute(self, camera_id: str, user_id: str) -> CameraResponse:
        camera = await self.camera_repository.update_fields(
            camera_id,
            {
                CameraFields.STATUS: CameraStatus.ONLINE.value,
                CameraFields.MAINTENANCE_LAST: utc_now(),
            },
        )
        if camera is None:
            raise NotFoundError("Camera not found")

        await self.broadcaster.broadcast_camera_status(camera.camera_id, camera.status, {"restarted": True})
        logger.info(f"Camera restarted: {camera.camera_id} by user: {user_id}")
        return CameraResponse.from_domain(camera)
