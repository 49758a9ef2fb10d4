# Standard library imports
from datetime import timedelta

# Local application imports
from ....core.time_utils import utc_now
from ....domain.repositories.camera_repository import CameraRepository
from ....domain.constants import CameraStatus
from ....domain.exceptions import NotFoundError
from ...dto.camera_dto import CameraHealthResponse

# A camera that is online but silent for this long is reported as degraded
STALE_DETECTION_AFTER = timedelta(hours=24)


class GetCameraHealthUseCase:
    """Health snapshot derived from stored camera status and statistics"""

    def __init__(self, camera_repository: CameraRepository) -> None:
        self.camera_repository = camera_repository

    async def execute(self, camera_id: str) -> CameraHealthResponse:
        camera = await self.camera_repository.find_by_camera_id(camera_id)
        if camera is None:
            raise NotFoundError("Camera not found")

        now = utc_now()
        last_detection = camera.statistics.last_detection
        minutes_since = (now - last_detection).total_seconds() / 60.0 if last_detection else None
        next_maintenance = camera.maintenance.next_maintenance
        maintenance_due = bool(next_maintenance and next_maintenance <= now)

        if camera.status != CameraStatus.ONLINE.value:
            health = camera.status
        elif maintenance_due or (last_detection and now - last_detection > STALE_DETECTION_AFTER):
            health = "degraded"
        else:
            health = "healthy"

        return CameraHealthResponse(
            camera_id=camera.camera_id,
            status=camera.status,
            health=health,
            uptime=camera.statistics.uptime,
            total_detections=camera.statistics.total_detections,
            last_detection=last_detection,
            minutes_since_last_detection=round(minutes_since, 1) if minutes_since is not None else None,
            last_maintenance=camera.maintenance.last_maintenance,
            next_maintenance=next_maintenance,
            maintenance_due=maintenance_due,
            ai_enabled=camera.ai_config.enabled,
            checked_at=now,
        )
