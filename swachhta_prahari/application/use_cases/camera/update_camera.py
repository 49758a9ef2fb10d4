# Standard library imports
import logging
from typing import Any, Dict

# Local application imports
from ....domain.repositories.camera_repository import CameraRepository
from ....domain.constants import CameraFields
from ....domain.exceptions import NotFoundError, ValidationFailedError
from ....infrastructure.notifications.incident_broadcaster import IncidentBroadcaster
from ...dto.camera_dto import CameraUpdateRequest, CameraResponse

logger = logging.getLogger(__name__)


def _build_update(request: CameraUpdateRequest) -> Dict[str, Any]:
    fields: Dict[str, Any] = {}
    if request.name is not None:
        fields[CameraFields.NAME] = request.name.strip()
    if request.rtsp_url is not None:
        fields[CameraFields.RTSP_URL] = request.rtsp_url
    if request.status is not None:
        fields[CameraFields.STATUS] = request.status.value
    if request.location is not None:
        if request.location.zone is not None:
            fields[CameraFields.LOCATION_ZONE] = request.location.zone.value
        if request.location.position is not None:
            fields[f"{CameraFields.LOCATION}.position"] = request.location.position
    if request.ai_config is not None:
        for key, value in request.ai_config.model_dump(exclude_none=True, mode="json").items():
            fields[f"{CameraFields.AI_CONFIG}.{key}"] = value
    return fields


class UpdateCameraUseCase:
    """Partial camera update; a status change is broadcast to subscribers"""

    def __init__(self, camera_repository: CameraRepository, broadcaster: IncidentBroadcaster) -> None:
        self.camera_repository = camera_repository
        self.broadcaster = broadcaster

    async def execute(self, camera_id: str, request: CameraUpdateRequest, user_id: str) -> CameraResponse:
        existing = await self.camera_repository.find_by_camera_id(camera_id)
        if existing is None:
            raise NotFoundError("Camera not found")

        fields = _build_update(request)
        if not fields:
            raise ValidationFailedError("No updatable fields provided")

        camera = await self.camera_repository.update_fields(existing.camera_id, fields)
        if camera is None:
            raise NotFoundError("Camera not found")

        if camera.status != existing.status:
            await self.broadcaster.broadcast_camera_status(
                camera.camera_id, camera.status, {"previousStatus": existing.status}
            )

        logger.info(f"Camera updated: {camera.camera_id} by user: {user_id}")
        return CameraResponse.from_domain(camera)
