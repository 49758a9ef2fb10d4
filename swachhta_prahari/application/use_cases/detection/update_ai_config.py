# Standard library imports
import logging
from typing import Any, Dict

# Local application imports
from ....domain.repositories.camera_repository import CameraRepository
from ....domain.exceptions import NotFoundError, ValidationFailedError
from ...dto.detection_dto import AIConfigUpdateRequest

logger = logging.getLogger(__name__)


class UpdateAIConfigUseCase:
    """Update detection settings on one camera, or on every camera when no id is given"""

    def __init__(self, camera_repository: CameraRepository) -> None:
        self.camera_repository = camera_repository

    async def execute(self, request: AIConfigUpdateRequest, user_id: str) -> Dict[str, Any]:
        config = request.model_dump(exclude_none=True, exclude={"camera_id"}, mode="json")
        if not config:
            raise ValidationFailedError("No AI configuration fields provided")

        if request.camera_id:
            camera = await self.camera_repository.find_by_camera_id(request.camera_id)
            if camera is None:
                raise NotFoundError("Camera not found")

        modified = await self.camera_repository.update_ai_config(request.camera_id, config)
        logger.info(f"AI configuration updated for {modified} cameras by user: {user_id}")
        return {"modifiedCount": modified, "configuration": request.model_dump(
            by_alias=True, exclude_none=True, exclude={"camera_id"}, mode="json"
        )}
