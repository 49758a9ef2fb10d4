# Standard library imports
import logging

# Local application imports
from ....domain.repositories.camera_repository import CameraRepository
from ....domain.models.camera import Camera, CameraLocation, Coordinates, AIConfig
from ....domain.exceptions import ValidationFailedError
from ...dto.camera_dto import CameraCreateRequest, CameraResponse

logger = logging.getLogger(__name__)


class CreateCameraUseCase:
    """Use case for registering a new camera"""

    def __init__(self, camera_repository: CameraRepository) -> None:
        self.camera_repository = camera_repository

    async def execute(self, request: CameraCreateRequest) -> CameraResponse:
        """
        Create a new camera

        Args:
            request: Camera creation request

        Returns:
            CameraResponse with created camera information

        Raises:
            ValidationFailedError: If a camera with this ID already exists
        """
        camera_id = request.camera_id.strip().upper()
        if await self.camera_repository.find_by_camera_id(camera_id) is not None:
            raise ValidationFailedError("Camera with this ID already exists")

        coordinates = request.location.coordinates
        ai_config = request.ai_config
        camera = Camera(
            id=None,
            camera_id=camera_id,
            name=request.name,
            location=CameraLocation(
                zone=request.location.zone.value,
                position=request.location.position,
                coordinates=Coordinates(
                    latitude=coordinates.latitude, longitude=coordinates.longitude
                ) if coordinates else None,
            ),
            rtsp_url=request.rtsp_url,
            status=request.status.value,
            specifications=request.specifications,
            ai_config=AIConfig(
                enabled=ai_config.enabled,
                detection_types=[t.value for t in ai_config.detection_types],
                sensitivity=ai_config.sensitivity.value,
                confidence_threshold=ai_config.confidence_threshold,
            ) if ai_config else AIConfig(),
        )

        saved_camera = await self.camera_repository.create(camera)
        logger.info(f"Camera added: {saved_camera.camera_id}")
        return CameraResponse.from_domain(saved_camera)
