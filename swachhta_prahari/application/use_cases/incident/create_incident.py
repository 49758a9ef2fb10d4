# Standard library imports
import logging
from datetime import datetime
from typing import Tuple

# Local application imports
from ....core.time_utils import utc_now, epoch_millis
from ....domain.repositories.camera_repository import CameraRepository
from ....domain.repositories.incident_repository import IncidentRepository
from ....domain.repositories.sequence_repository import SequenceRepository
from ....domain.models.incident import (
    Incident,
    IncidentLocation,
    AIDetection,
    BoundingBox,
    Evidence,
)
from ....domain.constants import CounterFields, IncidentStatus
from ....domain.exceptions import NotFoundError
from ....domain.services import format_incident_id
from ....infrastructure.notifications.incident_broadcaster import IncidentBroadcaster, IncidentEvents
from ...dto.incident_dto import IncidentCreateRequest, IncidentResponse

logger = logging.getLogger(__name__)


async def allocate_incident_id(sequence_repository: SequenceRepository, now: datetime) -> Tuple[str, int]:
    """Reserve the next sequence number and build the incident id from it"""
    sequence = await sequence_repository.next_value(CounterFields.INCIDENT_SEQUENCE)
    return format_incident_id(epoch_millis(now), sequence), sequence


class CreateIncidentUseCase:
    """Use case for manually recording an incident against a camera"""

    def __init__(
        self,
        incident_repository: IncidentRepository,
        camera_repository: CameraRepository,
        sequence_repository: SequenceRepository,
        broadcaster: IncidentBroadcaster,
    ) -> None:
        self.incident_repository = incident_repository
        self.camera_repository = camera_repository
        self.sequence_repository = sequence_repository
        self.broadcaster = broadcaster

    async def execute(self, request: IncidentCreateRequest) -> IncidentResponse:
        """
        Create a new incident in the detected state

        Raises:
            NotFoundError: If the referenced camera does not exist
        """
        camera = await self.camera_repository.find_by_camera_id(request.camera_id)
        if camera is None:
            raise NotFoundError("Camera not found")

        now = utc_now()
        incident_id, sequence = await allocate_incident_id(self.sequence_repository, now)

        location = request.location
        detection = request.ai_detection
        box = detection.bounding_box
        incident = Incident(
            id=None,
            incident_id=incident_id,
            sequence=sequence,
            type=request.type.value,
            severity=request.severity.value,
            status=IncidentStatus.DETECTED.value,
            camera_id=camera.camera_id,
            camera_name=camera.name,
            location=IncidentLocation(
                zone=location.zone.value if location and location.zone else camera.location.zone,
                specific=(location.specific if location else "") or camera.location.position,
                latitude=location.latitude if location else None,
                longitude=location.longitude if location else None,
            ),
            description=request.description,
            ai_detection=AIDetection(
                confidence=detection.confidence,
                model_version=detection.model_version or "manual",
                bounding_box=BoundingBox(
                    x=box.x, y=box.y, width=box.width, height=box.height
                ) if box else None,
                processed_at=detection.processed_at or now,
            ),
            evidence=Evidence(
                images=list(request.evidence.images), videos=list(request.evidence.videos)
            ) if request.evidence else Evidence(),
            created_at=now,
        )

        saved = await self.incident_repository.create(incident)
        await self.camera_repository.record_detection(camera.camera_id, now)
        await self.broadcaster.broadcast_incident(IncidentEvents.NEW_INCIDENT, saved)

        logger.info(f"New incident created: {saved.incident_id} from camera: {camera.camera_id}")
        return IncidentResponse.from_domain(saved)
