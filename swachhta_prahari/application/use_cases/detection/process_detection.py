# Standard library imports
import logging
from typing import Any, Mapping, Optional

# External package imports
from pydantic import ValidationError

# Local application imports
from ....core.config import get_settings
from ....core.time_utils import utc_now, to_naive_utc
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
from ....domain.constants import IncidentStatus, Thresholds
from ....domain.exceptions import ValidationFailedError, NotFoundError, ConflictError
from ....domain.services import (
    validate_detection_payload,
    is_above_threshold,
    determine_severity,
    describe_incident,
)
from ....infrastructure.notifications.incident_broadcaster import IncidentBroadcaster, IncidentEvents
from ...dto.detection_dto import DetectionWebhookRequest, DetectionResult
from ..incident.create_incident import allocate_incident_id

logger = logging.getLogger(__name__)


class ProcessDetectionUseCase:
    """
    Turn a detection reported by an edge model into an incident.

    Flow:
    1. Validate payload shape (400 with field errors)
    2. Short-circuit on a known idempotency key
    3. Resolve the camera (404)
    4. Drop detections below the camera's confidence threshold
    5. Score severity, persist the incident, bump camera counters
    6. Broadcast ai_detection
    """

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

    async def execute(self, payload: Mapping[str, Any]) -> DetectionResult:
        errors = validate_detection_payload(payload)
        if errors:
            raise ValidationFailedError("Invalid detection payload", errors)
        try:
            request = DetectionWebhookRequest.model_validate(payload)
        except ValidationError as e:
            raise ValidationFailedError(
                "Invalid detection payload",
                [f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in e.errors()],
            )

        duplicate = await self._find_duplicate(request.idempotency_key)
        if duplicate is not None:
            return duplicate

        camera = await self.camera_repository.find_by_camera_id(request.camera_id)
        if camera is None:
            raise NotFoundError(f"Camera not found: {request.camera_id}")

        detection = request.detection
        threshold = camera.ai_config.confidence_threshold or Thresholds.AI_CONFIDENCE_DEFAULT
        if not is_above_threshold(detection.confidence, threshold):
            logger.info(
                f"Detection below threshold: {detection.confidence} < {threshold} for camera {camera.camera_id}"
            )
            return DetectionResult(
                incident_created=False, confidence=detection.confidence, threshold=threshold
            )

        now = utc_now()
        incident_type = detection.type.value
        severity = determine_severity(incident_type, detection.confidence)
        incident_id, sequence = await allocate_incident_id(self.sequence_repository, now)
        location = request.location
        box = detection.bounding_box

        incident = Incident(
            id=None,
            incident_id=incident_id,
            sequence=sequence,
            type=incident_type,
            severity=severity,
            status=IncidentStatus.DETECTED.value,
            camera_id=camera.camera_id,
            camera_name=camera.name,
            location=IncidentLocation(
                zone=location.zone.value if location and location.zone else camera.location.zone,
                specific=(location.specific if location else "") or f"{camera.name} vicinity",
                latitude=location.latitude if location else None,
                longitude=location.longitude if location else None,
            ),
            description=describe_incident(incident_type, camera.name),
            ai_detection=AIDetection(
                confidence=detection.confidence,
                model_version=detection.model_version or get_settings().ai_model_version,
                bounding_box=BoundingBox(
                    x=box.x, y=box.y, width=box.width, height=box.height
                ) if box else None,
                processed_at=to_naive_utc(request.timestamp),
            ),
            evidence=Evidence(
                images=list(request.evidence.images), videos=list(request.evidence.videos)
            ) if request.evidence else Evidence(),
            idempotency_key=request.idempotency_key,
            created_at=now,
        )

        try:
            saved = await self.incident_repository.create(incident)
        except ConflictError:
            # Concurrent delivery with the same key won the insert
            duplicate = await self._find_duplicate(request.idempotency_key)
            if duplicate is None:
                raise
            return duplicate

        await self.camera_repository.record_detection(camera.camera_id, now)
        await self.broadcaster.broadcast_incident(IncidentEvents.AI_DETECTION, saved)

        logger.info(f"AI Detection processed: {saved.incident_id} from camera: {camera.camera_id}")
        return DetectionResult(
            incident_created=True,
            incident_id=saved.incident_id,
            severity=saved.severity,
            confidence=detection.confidence,
            threshold=threshold,
        )

    async def _find_duplicate(self, idempotency_key: Optional[str]) -> Optional[DetectionResult]:
        if not idempotency_key:
            return None
        existing = await self.incident_repository.find_by_idempotency_key(idempotency_key)
        if existing is None:
            return None
        logger.info(f"Duplicate detection delivery {idempotency_key} -> {existing.incident_id}")
        return DetectionResult(
            incident_created=False,
            duplicate=True,
            incident_id=existing.incident_id,
            severity=existing.severity,
            confidence=existing.ai_detection.confidence,
        )
