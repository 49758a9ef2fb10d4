from datetime import datetime
from typing import Optional, List, Dict

from pydantic import Field

from ...domain.constants import IncidentType, Severity, IncidentStatus, Zone
from ...domain.models.incident import Incident
from .base import ApiModel


class BoundingBoxDto(ApiModel):
    x: float
    y: float
    width: float
    height: float


class IncidentLocationDto(ApiModel):
    zone: Optional[Zone] = None
    specific: str = ""
    latitude: Optional[float] = None
    longitude: Optional[float] = None


class AIDetectionDto(ApiModel):
    confidence: float = Field(ge=0.0, le=1.0)
    model_version: Optional[str] = None
    bounding_box: Optional[BoundingBoxDto] = None
    processed_at: Optional[datetime] = None


class EvidenceDto(ApiModel):
    images: List[str] = Field(default_factory=list)
    videos: List[str] = Field(default_factory=list)


class IncidentCreateRequest(ApiModel):
    """DTO for manual incident creation"""
    type: IncidentType
    severity: Severity
    camera_id: str = Field(min_length=1)
    location: Optional[IncidentLocationDto] = None
    description: str = Field(min_length=10, max_length=500)
    ai_detection: AIDetectionDto
    evidence: Optional[EvidenceDto] = None


class IncidentStatusUpdateRequest(ApiModel):
    status: IncidentStatus
    action_taken: Optional[str] = Field(default=None, max_length=500)
    notes: Optional[str] = Field(default=None, max_length=1000)
    expected_version: Optional[int] = Field(default=None, ge=0)


class IncidentAssignRequest(ApiModel):
    assignee_id: str = Field(min_length=1)
    expected_version: Optional[int] = Field(default=None, ge=0)


class IncidentCameraRef(ApiModel):
    camera_id: str
    name: Optional[str] = None


class IncidentResponseInfo(ApiModel):
    assigned_to: Optional[str] = None
    assigned_at: Optional[datetime] = None
    action_taken: Optional[str] = None
    resolved_at: Optional[datetime] = None
    resolved_by: Optional[str] = None
    notes: Optional[str] = None


class IncidentResponse(ApiModel):
    """DTO for incident response"""
    id: str
    incident_id: str
    type: str
    severity: str
    status: str
    camera: IncidentCameraRef
    location: IncidentLocationDto
    description: str
    ai_detection: AIDetectionDto
    evidence: EvidenceDto
    response: IncidentResponseInfo
    report_included: bool = False
    version: int = 0
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def from_domain(cls, incident: Incident) -> "IncidentResponse":
        box = incident.ai_detection.bounding_box
        return cls(
            id=incident.id or "",
            incident_id=incident.incident_id,
            type=incident.type,
            severity=incident.severity,
            status=incident.status,
            camera=IncidentCameraRef(camera_id=incident.camera_id, name=incident.camera_name),
            location=IncidentLocationDto(
                zone=incident.location.zone,
                specific=incident.location.specific,
                latitude=incident.location.latitude,
                longitude=incident.location.longitude,
            ),
            description=incident.description,
            ai_detection=AIDetectionDto(
                confidence=incident.ai_detection.confidence,
                model_version=incident.ai_detection.model_version,
                bounding_box=BoundingBoxDto(
                    x=box.x, y=box.y, width=box.width, height=box.height
                ) if box else None,
                processed_at=incident.ai_detection.processed_at,
            ),
            evidence=EvidenceDto(
                images=incident.evidence.images, videos=incident.evidence.videos
            ),
            response=IncidentResponseInfo(
                assigned_to=incident.response.assigned_to,
                assigned_at=incident.response.assigned_at,
                action_taken=incident.response.action_taken,
                resolved_at=incident.response.resolved_at,
                resolved_by=incident.response.resolved_by,
                notes=incident.response.notes,
            ),
            report_included=incident.report_included,
            version=incident.version,
            created_at=incident.created_at,
            updated_at=incident.updated_at,
        )


class IncidentStatsResponse(ApiModel):
    period: str
    start_date: datetime
    end_date: datetime
    total: int
    by_type: Dict[str, int]
    by_severity: Dict[str, int]
    by_status: Dict[str, int]
    average_response_minutes: float
