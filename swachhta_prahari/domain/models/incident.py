# Standard library imports
from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional, List

# Local application imports
from ..constants.enums import IncidentType, Severity, IncidentStatus


@dataclass
class BoundingBox:
    x: float
    y: float
    width: float
    height: float


@dataclass
class IncidentLocation:
    zone: Optional[str] = None
    specific: str = ""
    latitude: Optional[float] = None
    longitude: Optional[float] = None


@dataclass
class AIDetection:
    confidence: float
    model_version: str = "unknown"
    bounding_box: Optional[BoundingBox] = None
    processed_at: Optional[datetime] = None

    def __post_init__(self) -> None:
        if not (0.0 <= self.confidence <= 1.0):
            raise ValueError("Confidence must be between 0 and 1")


@dataclass
class Evidence:
    images: List[str] = field(default_factory=list)
    videos: List[str] = field(default_factory=list)


@dataclass
class IncidentResponse:
    """Workflow data filled in as the incident is handled"""
    assigned_to: Optional[str] = None
    assigned_at: Optional[datetime] = None
    action_taken: Optional[str] = None
    resolved_at: Optional[datetime] = None
    resolved_by: Optional[str] = None
    notes: Optional[str] = None


@dataclass
class Incident:
    """
    Pure domain model for an Incident entity.

    ``incident_id`` is the human-facing identifier; ``id`` is the storage id.
    ``version`` increases by one on every persisted update.
    """
    id: Optional[str]
    incident_id: str
    type: str
    severity: str
    camera_id: str
    ai_detection: AIDetection
    status: str = IncidentStatus.DETECTED.value
    camera_name: Optional[str] = None
    location: IncidentLocation = field(default_factory=IncidentLocation)
    description: str = ""
    evidence: Evidence = field(default_factory=Evidence)
    response: IncidentResponse = field(default_factory=IncidentResponse)
    report_included: bool = False
    idempotency_key: Optional[str] = None
    sequence: Optional[int] = None
    version: int = 0
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def __post_init__(self) -> None:
        """Business validations"""
        if self.type not in {t.value for t in IncidentType}:
            raise ValueError(f"Invalid incident type: {self.type}")
        if self.severity not in {s.value for s in Severity}:
            raise ValueError(f"Invalid severity: {self.severity}")
        if self.status not in {s.value for s in IncidentStatus}:
            raise ValueError(f"Invalid incident status: {self.status}")
        if not self.camera_id:
            raise ValueError("Camera ID is required")

    @property
    def is_resolved(self) -> bool:
        return self.status == IncidentStatus.RESOLVED.value

    @property
    def response_time_minutes(self) -> Optional[float]:
        """Minutes between detection and resolution, when resolved"""
        if not self.created_at or not self.response.resolved_at:
            return None
        return (self.response.resolved_at - self.created_at).total_seconds() / 60.0
