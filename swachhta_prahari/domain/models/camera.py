# Standard library imports
from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional, List, Dict, Any

# Local application imports
from ..constants.enums import CameraStatus, Zone, AISensitivity, IncidentType, Thresholds


@dataclass
class Coordinates:
    latitude: Optional[float] = None
    longitude: Optional[float] = None


@dataclass
class CameraLocation:
    zone: str
    position: str = ""
    coordinates: Optional[Coordinates] = None

    def __post_init__(self) -> None:
        if self.zone not in {z.value for z in Zone}:
            raise ValueError(f"Invalid zone: {self.zone}")


@dataclass
class AIConfig:
    """Per-camera detection settings"""
    enabled: bool = True
    detection_types: List[str] = field(default_factory=lambda: [t.value for t in IncidentType])
    sensitivity: str = AISensitivity.MEDIUM.value
    confidence_threshold: float = Thresholds.AI_CONFIDENCE_DEFAULT

    def __post_init__(self) -> None:
        if self.sensitivity not in {s.value for s in AISensitivity}:
            raise ValueError(f"Invalid sensitivity: {self.sensitivity}")
        if not (Thresholds.AI_CONFIDENCE_MIN <= self.confidence_threshold <= Thresholds.AI_CONFIDENCE_MAX):
            raise ValueError(
                f"Confidence threshold must be between {Thresholds.AI_CONFIDENCE_MIN} "
                f"and {Thresholds.AI_CONFIDENCE_MAX}"
            )


@dataclass
class CameraStatistics:
    total_detections: int = 0
    last_detection: Optional[datetime] = None
    uptime: float = 0.0
    average_accuracy: float = 0.0


@dataclass
class CameraMaintenance:
    last_maintenance: Optional[datetime] = None
    next_maintenance: Optional[datetime] = None
    maintenance_notes: str = ""


@dataclass
class UploadedVideo:
    """Metadata for a video stored by the remote video storage service"""
    url: str
    public_id: str
    format: Optional[str] = None
    duration: Optional[float] = None
    bytes: Optional[int] = None
    uploaded_at: Optional[datetime] = None


@dataclass
class Camera:
    """
    Pure domain model for Camera entity - no external dependencies.

    A camera is addressed by its business ``camera_id`` (stored uppercase),
    not by the storage id. Incidents reference cameras through that value.
    """
    id: Optional[str]
    camera_id: str
    name: str
    location: CameraLocation
    rtsp_url: str
    status: str = CameraStatus.OFFLINE.value
    specifications: Dict[str, Any] = field(default_factory=dict)
    ai_config: AIConfig = field(default_factory=AIConfig)
    statistics: CameraStatistics = field(default_factory=CameraStatistics)
    maintenance: CameraMaintenance = field(default_factory=CameraMaintenance)
    uploaded_videos: List[UploadedVideo] = field(default_factory=list)
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def __post_init__(self) -> None:
        """Business validations"""
        if not self.camera_id or not self.camera_id.strip():
            raise ValueError("Camera ID is required")
        self.camera_id = self.camera_id.strip().upper()
        if not self.name or not (1 <= len(self.name.strip()) <= 100):
            raise ValueError("Camera name must be between 1 and 100 characters")
        if not self.rtsp_url or not self.rtsp_url.strip():
            raise ValueError("RTSP URL is required")
        if self.status not in {s.value for s in CameraStatus}:
            raise ValueError(f"Invalid camera status: {self.status}")
