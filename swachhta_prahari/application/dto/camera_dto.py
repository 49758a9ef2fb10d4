from datetime import datetime
from typing import Optional, List, Dict, Any

from pydantic import Field

from ...domain.constants import Zone, CameraStatus, AISensitivity, IncidentType, Thresholds
from ...domain.models.camera import Camera, UploadedVideo
from .base import ApiModel


class CoordinatesDto(ApiModel):
    latitude: Optional[float] = Field(default=None, ge=-90, le=90)
    longitude: Optional[float] = Field(default=None, ge=-180, le=180)


class CameraLocationDto(ApiModel):
    zone: Zone
    position: str = ""
    coordinates: Optional[CoordinatesDto] = None


class AIConfigDto(ApiModel):
    enabled: bool = True
    detection_types: List[IncidentType] = Field(default_factory=lambda: list(IncidentType))
    sensitivity: AISensitivity = AISensitivity.MEDIUM
    confidence_threshold: float = Field(
        default=Thresholds.AI_CONFIDENCE_DEFAULT,
        ge=Thresholds.AI_CONFIDENCE_MIN,
        le=Thresholds.AI_CONFIDENCE_MAX,
    )


class CameraCreateRequest(ApiModel):
    """DTO for camera creation request"""
    camera_id: str = Field(min_length=1, max_length=50)
    name: str = Field(min_length=1, max_length=100)
    location: CameraLocationDto
    rtsp_url: str = Field(min_length=1)
    status: CameraStatus = CameraStatus.OFFLINE
    specifications: Dict[str, Any] = Field(default_factory=dict)
    ai_config: Optional[AIConfigDto] = None


class CameraLocationUpdate(ApiModel):
    zone: Optional[Zone] = None
    position: Optional[str] = None


class AIConfigUpdate(ApiModel):
    enabled: Optional[bool] = None
    detection_types: Optional[List[IncidentType]] = None
    sensitivity: Optional[AISensitivity] = None
    confidence_threshold: Optional[float] = Field(
        default=None, ge=Thresholds.AI_CONFIDENCE_MIN, le=Thresholds.AI_CONFIDENCE_MAX
    )


class CameraUpdateRequest(ApiModel):
    """Partial camera update; omitted fields are left unchanged"""
    name: Optional[str] = Field(default=None, min_length=1, max_length=100)
    rtsp_url: Optional[str] = Field(default=None, min_length=1)
    status: Optional[CameraStatus] = None
    location: Optional[CameraLocationUpdate] = None
    ai_config: Optional[AIConfigUpdate] = None


class UploadedVideoResponse(ApiModel):
    url: str
    public_id: str
    format: Optional[str] = None
    duration: Optional[float] = None
    bytes: Optional[int] = None
    uploaded_at: Optional[datetime] = None

    @classmethod
    def from_domain(cls, video: UploadedVideo) -> "UploadedVideoResponse":
        return cls(
            url=video.url,
            public_id=video.public_id,
            format=video.format,
            duration=video.duration,
            bytes=video.bytes,
            uploaded_at=video.uploaded_at,
        )


class CameraStatisticsResponse(ApiModel):
    total_detections: int = 0
    last_detection: Optional[datetime] = None
    uptime: float = 0.0
    average_accuracy: float = 0.0


class CameraMaintenanceResponse(ApiModel):
    last_maintenance: Optional[datetime] = None
    next_maintenance: Optional[datetime] = None
    maintenance_notes: str = ""


class CameraResponse(ApiModel):
    """DTO for camera response"""
    id: Optional[str] = None
    camera_id: str
    name: str
    location: CameraLocationDto
    rtsp_url: str
    status: str
    specifications: Dict[str, Any] = Field(default_factory=dict)
    ai_config: AIConfigDto
    statistics: CameraStatisticsResponse
    maintenance: CameraMaintenanceResponse
    uploaded_videos: List[UploadedVideoResponse] = Field(default_factory=list)
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def from_domain(cls, camera: Camera) -> "CameraResponse":
        coordinates = camera.location.coordinates
        return cls(
            id=camera.id,
            camera_id=camera.camera_id,
            name=camera.name,
            location=CameraLocationDto(
                zone=camera.location.zone,
                position=camera.location.position,
                coordinates=CoordinatesDto(
                    latitude=coordinates.latitude, longitude=coordinates.longitude
                ) if coordinates else None,
            ),
            rtsp_url=camera.rtsp_url,
            status=camera.status,
            specifications=camera.specifications,
            ai_config=AIConfigDto(
                enabled=camera.ai_config.enabled,
                detection_types=camera.ai_config.detection_types,
                sensitivity=camera.ai_config.sensitivity,
                confidence_threshold=camera.ai_config.confidence_threshold,
            ),
            statistics=CameraStatisticsResponse(
                total_detections=camera.statistics.total_detections,
                last_detection=camera.statistics.last_detection,
                uptime=camera.statistics.uptime,
                average_accuracy=camera.statistics.average_accuracy,
            ),
            maintenance=CameraMaintenanceResponse(
                last_maintenance=camera.maintenance.last_maintenance,
                next_maintenance=camera.maintenance.next_maintenance,
                maintenance_notes=camera.maintenance.maintenance_notes,
            ),
            uploaded_videos=[UploadedVideoResponse.from_domain(v) for v in camera.uploaded_videos],
            created_at=camera.created_at,
            updated_at=camera.updated_at,
        )


class CameraHealthResponse(ApiModel):
    camera_id: str
    status: str
    health: str
    uptime: float
    total_detections: int
    last_detection: Optional[datetime] = None
    minutes_since_last_detection: Optional[float] = None
    last_maintenance: Optional[datetime] = None
    next_maintenance: Optional[datetime] = None
    maintenance_due: bool = False
    ai_enabled: bool = True
    checked_at: datetime
