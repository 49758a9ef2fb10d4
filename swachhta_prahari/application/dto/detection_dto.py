from datetime import datetime
from typing import Optional, List, Dict, Any

from pydantic import Field

from ...domain.constants import IncidentType, AISensitivity, Thresholds
from .base import ApiModel
from .incident_dto import BoundingBoxDto, EvidenceDto, IncidentLocationDto


class DetectionData(ApiModel):
    type: IncidentType
    confidence: float = Field(ge=0.0, le=1.0)
    bounding_box: Optional[BoundingBoxDto] = None
    model_version: Optional[str] = None


class DetectionWebhookRequest(ApiModel):
    """Detection reported by an edge model; parsed after shape validation"""
    camera_id: str
    detection: DetectionData
    timestamp: datetime
    location: Optional[IncidentLocationDto] = None
    evidence: Optional[EvidenceDto] = None
    idempotency_key: Optional[str] = Field(default=None, max_length=200)


class DetectionResult(ApiModel):
    processed: bool = True
    incident_created: bool
    duplicate: bool = False
    incident_id: Optional[str] = None
    severity: Optional[str] = None
    confidence: Optional[float] = None
    threshold: Optional[float] = None


class AIConfigUpdateRequest(ApiModel):
    """Apply to one camera when camera_id is given, otherwise to all cameras"""
    camera_id: Optional[str] = None
    enabled: Optional[bool] = None
    detection_types: Optional[List[IncidentType]] = None
    sensitivity: Optional[AISensitivity] = None
    confidence_threshold: Optional[float] = Field(
        default=None, ge=Thresholds.AI_CONFIDENCE_MIN, le=Thresholds.AI_CONFIDENCE_MAX
    )


class ModelStatusResponse(ApiModel):
    model_version: str
    status: str
    supported_types: List[str]
    default_confidence_threshold: float
    detections_today: int
    detections_this_week: int
    detections_this_month: int
    last_updated: datetime


class DetectionStatsResponse(ApiModel):
    time_range: str
    start_date: datetime
    end_date: datetime
    daily: List[Dict[str, Any]]
    summary: Dict[str, Any]
