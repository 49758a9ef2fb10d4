from .user import User
from .camera import (
    Camera,
    CameraLocation,
    Coordinates,
    AIConfig,
    CameraStatistics,
    CameraMaintenance,
    UploadedVideo,
)
from .incident import (
    Incident,
    IncidentLocation,
    AIDetection,
    BoundingBox,
    Evidence,
    IncidentResponse,
)
from .report import Report, ReportPeriod, ReportFileInfo, DeliveryStatus
from .payout import Payout
from .one_time_code import OneTimeCode

__all__ = [
    "User",
    "Camera",
    "CameraLocation",
    "Coordinates",
    "AIConfig",
    "CameraStatistics",
    "CameraMaintenance",
    "UploadedVideo",
    "Incident",
    "IncidentLocation",
    "AIDetection",
    "BoundingBox",
    "Evidence",
    "IncidentResponse",
    "Report",
    "ReportPeriod",
    "ReportFileInfo",
    "DeliveryStatus",
    "Payout",
    "OneTimeCode",
]
