from .base import ApiModel
from .common_dto import PaginationMeta
from .user_dto import UserResponse, ManagerUpdateRequest
from .auth_dto import (
    SignupRequest,
    LoginRequest,
    TokenPair,
    AuthResponse,
    OtpRequest,
    OtpVerifyRequest,
    UpdatePasswordRequest,
    RefreshTokenRequest,
)
from .camera_dto import (
    CameraCreateRequest,
    CameraUpdateRequest,
    CameraResponse,
    CameraHealthResponse,
    UploadedVideoResponse,
)
from .incident_dto import (
    IncidentCreateRequest,
    IncidentStatusUpdateRequest,
    IncidentAssignRequest,
    IncidentResponse,
    IncidentStatsResponse,
)
from .detection_dto import (
    DetectionWebhookRequest,
    DetectionResult,
    AIConfigUpdateRequest,
    ModelStatusResponse,
    DetectionStatsResponse,
)
from .payout_dto import PayoutUpdateRequest, PayoutResponse
from .report_dto import ReportGenerateRequest, ReportResponse, ReportDownload
from .analytics_dto import DashboardResponse, AnalyticsOverviewResponse, LiveData

__all__ = [
    "ApiModel",
    "PaginationMeta",
    "UserResponse",
    "ManagerUpdateRequest",
    "SignupRequest",
    "LoginRequest",
    "TokenPair",
    "AuthResponse",
    "OtpRequest",
    "OtpVerifyRequest",
    "UpdatePasswordRequest",
    "RefreshTokenRequest",
    "CameraCreateRequest",
    "CameraUpdateRequest",
    "CameraResponse",
    "CameraHealthResponse",
    "UploadedVideoResponse",
    "IncidentCreateRequest",
    "IncidentStatusUpdateRequest",
    "IncidentAssignRequest",
    "IncidentResponse",
    "IncidentStatsResponse",
    "DetectionWebhookRequest",
    "DetectionResult",
    "AIConfigUpdateRequest",
    "ModelStatusResponse",
    "DetectionStatsResponse",
    "PayoutUpdateRequest",
    "PayoutResponse",
    "ReportGenerateRequest",
    "ReportResponse",
    "ReportDownload",
    "DashboardResponse",
    "AnalyticsOverviewResponse",
    "LiveData",
]
