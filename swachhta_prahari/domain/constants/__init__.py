"""Constants for domain model field names and enumerations"""

from .user_fields import UserFields
from .camera_fields import CameraFields
from .incident_fields import IncidentFields, CounterFields
from .report_fields import ReportFields
from .payout_fields import PayoutFields
from .otp_fields import OtpFields
from .enums import (
    IncidentType,
    Severity,
    IncidentStatus,
    CameraStatus,
    UserRole,
    Zone,
    AISensitivity,
    ReportType,
    ReportFormat,
    PayoutStatus,
    OtpPurpose,
    MANAGER_ROLES,
    ACTIVE_INCIDENT_STATUSES,
    Thresholds,
)

__all__ = [
    "UserFields",
    "CameraFields",
    "IncidentFields",
    "CounterFields",
    "ReportFields",
    "PayoutFields",
    "OtpFields",
    "IncidentType",
    "Severity",
    "IncidentStatus",
    "CameraStatus",
    "UserRole",
    "Zone",
    "AISensitivity",
    "ReportType",
    "ReportFormat",
    "PayoutStatus",
    "OtpPurpose",
    "MANAGER_ROLES",
    "ACTIVE_INCIDENT_STATUSES",
    "Thresholds",
]
