"""Enumerated values shared across the domain"""

from enum import Enum


class IncidentType(str, Enum):
    ILLEGAL_DUMPING = "illegal_dumping"
    OVERFLOW = "overflow"
    DRAIN_CLOGGING = "drain_clogging"
    CLEANLINESS_VIOLATION = "cleanliness_violation"


class Severity(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


class IncidentStatus(str, Enum):
    DETECTED = "detected"
    PENDING = "pending"
    IN_PROGRESS = "in_progress"
    RESOLVED = "resolved"
    FALSE_POSITIVE = "false_positive"


class CameraStatus(str, Enum):
    ONLINE = "online"
    OFFLINE = "offline"
    MAINTENANCE = "maintenance"


class UserRole(str, Enum):
    ADMIN = "admin"
    PAYROLL = "payroll"
    CAMERA = "camera"
    REPORTING = "reporting"
    AI = "ai"
    ANALYST = "analyst"


class Zone(str, Enum):
    A = "A"
    B = "B"
    C = "C"
    D = "D"


class AISensitivity(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class ReportType(str, Enum):
    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"
    CUSTOM = "custom"
    INCIDENT_SUMMARY = "incident_summary"


class ReportFormat(str, Enum):
    PDF = "pdf"
    EXCEL = "excel"
    CSV = "csv"
    JSON = "json"


class PayoutStatus(str, Enum):
    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"


class OtpPurpose(str, Enum):
    SIGNUP = "signup"
    LOGIN = "login"
    FORGOT_PASSWORD = "forgot-password"


# Roles listed on the manager administration screens
MANAGER_ROLES = (
    UserRole.PAYROLL,
    UserRole.CAMERA,
    UserRole.REPORTING,
    UserRole.AI,
    UserRole.ANALYST,
)

ACTIVE_INCIDENT_STATUSES = (
    IncidentStatus.DETECTED,
    IncidentStatus.PENDING,
    IncidentStatus.IN_PROGRESS,
)


class Thresholds:
    """Detection confidence limits"""
    AI_CONFIDENCE_MIN = 0.5
    AI_CONFIDENCE_MAX = 0.99
    AI_CONFIDENCE_DEFAULT = 0.85
