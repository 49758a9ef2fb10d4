from .user_repository import UserRepository
from .camera_repository import CameraRepository
from .incident_repository import IncidentRepository, IncidentFilter
from .report_repository import ReportRepository
from .payout_repository import PayoutRepository
from .otp_repository import OtpRepository
from .sequence_repository import SequenceRepository

__all__ = [
    "UserRepository",
    "CameraRepository",
    "IncidentRepository",
    "IncidentFilter",
    "ReportRepository",
    "PayoutRepository",
    "OtpRepository",
    "SequenceRepository",
]
