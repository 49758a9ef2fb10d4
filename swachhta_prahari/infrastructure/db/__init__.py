from .mongo_user_repository import MongoUserRepository
from .mongo_camera_repository import MongoCameraRepository
from .mongo_incident_repository import MongoIncidentRepository
from .mongo_report_repository import MongoReportRepository
from .mongo_payout_repository import MongoPayoutRepository
from .mongo_otp_repository import MongoOtpRepository
from .mongo_sequence_repository import MongoSequenceRepository

__all__ = [
    "MongoUserRepository",
    "MongoCameraRepository",
    "MongoIncidentRepository",
    "MongoReportRepository",
    "MongoPayoutRepository",
    "MongoOtpRepository",
    "MongoSequenceRepository",
]
