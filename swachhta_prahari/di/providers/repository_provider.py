from typing import TYPE_CHECKING
from ...domain.repositories import (
    UserRepository,
    CameraRepository,
    IncidentRepository,
    ReportRepository,
    PayoutRepository,
    OtpRepository,
    SequenceRepository,
)
from ...infrastructure.db import (
    MongoUserRepository,
    MongoCameraRepository,
    MongoIncidentRepository,
    MongoReportRepository,
    MongoPayoutRepository,
    MongoOtpRepository,
    MongoSequenceRepository,
)

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class RepositoryProvider:
    """Repository registration provider - wires domain interfaces to infrastructure implementations"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        # Domain interfaces -> Infrastructure implementations
        container.register_singleton(
            UserRepository,
            MongoUserRepository(user_collection=container.get("user_collection"))
        )
        container.register_singleton(
            CameraRepository,
            MongoCameraRepository(camera_collection=container.get("camera_collection"))
        )
        container.register_singleton(
            IncidentRepository,
            MongoIncidentRepository(incident_collection=container.get("incident_collection"))
        )
        container.register_singleton(
            ReportRepository,
            MongoReportRepository(report_collection=container.get("report_collection"))
        )
        container.register_singleton(
            PayoutRepository,
            MongoPayoutRepository(payout_collection=container.get("payout_collection"))
        )
        container.register_singleton(
            OtpRepository,
            MongoOtpRepository(otp_collection=container.get("otp_collection"))
        )
        container.register_singleton(
            SequenceRepository,
            MongoSequenceRepository(counter_collection=container.get("counter_collection"))
        )
