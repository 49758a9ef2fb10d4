from typing import TYPE_CHECKING
from ...infrastructure.db.mongo_connection import (
    get_database,
    get_user_collection,
    get_camera_collection,
    get_incident_collection,
    get_report_collection,
    get_payout_collection,
    get_otp_collection,
    get_counter_collection,
)

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class DatabaseProvider:
    """Centralized database connection provider - single source of truth for all DB connections"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register the database and every collection as singletons.
        Repositories receive their collection from here.
        """
        container.register_singleton("database", get_database())
        container.register_singleton("user_collection", get_user_collection())
        container.register_singleton("camera_collection", get_camera_collection())
        container.register_singleton("incident_collection", get_incident_collection())
        container.register_singleton("report_collection", get_report_collection())
        container.register_singleton("payout_collection", get_payout_collection())
        container.register_singleton("otp_collection", get_otp_collection())
        container.register_singleton("counter_collection", get_counter_collection())
